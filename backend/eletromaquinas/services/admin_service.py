# backend/eletromaquinas/services/admin_service.py
"""
Servicio del panel de administración: indicadores, configuración y backup.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.crud import category_crud, order_crud, product_crud, settings_crud, user_crud
from eletromaquinas.db.models.product_model import PRODUCT_ACTIVE
from eletromaquinas.db.models.settings_model import StoreSettings
from eletromaquinas.db.models.user_model import ROLE_CLIENT
from eletromaquinas.schemas.admin_schema import BackupExport, DashboardStats
from eletromaquinas.schemas.order_schema import OrderStatus
from eletromaquinas.schemas.settings_schema import SettingsUpdate
from eletromaquinas.schemas.user_schema import UserResponse

logger = logging.getLogger(__name__)


class AdminService:

    async def get_dashboard_stats(self, db: AsyncSession) -> DashboardStats:
        """
        Calcula los indicadores del panel con agregados SQL en cada petición.
        """
        store_settings = await settings_crud.get_settings(db)
        return DashboardStats(
            total_products=await product_crud.count_products(db),
            active_products=await product_crud.count_products(db, status=PRODUCT_ACTIVE),
            total_clients=await user_crud.count_users(db, role=ROLE_CLIENT),
            total_sales=await order_crud.count_orders(db),
            total_revenue=float(await order_crud.get_total_revenue(db)),
            pending_orders=await order_crud.count_orders(db, status=OrderStatus.PENDING.value),
            low_stock_products=await product_crud.count_low_stock(db, store_settings.low_stock_threshold),
        )

    async def get_settings(self, db: AsyncSession) -> StoreSettings:
        return await settings_crud.get_settings(db)

    async def update_settings(self, db: AsyncSession, settings_in: SettingsUpdate) -> StoreSettings:
        """Solo se aplican las claves definidas en SettingsUpdate."""
        update_data = {
            key: value
            for key, value in settings_in.model_dump(exclude_unset=True).items()
            if value is not None or key in ("company_email", "company_phone", "company_address", "cnpj")
        }
        db_settings = await settings_crud.update_settings(db, update_data)
        logger.info(f"⚙️ CONFIGURACIÓN: Actualizada (campos: {sorted(update_data)})")
        return db_settings

    async def export_backup(self, db: AsyncSession) -> BackupExport:
        """
        Exporta todas las colecciones en un único documento JSON.
        Las contraseñas no se incluyen.
        """
        users = await user_crud.get_all_users(db)
        products = await product_crud.get_products(db, active_only=False)
        categories = await category_crud.get_categories(db)
        orders = await order_crud.get_orders(db)
        store_settings = await settings_crud.get_settings(db)

        backup = BackupExport(
            generated_at=datetime.now(timezone.utc),
            users=[UserResponse.model_validate(user).model_dump(by_alias=True, mode="json") for user in users],
            products=[product.to_dict() for product in products],
            categories=[category.name for category in categories],
            orders=[order.to_dict() for order in orders],
            settings=store_settings.to_dict(),
        )
        logger.info(
            f"💾 BACKUP: {len(users)} cuentas, {len(products)} productos, {len(orders)} pedidos exportados"
        )
        return backup


admin_service = AdminService()
