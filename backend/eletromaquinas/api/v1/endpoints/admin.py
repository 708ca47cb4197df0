# backend/eletromaquinas/api/v1/endpoints/admin.py
"""
Endpoints REST del panel de administración.

Todas las rutas de este router exigen un token de administrador (la guarda se
aplica al incluir el router en api_router.py).
"""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from eletromaquinas.api import deps
from eletromaquinas.core.exceptions import NotFoundError
from eletromaquinas.db.models.user_model import ROLE_CLIENT, ROLE_VENDOR, User
from eletromaquinas.schemas import product_schema
from eletromaquinas.schemas.admin_schema import BackupExport, DashboardStats
from eletromaquinas.schemas.category_schema import CategoryCreate, CategoryResponse
from eletromaquinas.schemas.order_schema import OrderResponse, OrderUpdate
from eletromaquinas.schemas.settings_schema import SettingsResponse, SettingsUpdate
from eletromaquinas.schemas.user_schema import AccountStatusUpdate, UserResponse, VendorCreate
from eletromaquinas.services.admin_service import admin_service
from eletromaquinas.services.auth_service import auth_service
from eletromaquinas.services.category_service import category_service
from eletromaquinas.services.order_service import order_service
from eletromaquinas.services.product_service import product_service
from eletromaquinas.services.upload_service import upload_service

logger = logging.getLogger(__name__)
router = APIRouter()


# ========================================
# PRODUCTOS
# ========================================

@router.get("/products", response_model=List[product_schema.ProductResponse])
async def read_all_products(db: AsyncSession = Depends(deps.get_db)):
    """Todos los productos, incluidos los inactivos."""
    return await product_service.list_all(db)


@router.get("/products/{product_id}", response_model=product_schema.ProductResponse)
async def read_product(product_id: int, db: AsyncSession = Depends(deps.get_db)):
    try:
        return await product_service.get_product(db, product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.post("/products", response_model=product_schema.ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_in: product_schema.ProductCreate,
):
    """Crea un nuevo producto en el catálogo."""
    logger.info(f"🆕 PRODUCTO: Creando producto '{product_in.name}'")
    return await product_service.create_new_product(db, product_in)


@router.put("/products/{product_id}", response_model=product_schema.ProductResponse)
async def update_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
    product_in: product_schema.ProductUpdate,
):
    """Actualiza un producto existente; solo cambian los campos enviados."""
    logger.info(f"🔄 PRODUCTO: Actualizando producto ID {product_id}")
    return await product_service.update_existing_product(db, product_id, product_in)


@router.delete("/products/{product_id}", response_model=product_schema.ProductDeleteResponse)
async def delete_product(product_id: int, db: AsyncSession = Depends(deps.get_db)):
    """Baja lógica: el producto pasa a 'inativo' y deja de mostrarse en la tienda."""
    product = await product_service.deactivate_product(db, product_id)
    return product_schema.ProductDeleteResponse(
        message="Produto desativado",
        product=product_schema.ProductResponse.model_validate(product),
    )


@router.post("/products/{product_id}/images", response_model=product_schema.ProductResponse)
async def upload_product_images(
    product_id: int,
    images: List[UploadFile] = File(...),
    db: AsyncSession = Depends(deps.get_db),
):
    """Sube imágenes y las añade a la galería del producto."""
    # Comprobar el producto antes de guardar nada
    await product_service.get_product(db, product_id)
    stored = await upload_service.save_images(images)
    return await product_service.add_images(db, product_id, [item.path for item in stored])


# ========================================
# CATEGORÍAS
# ========================================

@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(category_in: CategoryCreate, db: AsyncSession = Depends(deps.get_db)):
    return await category_service.create_new_category(db, category_in)


# ========================================
# CUENTAS
# ========================================

@router.get("/clients", response_model=List[UserResponse])
async def read_clients(db: AsyncSession = Depends(deps.get_db)):
    return await auth_service.list_accounts(db, ROLE_CLIENT)


@router.get("/vendors", response_model=List[UserResponse])
async def read_vendors(db: AsyncSession = Depends(deps.get_db)):
    return await auth_service.list_accounts(db, ROLE_VENDOR)


@router.post("/vendors", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_vendor(vendor_in: VendorCreate, db: AsyncSession = Depends(deps.get_db)):
    return await auth_service.create_vendor(db, vendor_in)


@router.put("/accounts/{account_id}/status", response_model=UserResponse)
async def update_account_status(
    account_id: int,
    status_in: AccountStatusUpdate,
    db: AsyncSession = Depends(deps.get_db),
    current_admin: User = Depends(deps.get_current_admin),
):
    """Activa o desactiva una cuenta (cliente, vendedor o administrador)."""
    return await auth_service.set_account_status(db, account_id, status_in.status, current_admin)


# ========================================
# PEDIDOS
# ========================================

@router.get("/orders", response_model=List[OrderResponse])
async def read_orders(db: AsyncSession = Depends(deps.get_db)):
    """Todos los pedidos, del más reciente al más antiguo."""
    return await order_service.list_orders(db)


@router.get("/orders/{order_id}", response_model=OrderResponse)
async def read_order(order_id: int, db: AsyncSession = Depends(deps.get_db)):
    return await order_service.get_order(db, order_id)


@router.put("/orders/{order_id}", response_model=OrderResponse)
async def update_order(order_id: int, order_in: OrderUpdate, db: AsyncSession = Depends(deps.get_db)):
    return await order_service.update_order(db, order_id, order_in)


# ========================================
# PANEL, CONFIGURACIÓN Y BACKUP
# ========================================

@router.get("/stats", response_model=DashboardStats)
async def read_stats(db: AsyncSession = Depends(deps.get_db)):
    return await admin_service.get_dashboard_stats(db)


@router.get("/settings", response_model=SettingsResponse)
async def read_settings(db: AsyncSession = Depends(deps.get_db)):
    return await admin_service.get_settings(db)


@router.put("/settings", response_model=SettingsResponse)
async def update_settings(settings_in: SettingsUpdate, db: AsyncSession = Depends(deps.get_db)):
    return await admin_service.update_settings(db, settings_in)


@router.get("/backup", response_model=BackupExport)
async def export_backup(db: AsyncSession = Depends(deps.get_db)):
    """Exporta todas las colecciones (sin contraseñas) en un documento JSON."""
    return await admin_service.export_backup(db)
