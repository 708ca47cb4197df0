# backend/eletromaquinas/services/order_service.py
"""
Servicio de pedidos.

Valida todas las líneas del pedido antes de tocar nada (existencia, estado y
stock), calcula los totales con los precios del catálogo y la política de
envío de la configuración, y delega en order_crud la creación transaccional.
"""

import logging
from decimal import Decimal
from typing import Dict, List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.core.exceptions import InsufficientStockError, InvalidOperationError, NotFoundError
from eletromaquinas.crud import order_crud, product_crud, settings_crud
from eletromaquinas.db.models.order_model import Order
from eletromaquinas.db.models.product_model import PRODUCT_ACTIVE, Product
from eletromaquinas.schemas.order_schema import OrderCreate, OrderUpdate

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


class OrderService:

    async def _resolve_lines(self, db: AsyncSession, order_in: OrderCreate) -> List[Tuple[Product, int]]:
        """
        Verifica cada item del pedido. Un solo item inválido aborta el pedido completo.
        """
        # Líneas repetidas del mismo producto se suman: el stock se compara con el total
        quantities: Dict[int, int] = {}
        for item in order_in.items:
            quantities[item.product_id] = quantities.get(item.product_id, 0) + item.quantity

        products = await product_crud.get_products_by_ids(db, list(quantities))

        lines = []
        for product_id, quantity in quantities.items():
            product = products.get(product_id)
            if not product:
                raise InvalidOperationError(f"Produto {product_id} não encontrado")
            if product.status != PRODUCT_ACTIVE:
                raise InvalidOperationError(f"Produto indisponível: {product.name}")
            if product.stock < quantity:
                raise InsufficientStockError(product.name, quantity, product.stock)
            lines.append((product, quantity))
        return lines

    async def _calculate_totals(self, db: AsyncSession, lines: List[Tuple[Product, int]]) -> Dict[str, Decimal]:
        store_settings = await settings_crud.get_settings(db)

        subtotal = sum((Decimal(product.price) * quantity for product, quantity in lines), Decimal("0"))
        if subtotal >= Decimal(store_settings.free_shipping_threshold):
            shipping = Decimal("0")
        else:
            shipping = Decimal(store_settings.shipping_cost)
        discount = Decimal("0")
        total = subtotal - discount + shipping

        return {
            "subtotal": subtotal.quantize(CENT),
            "discount": discount.quantize(CENT),
            "shipping": shipping.quantize(CENT),
            "total": total.quantize(CENT),
        }

    async def create_order(self, db: AsyncSession, order_in: OrderCreate) -> Order:
        """
        Crea un pedido y descuenta el stock de cada producto.

        Raises:
            InvalidOperationError: producto inexistente o inactivo
            InsufficientStockError: cantidad mayor que el stock
        """
        lines = await self._resolve_lines(db, order_in)
        totals = await self._calculate_totals(db, lines)

        order = await order_crud.create_order(db, order_in, lines, totals)
        logger.info(
            f"🛒 PEDIDO: Creado {order.order_number} con {len(lines)} item(s), total {order.total}"
        )
        return order

    async def get_order(self, db: AsyncSession, order_id: int) -> Order:
        order = await order_crud.get_order(db, order_id)
        if not order:
            raise NotFoundError("Pedido não encontrado")
        return order

    async def list_orders(self, db: AsyncSession) -> List[Order]:
        """Todos los pedidos, del más reciente al más antiguo."""
        return await order_crud.get_orders(db)

    async def list_client_orders(self, db: AsyncSession, client_id: int) -> List[Order]:
        return await order_crud.get_orders(db, client_id=client_id)

    async def update_order(self, db: AsyncSession, order_id: int, order_in: OrderUpdate) -> Order:
        """
        Actualiza estado, estado de pago o notas; los importes no se pueden tocar.
        """
        order = await self.get_order(db, order_id)
        update_data = {
            key: value
            for key, value in order_in.model_dump(exclude_unset=True, mode="json").items()
            if value is not None or key == "notes"
        }
        order = await order_crud.update_order(db, order, update_data)
        logger.info(f"🔄 PEDIDO: Actualizado {order.order_number} ({update_data})")
        return order


order_service = OrderService()
