# backend/eletromaquinas/crud/order_crud.py
"""
Operaciones CRUD para el modelo Order.

Este módulo proporciona funciones para crear y gestionar pedidos, incluyendo la
generación del número de pedido, el descuento de stock dentro de la misma
transacción y la actualización de estados.
"""

import time
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.core.exceptions import InsufficientStockError
from eletromaquinas.crud import product_crud
from eletromaquinas.db.models.base_model import utcnow
from eletromaquinas.db.models.order_model import Order, OrderItem
from eletromaquinas.db.models.product_model import Product
from eletromaquinas.schemas.order_schema import OrderCreate, OrderStatus


def build_order_number(order_id: int) -> str:
    """
    Número de pedido con el formato PED + sufijo del timestamp + ID, p. ej. PED4821930007.
    """
    timestamp_suffix = str(int(time.time() * 1000))[-6:]
    return f"PED{timestamp_suffix}{order_id:04d}"


async def create_order(
    db: AsyncSession,
    order_in: OrderCreate,
    lines: List[Tuple[Product, int]],
    totals: Dict[str, Decimal],
) -> Order:
    """
    Crea el pedido y descuenta el stock de cada línea en una sola transacción.

    PRECONDICIÓN: el servicio ya verificó existencia y stock de cada producto.
    Si el stock de alguna línea cambió entretanto se revierte todo y se lanza
    InsufficientStockError; ningún producto queda descontado a medias.
    """
    db_order = Order(
        client_id=order_in.client_id,
        customer_name=order_in.customer_name,
        customer_email=order_in.customer_email,
        customer_phone=order_in.customer_phone,
        shipping_address=order_in.shipping_address,
        payment_method=order_in.payment_method,
        notes=order_in.notes,
        subtotal=totals["subtotal"],
        discount=totals["discount"],
        shipping=totals["shipping"],
        total=totals["total"],
        status=OrderStatus.PENDING.value,
        payment_status="pendente",
    )
    for product, quantity in lines:
        db_order.items.append(OrderItem(
            product_id=product.id,
            product_name=product.name,
            quantity=quantity,
            price=product.price,
        ))
    db.add(db_order)

    for product, quantity in lines:
        product_name, available = product.name, product.stock
        if not await product_crud.deduct_stock(db, product_id=product.id, quantity=quantity):
            # rollback expira los objetos de la sesión: usar solo valores ya leídos
            await db.rollback()
            raise InsufficientStockError(product_name, quantity, available)

    await db.flush()
    db_order.order_number = build_order_number(db_order.id)

    await db.commit()
    return db_order


async def get_order(db: AsyncSession, order_id: int) -> Optional[Order]:
    """
    Obtiene un pedido por su ID, con sus items.
    """
    result = await db.execute(select(Order).filter(Order.id == order_id))
    return result.scalars().first()


async def get_orders(db: AsyncSession, client_id: Optional[int] = None) -> List[Order]:
    """
    Lista los pedidos del más reciente al más antiguo, opcionalmente de un cliente.
    """
    query = select(Order)
    if client_id is not None:
        query = query.filter(Order.client_id == client_id)
    query = query.order_by(Order.created_at.desc(), Order.id.desc())
    result = await db.execute(query)
    return result.scalars().all()


async def update_order(db: AsyncSession, db_order: Order, update_data: Dict[str, Any]) -> Order:
    """
    Aplica al pedido únicamente los campos recibidos.
    """
    for key, value in update_data.items():
        setattr(db_order, key, value)
    db_order.updated_at = utcnow()

    await db.commit()
    return db_order


async def count_orders(db: AsyncSession, status: Optional[str] = None) -> int:
    query = select(func.count(Order.id))
    if status:
        query = query.filter(Order.status == status)
    return await db.scalar(query) or 0


async def get_total_revenue(db: AsyncSession) -> Decimal:
    """Suma de los totales de todos los pedidos no cancelados."""
    query = select(func.coalesce(func.sum(Order.total), 0)).filter(
        Order.status != OrderStatus.CANCELLED.value
    )
    return await db.scalar(query) or Decimal("0")
