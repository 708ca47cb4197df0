# backend/eletromaquinas/api/v1/endpoints/orders.py
"""
Este archivo contiene los endpoints públicos de pedidos.

Se encarga de crear pedidos desde la tienda y de listar los pedidos de la
cuenta autenticada.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from eletromaquinas.api import deps
from eletromaquinas.db.models.user_model import User
from eletromaquinas.schemas.order_schema import OrderCreate, OrderCreatedResponse, OrderResponse
from eletromaquinas.services.order_service import order_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=OrderCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_order(order_in: OrderCreate, db: AsyncSession = Depends(deps.get_db)):
    """
    Crea un pedido:
    1. Verifica que todos los productos existan, estén activos y tengan stock.
    2. Calcula subtotal, envío y total con los precios del catálogo.
    3. Crea el pedido y descuenta el stock en una única transacción.
    Si algún item falla no se modifica nada y se responde 400.
    """
    logger.info(f"🛒 PEDIDO: Solicitud con {len(order_in.items)} item(s) para cliente {order_in.client_id}")
    order = await order_service.create_order(db, order_in)
    return OrderCreatedResponse(order=OrderResponse.model_validate(order))


@router.get("", response_model=List[OrderResponse])
async def read_my_orders(
    db: AsyncSession = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """Pedidos de la cuenta autenticada, del más reciente al más antiguo."""
    return await order_service.list_client_orders(db, current_user.id)
