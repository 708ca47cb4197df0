# backend/eletromaquinas/schemas/order_schema.py
"""
Se encarga de definir los esquemas Pydantic para los modelos Order y OrderItem.
"""

from pydantic import Field
from typing import List, Optional
from datetime import datetime
import enum

from .base_schema import CamelModel

class OrderStatus(str, enum.Enum):
    """Define los posibles estados de una orden."""
    PENDING = "pendente"
    PROCESSING = "processando"
    SHIPPED = "enviado"
    DELIVERED = "entregue"
    CANCELLED = "cancelado"

class PaymentStatus(str, enum.Enum):
    PENDING = "pendente"
    PAID = "pago"
    REFUNDED = "reembolsado"
    CANCELLED = "cancelado"

class OrderItemCreate(CamelModel):
    """Item pedido: el precio se toma siempre del catálogo, no del cliente."""
    product_id: int = Field(..., description="ID del producto")
    quantity: int = Field(..., description="Cantidad del producto", gt=0)

class OrderItemResponse(CamelModel):
    """Esquema de respuesta para un item de orden."""
    product_id: int
    product_name: str
    quantity: int
    price: float
    subtotal: float

class OrderCreate(CamelModel):
    """Esquema para crear una nueva orden, con su lista de items."""
    client_id: Optional[int] = Field(None, description="ID del cliente (referencia débil)")
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    shipping_address: Optional[str] = None
    payment_method: Optional[str] = None
    notes: Optional[str] = None
    items: List[OrderItemCreate] = Field(..., description="Items de la orden", min_length=1)

class OrderResponse(CamelModel):
    """Esquema completo de respuesta para una orden."""
    id: int
    order_number: Optional[str] = None
    client_id: Optional[int] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    shipping_address: Optional[str] = None
    payment_method: Optional[str] = None
    notes: Optional[str] = None
    items: List[OrderItemResponse] = []
    subtotal: float
    discount: float
    shipping: float
    total: float
    status: str
    payment_status: str
    created_at: datetime
    updated_at: datetime

class OrderCreatedResponse(CamelModel):
    success: bool = True
    order: OrderResponse

class OrderUpdate(CamelModel):
    """Campos de una orden que la administración puede modificar."""
    status: Optional[OrderStatus] = Field(None, description="Nuevo estado de la orden")
    payment_status: Optional[PaymentStatus] = Field(None, description="Nuevo estado del pago")
    notes: Optional[str] = None
