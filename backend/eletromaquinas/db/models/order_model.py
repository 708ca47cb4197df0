# backend/eletromaquinas/db/models/order_model.py
"""
Este archivo contiene el modelo de pedido para la aplicación.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from eletromaquinas.db.database import Base
from eletromaquinas.db.models.base_model import utcnow


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_number = Column(String(50), unique=True, index=True, nullable=True)
    # Referencia débil: no se valida que el cliente exista
    client_id = Column(Integer, nullable=True, index=True)
    customer_name = Column(String(255), nullable=True)
    customer_email = Column(String(255), nullable=True)
    customer_phone = Column(String(50), nullable=True)
    shipping_address = Column(Text, nullable=True)
    payment_method = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)
    subtotal = Column(Numeric(10, 2), nullable=False, default=0)
    discount = Column(Numeric(10, 2), nullable=False, default=0)
    shipping = Column(Numeric(10, 2), nullable=False, default=0)
    total = Column(Numeric(10, 2), nullable=False, default=0)
    status = Column(String(20), nullable=False, default="pendente", index=True)
    payment_status = Column(String(20), nullable=False, default="pendente")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OrderItem.id",
    )

    def __repr__(self):
        return f"<Order(id={self.id}, number='{self.order_number}', status='{self.status}')>"

    def to_dict(self):
        """Convierte el objeto Order y sus items a un diccionario."""
        return {
            "id": self.id,
            "orderNumber": self.order_number,
            "clientId": self.client_id,
            "customerName": self.customer_name,
            "customerEmail": self.customer_email,
            "customerPhone": self.customer_phone,
            "shippingAddress": self.shipping_address,
            "paymentMethod": self.payment_method,
            "notes": self.notes,
            "subtotal": float(self.subtotal),
            "discount": float(self.discount),
            "shipping": float(self.shipping),
            "total": float(self.total),
            "status": self.status,
            "paymentStatus": self.payment_status,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
            "items": [
                {
                    "productId": item.product_id,
                    "productName": item.product_name,
                    "quantity": item.quantity,
                    "price": float(item.price),
                } for item in self.items
            ]
        }


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    # Nombre y precio congelados al momento de la compra
    product_name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    order = relationship("Order", back_populates="items")

    @property
    def subtotal(self):
        return self.price * self.quantity

    def __repr__(self):
        return f"<OrderItem(id={self.id}, order_id={self.order_id}, product_id={self.product_id})>"
