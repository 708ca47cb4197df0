# backend/eletromaquinas/db/models/product_model.py
from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, Numeric, String, Text

from eletromaquinas.db.database import Base
from eletromaquinas.db.models.base_model import utcnow

PRODUCT_ACTIVE = "ativo"
PRODUCT_INACTIVE = "inativo"


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    category = Column(String(100), nullable=True, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    description = Column(Text, nullable=True)
    specifications = Column(JSON, nullable=False, default=list)
    image = Column(Text, nullable=True)
    images = Column(JSON, nullable=False, default=list)
    status = Column(String(20), nullable=False, default=PRODUCT_ACTIVE, index=True)
    featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def to_dict(self):
        """Convierte el objeto Product en un diccionario (usado por el backup)."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "price": float(self.price) if self.price is not None else 0.0,
            "stock": self.stock,
            "description": self.description,
            "specifications": list(self.specifications or []),
            "image": self.image,
            "images": list(self.images or []),
            "status": self.status,
            "featured": self.featured,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
