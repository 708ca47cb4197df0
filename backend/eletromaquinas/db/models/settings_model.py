# backend/eletromaquinas/db/models/settings_model.py
"""
Configuración de la tienda: registro único (id = 1) con los datos de la
empresa y las reglas de envío.
"""

from sqlalchemy import Column, DateTime, Integer, Numeric, String, Text

from eletromaquinas.db.database import Base
from eletromaquinas.db.models.base_model import utcnow

SETTINGS_ID = 1


class StoreSettings(Base):
    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, default=SETTINGS_ID)
    company_name = Column(String(255), nullable=False, default="EletroMáquinas")
    company_email = Column(String(255), nullable=True)
    company_phone = Column(String(50), nullable=True)
    company_address = Column(Text, nullable=True)
    cnpj = Column(String(20), nullable=True)
    free_shipping_threshold = Column(Numeric(10, 2), nullable=False, default=5000)
    shipping_cost = Column(Numeric(10, 2), nullable=False, default=150)
    low_stock_threshold = Column(Integer, nullable=False, default=5)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def to_dict(self):
        return {
            "companyName": self.company_name,
            "companyEmail": self.company_email,
            "companyPhone": self.company_phone,
            "companyAddress": self.company_address,
            "cnpj": self.cnpj,
            "freeShippingThreshold": float(self.free_shipping_threshold),
            "shippingCost": float(self.shipping_cost),
            "lowStockThreshold": self.low_stock_threshold,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
