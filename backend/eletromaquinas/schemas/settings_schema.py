# backend/eletromaquinas/schemas/settings_schema.py
"""
Esquemas Pydantic para la configuración de la tienda.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base_schema import CamelModel


class SettingsResponse(CamelModel):
    company_name: str
    company_email: Optional[str] = None
    company_phone: Optional[str] = None
    company_address: Optional[str] = None
    cnpj: Optional[str] = None
    free_shipping_threshold: float
    shipping_cost: float
    low_stock_threshold: int
    updated_at: datetime


class SettingsUpdate(CamelModel):
    """
    Solo estas claves se pueden modificar; el resto del cuerpo se descarta.
    """
    company_name: Optional[str] = Field(default=None, min_length=1)
    company_email: Optional[str] = None
    company_phone: Optional[str] = None
    company_address: Optional[str] = None
    cnpj: Optional[str] = None
    free_shipping_threshold: Optional[float] = Field(default=None, ge=0)
    shipping_cost: Optional[float] = Field(default=None, ge=0)
    low_stock_threshold: Optional[int] = Field(default=None, ge=0)
