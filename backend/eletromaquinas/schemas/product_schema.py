# backend/eletromaquinas/schemas/product_schema.py
"""
Esquemas Pydantic para el modelo Product.

Se encarga de definir los esquemas de entrada (creación y actualización) y de
salida de los productos del catálogo.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from .base_schema import CamelModel

ProductStatus = Literal["ativo", "inativo"]


def _split_specifications(value):
    """Permite recibir las especificaciones como texto, una por línea."""
    if isinstance(value, str):
        return [line.strip() for line in value.splitlines() if line.strip()]
    return value


# ========================================
# ESQUEMA BASE
# ========================================

class ProductBase(CamelModel):
    """Propiedades comunes compartidas entre esquemas de producto."""
    name: str = Field(..., min_length=1, max_length=255)
    category: Optional[str] = None
    price: float = Field(..., ge=0)
    stock: int = Field(default=0, ge=0)
    description: Optional[str] = None
    specifications: List[str] = []
    image: Optional[str] = None
    images: List[str] = []
    status: ProductStatus = "ativo"
    featured: bool = False


# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class ProductCreate(ProductBase):
    """Esquema para crear un nuevo producto. El id lo asigna la base de datos."""

    @field_validator("specifications", mode="before")
    @classmethod
    def parse_specifications(cls, value):
        return _split_specifications(value)


class ProductUpdate(CamelModel):
    """
    Esquema para actualizar un producto. Todos los campos son opcionales y solo
    se aplican los enviados; cualquier otra clave del cuerpo se ignora.
    """
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    category: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    stock: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None
    specifications: Optional[List[str]] = None
    image: Optional[str] = None
    images: Optional[List[str]] = None
    status: Optional[ProductStatus] = None
    featured: Optional[bool] = None

    @field_validator("specifications", mode="before")
    @classmethod
    def parse_specifications_optional(cls, value):
        if value is None:
            return None
        return _split_specifications(value)


# ========================================
# ESQUEMA DE RESPUESTA
# ========================================

class ProductResponse(ProductBase):
    """Esquema de respuesta para un producto."""
    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class ProductDeleteResponse(CamelModel):
    success: bool = True
    message: str
    product: ProductResponse
