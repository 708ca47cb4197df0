# backend/eletromaquinas/schemas/category_schema.py

"""
Esquemas Pydantic para el modelo Category.

El catálogo público solo expone los nombres de las categorías; estos esquemas
se usan en la administración.
"""

from pydantic import Field, field_validator

from .base_schema import CamelModel


class CategoryCreate(CamelModel):
    """Esquema para crear una nueva categoría."""
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("O nome da categoria é obrigatório")
        return value


class CategoryResponse(CamelModel):
    """Esquema para las respuestas de la API al leer categorías."""
    id: int
    name: str
