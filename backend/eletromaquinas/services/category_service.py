# backend/eletromaquinas/services/category_service.py
"""
Servicio para operaciones de negocio relacionadas con categorías.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.core.exceptions import DuplicateError
from eletromaquinas.crud import category_crud
from eletromaquinas.db.models.category_model import Category
from eletromaquinas.schemas import category_schema

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Servicio para operaciones de negocio relacionadas con categorías.

    Las categorías son una lista plana de nombres únicos (sin distinguir
    mayúsculas); los productos guardan el nombre, no un ID.
    """

    async def get_category_names(self, db: AsyncSession) -> List[str]:
        """Nombres de todas las categorías, en orden de creación."""
        categories = await category_crud.get_categories(db)
        return [category.name for category in categories]

    async def create_new_category(self, db: AsyncSession, category_in: category_schema.CategoryCreate) -> Category:
        """
        Crea una categoría nueva.

        Raises:
            DuplicateError: si ya existe una categoría con ese nombre
        """
        if await category_crud.get_category_by_name(db, category_in.name):
            raise DuplicateError(f"Categoria '{category_in.name}' já existe")
        category = await category_crud.create_category(db, name=category_in.name)
        logger.info(f"🗂️ CATEGORÍA: Creada '{category.name}'")
        return category

    async def ensure_category(self, db: AsyncSession, name: str) -> Category:
        """Devuelve la categoría con ese nombre, creándola si no existe."""
        category = await category_crud.get_category_by_name(db, name)
        if category:
            return category
        logger.info(f"🗂️ CATEGORÍA: Registrando '{name}' a partir de un producto")
        return await category_crud.create_category(db, name=name)


# ========================================
# INSTANCIA SINGLETON DEL SERVICIO
# ========================================

category_service = CategoryService()
