# backend/eletromaquinas/crud/category_crud.py

"""
Operaciones CRUD para el modelo Category.
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.db.models.category_model import Category


async def get_categories(db: AsyncSession) -> List[Category]:
    """Obtiene todas las categorías en orden de creación."""
    result = await db.execute(select(Category).order_by(Category.id))
    return result.scalars().all()


async def get_category_by_name(db: AsyncSession, name: str) -> Optional[Category]:
    """Busca una categoría por nombre, sin distinguir mayúsculas."""
    result = await db.execute(select(Category).filter(func.lower(Category.name) == name.lower()))
    return result.scalars().first()


async def create_category(db: AsyncSession, name: str) -> Category:
    db_category = Category(name=name)
    db.add(db_category)
    await db.commit()
    await db.refresh(db_category)
    return db_category
