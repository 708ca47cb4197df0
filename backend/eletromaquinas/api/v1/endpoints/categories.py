"""
Endpoint público de categorías.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from eletromaquinas.api import deps
from eletromaquinas.services.category_service import category_service

router = APIRouter()

@router.get("", response_model=List[str])
async def read_categories(db: AsyncSession = Depends(deps.get_db)) -> List[str]:
    """Obtiene los nombres de todas las categorías."""
    return await category_service.get_category_names(db)
