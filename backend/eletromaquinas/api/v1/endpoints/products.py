# backend/eletromaquinas/api/v1/endpoints/products.py

"""
Endpoints REST públicos del catálogo de productos.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from eletromaquinas.api import deps
from eletromaquinas.core.exceptions import NotFoundError
from eletromaquinas.schemas import product_schema
from eletromaquinas.services.product_service import product_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[product_schema.ProductResponse])
async def read_products(
    db: AsyncSession = Depends(deps.get_db),
    search: Optional[str] = None,
    category: Optional[str] = None,
    featured: Optional[str] = None,
) -> List[product_schema.ProductResponse]:
    """Lista los productos activos, con filtros opcionales de categoría, destacado y búsqueda."""
    logger.debug(f"📋 PRODUCTOS: Listando con filtros - search={search!r}, category={category!r}, featured={featured}")

    products = await product_service.list_catalog(db, category=category, featured=featured, search=search)

    logger.debug(f"📋 PRODUCTOS: Encontrados {len(products)} resultados")
    return products


@router.get("/{product_id}", response_model=product_schema.ProductResponse)
async def read_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
) -> product_schema.ProductResponse:
    """Obtiene los detalles de un producto por ID."""
    try:
        return await product_service.get_product(db, product_id)
    except NotFoundError as e:
        logger.warning(f"⚠️ PRODUCTO: No encontrado ID {product_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
