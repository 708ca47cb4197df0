# backend/eletromaquinas/crud/product_crud.py

"""
Operaciones CRUD para el modelo Product.

Funcionalidades principales:
- Filtrado del catálogo por estado, categoría, destacado y texto libre
- Altas y actualizaciones con campos permitidos (los esquemas deciden qué se puede tocar)
- Baja lógica: los productos nunca se eliminan, se marcan como inactivos
- Descuento de stock condicional, seguro frente a pedidos concurrentes
"""

from typing import Any, Dict, List, Optional
from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.db.models.base_model import utcnow
from eletromaquinas.db.models.product_model import Product, PRODUCT_ACTIVE, PRODUCT_INACTIVE
from eletromaquinas.schemas import product_schema

import logging

logger = logging.getLogger(__name__)

# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

async def get_product(db: AsyncSession, product_id: int) -> Optional[Product]:
    """Obtiene un producto por su ID, sea cual sea su estado."""
    result = await db.execute(select(Product).filter(Product.id == product_id))
    return result.scalars().first()


def _matches_search(product: Product, needle: str) -> bool:
    """Subcadena sin distinguir mayúsculas (Unicode) en nombre o descripción."""
    return any(needle in (text or "").casefold() for text in (product.name, product.description))


async def get_products(
    db: AsyncSession,
    active_only: bool = True,
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    search: Optional[str] = None,
) -> List[Product]:
    """
    Obtiene la lista filtrada de productos en orden de inserción.

    La búsqueda de texto se aplica en Python: el LIKE de SQLite solo ignora
    mayúsculas en ASCII y trataría '%' y '_' como comodines.
    """
    query = select(Product)

    if active_only:
        query = query.filter(Product.status == PRODUCT_ACTIVE)
    if category:
        query = query.filter(Product.category == category)
    if featured is not None:
        query = query.filter(Product.featured == featured)

    query = query.order_by(Product.id)
    result = await db.execute(query)
    products = result.scalars().all()

    if search:
        needle = search.casefold()
        products = [product for product in products if _matches_search(product, needle)]
    return products


async def get_products_by_ids(db: AsyncSession, product_ids: List[int]) -> Dict[int, Product]:
    """Obtiene varios productos de una vez, indexados por ID."""
    if not product_ids:
        return {}
    result = await db.execute(select(Product).filter(Product.id.in_(product_ids)))
    return {product.id: product for product in result.scalars().all()}


async def count_products(db: AsyncSession, status: Optional[str] = None) -> int:
    query = select(func.count(Product.id))
    if status:
        query = query.filter(Product.status == status)
    return await db.scalar(query) or 0


async def count_low_stock(db: AsyncSession, threshold: int) -> int:
    return await db.scalar(select(func.count(Product.id)).filter(Product.stock < threshold)) or 0


# ========================================
# OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
# ========================================

async def create_product(db: AsyncSession, product_data: product_schema.ProductCreate) -> Product:
    """Crea un nuevo producto en la base de datos."""
    data = product_data.model_dump()
    if not data.get("image") and data.get("images"):
        data["image"] = data["images"][0]

    db_product = Product(**data)
    db.add(db_product)
    await db.commit()
    await db.refresh(db_product)
    return db_product


async def update_product(db: AsyncSession, db_product: Product, update_data: Dict[str, Any]) -> Product:
    """Aplica sobre el producto solo los campos recibidos."""
    for key, value in update_data.items():
        setattr(db_product, key, value)
    db_product.updated_at = utcnow()

    await db.commit()
    await db.refresh(db_product)
    return db_product


async def deactivate_product(db: AsyncSession, db_product: Product) -> Product:
    """Baja lógica: el producto deja de aparecer en el catálogo público."""
    return await update_product(db, db_product, {"status": PRODUCT_INACTIVE})


async def add_images_to_product(db: AsyncSession, db_product: Product, paths: List[str]) -> Product:
    """Añade imágenes a un producto; la primera pasa a ser la principal si no tenía."""
    images = list(db_product.images or [])
    images.extend(path for path in paths if path not in images)

    update_data: Dict[str, Any] = {"images": images}
    if not db_product.image and images:
        update_data["image"] = images[0]
    return await update_product(db, db_product, update_data)


async def deduct_stock(db: AsyncSession, product_id: int, quantity: int) -> bool:
    """
    Descuenta stock solo si hay suficiente, en una única sentencia UPDATE.

    No hace commit: la transacción la gestiona quien llama. Devuelve False si
    el stock cambió desde la verificación y ya no alcanza.
    """
    result = await db.execute(
        update(Product)
        .where(Product.id == product_id, Product.stock >= quantity)
        .values(stock=Product.stock - quantity, updated_at=utcnow())
        .execution_options(synchronize_session="fetch")
    )
    return result.rowcount == 1
