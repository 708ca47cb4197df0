# backend/eletromaquinas/services/product_service.py

"""
Capa de servicios para operaciones de negocio relacionadas con productos.

Esta capa implementa el patrón Service Layer para el dominio de productos,
proporcionando una abstracción de alto nivel sobre las operaciones CRUD:

Responsabilidades principales:
- Catálogo público: solo productos activos, con filtros combinables
- Validación de existencia antes de actualizar o dar de baja
- Mantener sincronizada la lista de categorías con las de los productos
- Baja lógica en lugar de eliminación física
- Asociación de imágenes subidas a un producto

Patrones implementados:
- Service Layer: Lógica de negocio centralizada
- Composition: Utiliza varios módulos CRUD (productos y categorías)
- Error Handling: Excepciones de dominio de eletromaquinas.core.exceptions
"""

from typing import List, Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.core.exceptions import NotFoundError
from eletromaquinas.crud import product_crud
from eletromaquinas.db.models.product_model import Product
from eletromaquinas.schemas import product_schema
from eletromaquinas.services.category_service import category_service

# Configurar logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Servicio para operaciones de negocio relacionadas con productos.

    Características principales:
    - Filtro del catálogo público (estado, categoría, destacado, búsqueda)
    - Altas y actualizaciones con campos permitidos
    - Baja lógica (status = inativo)
    - Gestión de la galería de imágenes
    """

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def list_catalog(
        self,
        db: AsyncSession,
        category: Optional[str] = None,
        featured: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Product]:
        """
        Catálogo público: solo productos activos, en orden de inserción.

        El filtro de destacados solo se aplica con featured="true"; cualquier
        otro valor se ignora y devuelve el catálogo completo.
        """
        search = search.strip() if search else None
        featured_only = bool(featured) and featured.strip().lower() == "true"
        return await product_crud.get_products(
            db,
            active_only=True,
            category=category,
            featured=True if featured_only else None,
            search=search or None,
        )

    async def list_all(self, db: AsyncSession) -> List[Product]:
        """Todos los productos, activos e inactivos (panel de administración)."""
        return await product_crud.get_products(db, active_only=False)

    async def get_product(self, db: AsyncSession, product_id: int) -> Product:
        """
        Obtiene un producto por ID.

        Raises:
            NotFoundError: si no existe
        """
        product = await product_crud.get_product(db, product_id=product_id)
        if not product:
            raise NotFoundError("Produto não encontrado")
        return product

    # ========================================
    # OPERACIONES DE ESCRITURA CON ORQUESTACIÓN
    # ========================================

    async def create_new_product(self, db: AsyncSession, product_in: product_schema.ProductCreate) -> Product:
        """
        Crea un nuevo producto; su categoría se registra si aún no existe.
        """
        if product_in.category:
            await category_service.ensure_category(db, product_in.category)

        product = await product_crud.create_product(db, product_data=product_in)
        logger.info(f"✅ PRODUCTO: Creado ID {product.id} '{product.name}'")
        return product

    async def update_existing_product(
        self, db: AsyncSession, product_id: int, product_in: product_schema.ProductUpdate
    ) -> Product:
        """
        Actualiza solo los campos presentes en el cuerpo de la petición.
        """
        product = await self.get_product(db, product_id)

        update_data = product_in.model_dump(exclude_unset=True)
        # Campos obligatorios en la base de datos: un null explícito no los borra
        for key in ("name", "price", "stock", "specifications", "images", "status", "featured"):
            if key in update_data and update_data[key] is None:
                del update_data[key]

        if update_data.get("category"):
            await category_service.ensure_category(db, update_data["category"])

        updated = await product_crud.update_product(db, product, update_data)
        logger.info(f"🔄 PRODUCTO: Actualizado ID {product_id} (campos: {sorted(update_data)})")
        return updated

    async def deactivate_product(self, db: AsyncSession, product_id: int) -> Product:
        """
        Baja lógica: el producto se marca como inactivo y sale del catálogo.
        Los pedidos que lo referencian siguen siendo válidos.
        """
        product = await self.get_product(db, product_id)
        product = await product_crud.deactivate_product(db, product)
        logger.info(f"🗑️ PRODUCTO: Desactivado ID {product_id}")
        return product

    async def add_images(self, db: AsyncSession, product_id: int, paths: List[str]) -> Product:
        product = await self.get_product(db, product_id)
        return await product_crud.add_images_to_product(db, product, paths)


# ========================================
# INSTANCIA SINGLETON DEL SERVICIO
# ========================================

product_service = ProductService()
