# backend/eletromaquinas/db/init_db.py
"""
Creación del esquema y carga de datos iniciales.

Se ejecuta en el arranque de la aplicación: crea las tablas que falten y, si
la base de datos está vacía, inserta la cuenta de administrador, las
categorías, los productos de demostración y la configuración por defecto.
Nunca sobrescribe datos existentes.
"""

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from eletromaquinas.core.config import settings
from eletromaquinas.core.security import hash_password
from eletromaquinas.db.database import Base
# Importar todos los modelos para que queden registrados en Base.metadata
from eletromaquinas.db.models.category_model import Category
from eletromaquinas.db.models.order_model import Order, OrderItem  # noqa: F401
from eletromaquinas.db.models.product_model import Product
from eletromaquinas.db.models.settings_model import SETTINGS_ID, StoreSettings
from eletromaquinas.db.models.user_model import ROLE_ADMIN, User

logger = logging.getLogger(__name__)

DEMO_IMAGE = "https://images.unsplash.com/photo-1581094794329-c8112a89af12?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80"

DEFAULT_CATEGORIES = ["Motores", "Geradores", "Transformadores", "Compressores", "Ferramentas"]

DEMO_PRODUCTS = [
    {
        "name": "Motor Elétrico Trifásico 10HP",
        "category": "Motores",
        "price": Decimal("2850.00"),
        "stock": 15,
        "description": "Motor de alta eficiência para aplicações industriais.",
        "specifications": ["10 HP", "220/380V", "1750 RPM", "Proteção IP55"],
        "featured": True,
    },
    {
        "name": "Gerador de Energia 50kVA",
        "category": "Geradores",
        "price": Decimal("12500.00"),
        "stock": 8,
        "description": "Gerador elétrico para standby ou uso contínuo.",
        "specifications": ["50 kVA", "Trifásico", "Silencioso", "Painel digital"],
        "featured": True,
    },
    {
        "name": "Transformador Industrial 100kVA",
        "category": "Transformadores",
        "price": Decimal("8750.00"),
        "stock": 5,
        "description": "Transformador de alta potência para distribuição.",
        "specifications": ["100 kVA", "Alta eficiência", "Resfriamento a óleo"],
        "featured": False,
    },
]


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_initial_data(db: AsyncSession) -> None:
    """Inserta los datos iniciales que falten, colección por colección."""
    admin_email = settings.ADMIN_EMAIL.strip().lower()
    existing_admin = await db.scalar(select(User).filter(User.email == admin_email))
    if not existing_admin:
        db.add(User(
            name=settings.ADMIN_NAME,
            email=admin_email,
            password_hash=hash_password(settings.ADMIN_PASSWORD),
            role=ROLE_ADMIN,
        ))
        logger.info(f"👤 SEED: Cuenta de administrador creada ({admin_email})")

    if not await db.get(StoreSettings, SETTINGS_ID):
        db.add(StoreSettings(
            id=SETTINGS_ID,
            company_name=settings.PROJECT_NAME,
            company_email="contato@eletromaquinas.com",
        ))
        logger.info("⚙️ SEED: Configuración por defecto creada")

    if settings.SEED_DEMO_DATA:
        if not await db.scalar(select(func.count(Category.id))):
            db.add_all([Category(name=name) for name in DEFAULT_CATEGORIES])
            logger.info(f"🗂️ SEED: {len(DEFAULT_CATEGORIES)} categorías creadas")

        if not await db.scalar(select(func.count(Product.id))):
            db.add_all([Product(image=DEMO_IMAGE, images=[DEMO_IMAGE], **data) for data in DEMO_PRODUCTS])
            logger.info(f"📦 SEED: {len(DEMO_PRODUCTS)} productos de demostración creados")

    await db.commit()


async def init_db(engine: AsyncEngine, session_factory: async_sessionmaker) -> None:
    await create_tables(engine)
    async with session_factory() as db:
        await seed_initial_data(db)
