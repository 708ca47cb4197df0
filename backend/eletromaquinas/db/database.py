# backend/eletromaquinas/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo establece la conexión con la base de datos usando SQLAlchemy y define
los componentes básicos que serán utilizados por toda la aplicación:
- Motor de base de datos (engine)
- Fábrica de sesiones (AsyncSessionLocal)
- Clase base para modelos (Base)

Por defecto se usa SQLite embebido (aiosqlite); si POSTGRES_SERVER está definido
se conecta a PostgreSQL con asyncpg. La función get_db() vive en
eletromaquinas/api/deps.py.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from eletromaquinas.core.config import settings # Importamos nuestra configuración


def build_engine(url: str) -> AsyncEngine:
    """Crea el motor asíncrono; SQLite necesita compartir la conexión entre hilos."""
    if url.startswith("sqlite"):
        return create_async_engine(url, connect_args={"check_same_thread": False})
    return create_async_engine(url, pool_pre_ping=True)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker:
    # expire_on_commit=False es importante para que los objetos sigan siendo utilizables
    # después de que la transacción se haya confirmado.
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# Crear el motor de base de datos asíncrono
engine = build_engine(settings.SQLALCHEMY_DATABASE_URL)

AsyncSessionLocal = build_sessionmaker(engine)

# Clase base declarativa para todos los modelos ORM
Base = declarative_base()
