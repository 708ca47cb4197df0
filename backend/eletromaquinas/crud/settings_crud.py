# backend/eletromaquinas/crud/settings_crud.py
"""
Operaciones sobre el registro único de configuración de la tienda.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.db.models.base_model import utcnow
from eletromaquinas.db.models.settings_model import SETTINGS_ID, StoreSettings


async def get_settings(db: AsyncSession) -> StoreSettings:
    """Devuelve la configuración, creándola con valores por defecto si falta."""
    db_settings = await db.get(StoreSettings, SETTINGS_ID)
    if db_settings is None:
        db_settings = StoreSettings(id=SETTINGS_ID)
        db.add(db_settings)
        await db.commit()
        await db.refresh(db_settings)
    return db_settings


async def update_settings(db: AsyncSession, update_data: Dict[str, Any]) -> StoreSettings:
    db_settings = await get_settings(db)
    for key, value in update_data.items():
        setattr(db_settings, key, value)
    db_settings.updated_at = utcnow()

    await db.commit()
    await db.refresh(db_settings)
    return db_settings
