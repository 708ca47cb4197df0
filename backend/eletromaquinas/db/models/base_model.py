# backend/eletromaquinas/db/models/base_model.py
"""
Utilidades compartidas por los modelos ORM.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Marca de tiempo usada en createdAt/updatedAt (resolución de microsegundos)."""
    return datetime.now(timezone.utc)
