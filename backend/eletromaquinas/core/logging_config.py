# backend/eletromaquinas/core/logging_config.py
"""
Configuración del logging de la aplicación a partir de settings.
"""

import logging
from pathlib import Path

from eletromaquinas.core.config import settings

_configured = False


def setup_logging() -> None:
    """Configura el logger raíz una sola vez: consola y, opcionalmente, archivo."""
    global _configured
    if _configured:
        return

    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=settings.LOG_FORMAT)

    if settings.LOG_FILE_PATH:
        log_path = Path(settings.LOG_FILE_PATH)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        logging.getLogger().addHandler(file_handler)

    # Reducir ruido de librerías
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)

    _configured = True
