# backend/eletromaquinas/core/config.py
"""
Este archivo contiene la configuración de la aplicación.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional
from pathlib import Path
import os

# Apunta al directorio 'backend/'
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    """
    Configuración de la aplicación usando Pydantic BaseSettings.
    Variables sensibles desde .env, defaults seguros para el resto.
    """
    # Configuración general del proyecto
    BASE_DIR: Path = BASE_DIR
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "EletroMáquinas"
    PROJECT_VERSION: str = "1.0.0"
    APP_ENVIRONMENT: str = "development"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Base de datos: SQLite embebido por defecto, PostgreSQL si se define el servidor
    DATABASE_URL: str = f"sqlite+aiosqlite:///{BASE_DIR / 'eletromaquinas.db'}"
    POSTGRES_SERVER: Optional[str] = os.getenv("POSTGRES_SERVER")
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "user")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "eletromaquinas_db")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")

    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        """URL de conexión asíncrona efectiva."""
        if self.POSTGRES_SERVER:
            return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        return self.DATABASE_URL

    # Autenticación - JWT firmado y contraseñas con bcrypt
    JWT_SECRET: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_MINUTES: int = 60 * 24
    BCRYPT_ROUNDS: int = 12

    # Cuenta de administrador creada en la primera ejecución
    ADMIN_NAME: str = "Administrador"
    ADMIN_EMAIL: str = "admin@eletromaquinas.com"
    ADMIN_PASSWORD: str = "admin123"
    SEED_DEMO_DATA: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Uploads - "disk" o "memory"
    UPLOAD_STORAGE: str = "disk"
    UPLOAD_DIR: Path = BASE_DIR / "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024
    MAX_UPLOAD_FILES: int = 5
    ALLOWED_IMAGE_TYPES: List[str] = ["image/jpeg", "image/png", "image/gif", "image/webp"]

    # Logging - Defaults seguros
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE_PATH: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = False

# Instancia global de la configuración
settings = Settings()
