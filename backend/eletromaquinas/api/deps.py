# backend/eletromaquinas/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza todas las dependencias que pueden ser inyectadas
en los endpoints de la API: la sesión de base de datos y las guardas de
autenticación (cuenta autenticada y cuenta de administrador).
"""

from typing import AsyncGenerator, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.core.exceptions import AuthenticationError
from eletromaquinas.db import database
from eletromaquinas.db.models.user_model import ROLE_ADMIN, User
from eletromaquinas.services.auth_service import auth_service

# auto_error=False: la ausencia de cabecera se responde con nuestro propio 401
bearer_scheme = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI para obtener una sesión de base de datos asíncrona.
    Se asegura de que la sesión se cierre siempre después de la petición.
    """
    async with database.AsyncSessionLocal() as session:
        yield session


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Exige una cabecera `Authorization: Bearer <token>` con un token válido.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Não autorizado")
    try:
        return await auth_service.get_user_from_token(db, credentials.credentials)
    except AuthenticationError as e:
        raise _unauthorized(e.message)


async def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """Como get_current_user, pero solo acepta cuentas de administrador."""
    if current_user.role != ROLE_ADMIN:
        raise _unauthorized("Acesso restrito a administradores")
    return current_user
