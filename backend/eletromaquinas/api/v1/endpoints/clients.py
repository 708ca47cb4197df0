# backend/eletromaquinas/api/v1/endpoints/clients.py
"""
Auto-registro de clientes desde la tienda.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.api import deps
from eletromaquinas.schemas.user_schema import ClientRegister, RegisterResponse, UserResponse
from eletromaquinas.services.auth_service import auth_service

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register_client(client_in: ClientRegister, db: AsyncSession = Depends(deps.get_db)):
    """
    Registra un cliente y devuelve su cuenta junto con un token de acceso.
    Responde 400 si faltan datos o si el email ya está registrado.
    """
    user, token = await auth_service.register_client(db, client_in)
    return RegisterResponse(client=UserResponse.model_validate(user), token=token)
