# backend/eletromaquinas/api/v1/endpoints/auth.py
"""
Endpoints de login y de la cuenta autenticada.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.api import deps
from eletromaquinas.db.models.user_model import User
from eletromaquinas.schemas.user_schema import LoginRequest, LoginResponse, UserResponse
from eletromaquinas.services.auth_service import auth_service

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest, db: AsyncSession = Depends(deps.get_db)):
    """Login de cualquier cuenta (cliente, vendedor o administrador)."""
    user, token = await auth_service.authenticate(db, credentials.email, credentials.password)
    return LoginResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/admin/login", response_model=LoginResponse)
async def admin_login(credentials: LoginRequest, db: AsyncSession = Depends(deps.get_db)):
    """Login del panel de administración: solo cuentas con rol admin."""
    user, token = await auth_service.authenticate_admin(db, credentials.email, credentials.password)
    return LoginResponse(token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse)
async def read_current_user(current_user: User = Depends(deps.get_current_user)):
    return current_user
