# backend/eletromaquinas/schemas/user_schema.py
"""
Esquemas Pydantic para cuentas, login y registro de clientes.

Ningún esquema de respuesta incluye la contraseña ni su hash.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field, field_validator

from .base_schema import CamelModel


class UserResponse(CamelModel):
    """Cuenta tal como se devuelve al cliente de la API."""
    id: int
    name: str
    email: str
    role: str
    phone: Optional[str] = None
    company: Optional[str] = None
    address: Optional[str] = None
    status: str
    created_at: datetime


class LoginRequest(CamelModel):
    # Opcionales para poder responder 400 con un mensaje propio si faltan
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(CamelModel):
    success: bool = True
    token: str
    user: UserResponse


class AccountCreate(CamelModel):
    """Datos comunes para crear una cuenta (cliente o vendedor)."""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)
    phone: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("O nome é obrigatório")
        return v.strip()


class ClientRegister(AccountCreate):
    """Auto-registro de un cliente desde la tienda."""
    company: Optional[str] = None
    address: Optional[str] = None


class VendorCreate(AccountCreate):
    """Alta de un vendedor desde el panel de administración."""


class RegisterResponse(CamelModel):
    success: bool = True
    client: UserResponse
    token: str


class AccountStatusUpdate(CamelModel):
    """Activa o desactiva una cuenta desde el panel."""
    status: Literal["ativo", "inativo"]
