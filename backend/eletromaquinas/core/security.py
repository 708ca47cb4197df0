# backend/eletromaquinas/core/security.py
"""
Utilidades de seguridad: hash de contraseñas y tokens de acceso.

Las contraseñas se guardan con bcrypt (sal incluida en el propio hash) y los
tokens son JWT firmados con expiración. Nunca se usa el email como token.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
import jwt

from eletromaquinas.core.config import settings
from eletromaquinas.core.exceptions import AuthenticationError


def hash_password(password: str) -> str:
    """Devuelve el hash bcrypt de la contraseña como texto."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, stored_hash: str) -> bool:
    if not password or not stored_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), stored_hash.encode("utf-8"))
    except ValueError:
        # Hash con formato inválido
        return False


def create_access_token(user_id: int, email: str, role: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "email": email,
        "role": role,
        "iat": now,
        "exp": now + timedelta(minutes=settings.JWT_EXPIRES_MINUTES),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Valida firma y expiración de un token y devuelve su payload.

    Raises:
        AuthenticationError: si el token expiró o no es válido
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expirado")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Token inválido")

    if not payload.get("sub"):
        raise AuthenticationError("Token inválido")
    return payload
