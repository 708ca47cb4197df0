# backend/eletromaquinas/services/auth_service.py
"""
Servicio de autenticación y gestión de cuentas.

Se encarga del login (general y de administración), del auto-registro de
clientes, del alta de vendedores y de resolver la cuenta asociada a un token.
"""

import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.core.exceptions import AuthenticationError, DuplicateError, InvalidOperationError, NotFoundError
from eletromaquinas.core.security import create_access_token, decode_access_token, hash_password, verify_password
from eletromaquinas.crud import user_crud
from eletromaquinas.db.models.user_model import ACCOUNT_INACTIVE, ROLE_ADMIN, ROLE_CLIENT, ROLE_VENDOR, User
from eletromaquinas.schemas.user_schema import AccountCreate, ClientRegister, VendorCreate

logger = logging.getLogger(__name__)


class AuthService:

    async def authenticate(self, db: AsyncSession, email: Optional[str], password: Optional[str]) -> Tuple[User, str]:
        """
        Verifica credenciales y emite un token de acceso.

        El email se compara sin distinguir mayúsculas; la contraseña se
        verifica contra su hash bcrypt.

        Raises:
            InvalidOperationError: si falta el email o la contraseña
            AuthenticationError: si las credenciales no son válidas
        """
        if not email or not password:
            raise InvalidOperationError("Email e senha são obrigatórios")

        user = await user_crud.get_user_by_email(db, email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"🔒 LOGIN: Credenciales inválidas para '{email}'")
            raise AuthenticationError("Credenciais inválidas")
        if not user.is_active:
            logger.warning(f"🔒 LOGIN: Cuenta inactiva '{user.email}'")
            raise AuthenticationError("Conta inativa")

        logger.info(f"🔓 LOGIN: '{user.email}' ({user.role})")
        return user, create_access_token(user.id, user.email, user.role)

    async def authenticate_admin(self, db: AsyncSession, email: Optional[str], password: Optional[str]) -> Tuple[User, str]:
        """Como authenticate, pero solo para cuentas de administrador."""
        user, token = await self.authenticate(db, email, password)
        if user.role != ROLE_ADMIN:
            logger.warning(f"🔒 LOGIN ADMIN: '{user.email}' no es administrador")
            raise AuthenticationError("Acesso restrito a administradores")
        return user, token

    async def register_client(self, db: AsyncSession, client_in: ClientRegister) -> Tuple[User, str]:
        """
        Registra un cliente y devuelve la cuenta creada junto con su token.

        Raises:
            DuplicateError: si el email ya está registrado
        """
        user = await self._create_account(db, client_in, ROLE_CLIENT)
        logger.info(f"🆕 CLIENTE: Registrado '{user.email}' (ID {user.id})")
        return user, create_access_token(user.id, user.email, user.role)

    async def create_vendor(self, db: AsyncSession, vendor_in: VendorCreate) -> User:
        user = await self._create_account(db, vendor_in, ROLE_VENDOR)
        logger.info(f"🆕 VENDEDOR: Creado '{user.email}' (ID {user.id})")
        return user

    async def _create_account(self, db: AsyncSession, account_in: AccountCreate, role: str) -> User:
        if await user_crud.get_user_by_email(db, account_in.email):
            raise DuplicateError("Email já cadastrado")

        extra = account_in.model_dump(include={"company", "address"})
        try:
            return await user_crud.create_user(
                db,
                name=account_in.name,
                email=account_in.email,
                password_hash=hash_password(account_in.password),
                role=role,
                phone=account_in.phone,
                **extra,
            )
        except IntegrityError:
            # Otro registro con el mismo email entró entre la verificación y el insert
            await db.rollback()
            raise DuplicateError("Email já cadastrado")

    async def get_user_from_token(self, db: AsyncSession, token: str) -> User:
        """
        Resuelve la cuenta activa asociada a un token.

        Raises:
            AuthenticationError: token inválido/expirado o cuenta inexistente/inactiva
        """
        payload = decode_access_token(token)
        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            raise AuthenticationError("Token inválido")

        user = await user_crud.get_user(db, user_id)
        if not user or not user.is_active:
            raise AuthenticationError("Token inválido")
        return user

    async def list_accounts(self, db: AsyncSession, role: str) -> List[User]:
        return await user_crud.get_users_by_role(db, role)

    async def set_account_status(self, db: AsyncSession, account_id: int, status: str, current_admin: User) -> User:
        """
        Activa o desactiva una cuenta. Una cuenta inactiva no puede iniciar
        sesión y sus tokens dejan de ser aceptados.

        Raises:
            NotFoundError: si la cuenta no existe
            InvalidOperationError: si el administrador intenta desactivarse a sí mismo
        """
        user = await user_crud.get_user(db, account_id)
        if not user:
            raise NotFoundError("Conta não encontrada")
        if user.id == current_admin.id and status == ACCOUNT_INACTIVE:
            raise InvalidOperationError("Não é possível desativar a própria conta")

        user = await user_crud.update_user_status(db, user, status)
        logger.info(f"🔄 CUENTA: '{user.email}' ahora está {status}")
        return user


auth_service = AuthService()
