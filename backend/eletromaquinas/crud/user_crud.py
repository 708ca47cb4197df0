# backend/eletromaquinas/crud/user_crud.py
"""
Este archivo contiene las operaciones CRUD para el modelo User.

Las cuentas de clientes, vendedores y administradores comparten tabla; los
emails se guardan normalizados en minúsculas.
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from eletromaquinas.db.models.base_model import utcnow
from eletromaquinas.db.models.user_model import User


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    return await db.get(User, user_id)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """
    Busca una cuenta por su dirección de correo electrónico, sin distinguir mayúsculas.
    """
    result = await db.execute(select(User).filter(User.email == normalize_email(email)))
    return result.scalars().first()


async def get_users_by_role(db: AsyncSession, role: str) -> List[User]:
    result = await db.execute(select(User).filter(User.role == role).order_by(User.id))
    return result.scalars().all()


async def get_all_users(db: AsyncSession) -> List[User]:
    result = await db.execute(select(User).order_by(User.id))
    return result.scalars().all()


async def count_users(db: AsyncSession, role: Optional[str] = None) -> int:
    query = select(func.count(User.id))
    if role:
        query = query.filter(User.role == role)
    return await db.scalar(query) or 0


async def create_user(
    db: AsyncSession,
    name: str,
    email: str,
    password_hash: str,
    role: str,
    phone: Optional[str] = None,
    company: Optional[str] = None,
    address: Optional[str] = None,
) -> User:
    """
    Crea una nueva cuenta. La unicidad del email la garantiza el índice único.
    """
    db_user = User(
        name=name,
        email=normalize_email(email),
        password_hash=password_hash,
        role=role,
        phone=phone,
        company=company,
        address=address,
    )
    db.add(db_user)
    await db.commit()
    await db.refresh(db_user)
    return db_user


async def update_user_status(db: AsyncSession, db_user: User, status: str) -> User:
    db_user.status = status
    db_user.updated_at = utcnow()

    await db.commit()
    await db.refresh(db_user)
    return db_user
