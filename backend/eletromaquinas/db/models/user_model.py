# backend/eletromaquinas/db/models/user_model.py
"""
Modelo de cuenta de usuario.

Una única tabla para administradores, vendedores y clientes: el rol decide qué
puede hacer cada cuenta y los datos de contacto del cliente viven en la misma
fila, de modo que no existe una identidad duplicada usuario/cliente.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text

from eletromaquinas.db.database import Base
from eletromaquinas.db.models.base_model import utcnow

ROLE_ADMIN = "admin"
ROLE_VENDOR = "vendedor"
ROLE_CLIENT = "client"

ACCOUNT_ACTIVE = "ativo"
ACCOUNT_INACTIVE = "inativo"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    # Siempre en minúsculas: la unicidad es insensible a mayúsculas
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=ROLE_CLIENT, index=True)
    phone = Column(String(50), nullable=True)
    company = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=ACCOUNT_ACTIVE)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    @property
    def is_active(self) -> bool:
        return self.status == ACCOUNT_ACTIVE

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
