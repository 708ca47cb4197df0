# backend/eletromaquinas/core/exceptions.py
"""
Excepciones de dominio lanzadas por la capa de servicios.

Cada excepción lleva el código HTTP con el que se responde al cliente; los
manejadores registrados en main.py las traducen a {"error": mensaje}.
"""

from starlette import status


class EletroError(Exception):
    """Base para todos los errores de negocio de la aplicación."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidOperationError(EletroError):
    """Datos inválidos o una operación que las reglas de negocio no permiten."""
    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateError(InvalidOperationError):
    """Ya existe un registro con la misma clave única."""


class InsufficientStockError(InvalidOperationError):
    """La cantidad pedida supera el stock disponible."""

    def __init__(self, product_name: str, requested: int, available: int):
        super().__init__(
            f"Estoque insuficiente para {product_name}. Solicitado: {requested}, Disponível: {available}"
        )
        self.requested = requested
        self.available = available


class AuthenticationError(EletroError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(EletroError):
    status_code = status.HTTP_404_NOT_FOUND
