# backend/eletromaquinas/api/v1/api_router.py
"""
Este archivo contiene el router principal de la API.

Se encarga de registrar y configurar todos los routers de dominio bajo el
prefijo común (settings.API_PREFIX, típicamente "/api").
"""

from fastapi import APIRouter, Depends

from eletromaquinas.api import deps

# Importación de routers especializados por dominio de negocio
from eletromaquinas.api.v1.endpoints import (
    admin,
    auth,
    categories,
    clients,
    health,
    orders,
    products,
    uploads,
)

# ========================================
# CONFIGURACIÓN DEL ROUTER PRINCIPAL
# ========================================

# Contenedor para todos los sub-routers de la API
api_router = APIRouter()

# ========================================
# REGISTRO DE ROUTERS POR DOMINIO DE NEGOCIO
# ========================================

# ROUTER DE PRODUCTOS
# Catálogo público: listado con filtros y detalle
api_router.include_router(
    products.router,
    prefix="/products",             # Prefijo: /api/products
    tags=["Products"]
)

# ROUTER DE CATEGORÍAS
api_router.include_router(
    categories.router,
    prefix="/categories",
    tags=["Categories"]
)

# ROUTER DE AUTENTICACIÓN
# /api/login, /api/admin/login y /api/me
api_router.include_router(
    auth.router,
    tags=["Auth"]
)

# ROUTER DE CLIENTES
api_router.include_router(
    clients.router,
    prefix="/clients",
    tags=["Clients"]
)

# ROUTER DE PEDIDOS
api_router.include_router(
    orders.router,
    prefix="/orders",
    tags=["Orders"]
)

# ROUTER DE ADMINISTRACIÓN
# Todas sus rutas exigen un token de administrador
api_router.include_router(
    admin.router,
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(deps.get_current_admin)]
)

# ROUTER DE UPLOADS
api_router.include_router(
    uploads.router,
    prefix="/upload",
    tags=["Uploads"]
)

# ROUTER DE ESTADO
# /api/health y /api/test
api_router.include_router(
    health.router,
    tags=["Health"]
)
