# backend/eletromaquinas/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación FastAPI completa,
incluyendo la configuración de rutas, middleware, manejadores de errores
y el ciclo de vida de la aplicación.

Características principales:
- Configuración centralizada de la aplicación
- Registro de routers de la API con prefijos
- Respuestas de error uniformes: {"error": mensaje}
- Creación de tablas y datos iniciales al arrancar
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from eletromaquinas.api.v1.api_router import api_router
from eletromaquinas.api.v1.endpoints import health, uploads
from eletromaquinas.core.config import settings  # Configuración centralizada de la aplicación
from eletromaquinas.core.exceptions import EletroError
from eletromaquinas.core.logging_config import setup_logging
from eletromaquinas.db import database
from eletromaquinas.db.init_db import init_db

logger = logging.getLogger(__name__)


# ========================================
# CICLO DE VIDA DE LA APLICACIÓN
# ========================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Al iniciar: configura el logging, crea las tablas y siembra los datos
    iniciales (solo si faltan). Al cerrar: libera el pool de conexiones.
    """
    setup_logging()
    logger.info(f"🚀 Iniciando {settings.PROJECT_NAME} v{settings.PROJECT_VERSION} ({settings.APP_ENVIRONMENT})")
    await init_db(database.engine, database.AsyncSessionLocal)
    yield
    await database.engine.dispose()
    logger.info("👋 Aplicación detenida")


# ========================================
# CONFIGURACIÓN DE LA APLICACIÓN FASTAPI
# ========================================

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    version=settings.PROJECT_VERSION,
    description="API da loja EletroMáquinas: catálogo, pedidos e painel administrativo",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ========================================
# MANEJADORES DE ERRORES
# ========================================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        message = "Endpoint não encontrado"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Errores de validación del cuerpo o de los parámetros: 400 con un mensaje legible."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        message = f"Dados inválidos: {field}: {first.get('msg')}" if field else f"Dados inválidos: {first.get('msg')}"
    else:
        message = "Dados inválidos"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(EletroError)
async def domain_exception_handler(request: Request, exc: EletroError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Error no controlado en {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Erro interno do servidor"},
    )


# ========================================
# REGISTRO DE ROUTERS
# ========================================

app.include_router(api_router, prefix=settings.API_PREFIX)

# Imágenes subidas: /uploads/<nombre>
app.include_router(uploads.files_router, prefix=settings.UPLOAD_URL_PREFIX, tags=["Uploads"])

# /health también fuera del prefijo de la API, para balanceadores y monitoreo
app.include_router(health.router, tags=["Health"], include_in_schema=False)


@app.get("/", tags=["Root"])
async def read_root():
    """
    Endpoint raíz para verificación básica del estado de la API.

    Example:
        GET /
        Response: {"message": "Bem-vindo à API EletroMáquinas v1.0.0", ...}
    """
    return {
        "message": f"Bem-vindo à API {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}",
        "docs": "/docs",
        "health": "/health",
    }


def run():
    """Arranca el servidor con uvicorn (comando `eletromaquinas`)."""
    import uvicorn

    uvicorn.run(
        "eletromaquinas.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.APP_ENVIRONMENT == "development",
    )


if __name__ == "__main__":
    run()
