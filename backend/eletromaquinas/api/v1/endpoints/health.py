# backend/eletromaquinas/api/v1/endpoints/health.py
"""
Endpoints de verificación de estado y diagnóstico.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from eletromaquinas.core.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check para monitoreo de disponibilidad del servicio.

    Example:
        GET /health
        Response: {"status": "OK", "service": "EletroMáquinas", "timestamp": "..."}
    """
    return {
        "status": "OK",
        "service": settings.PROJECT_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/test")
async def api_test():
    """Ruta de prueba: confirma que la API responde e informa versión y entorno."""
    return {
        "message": "API funcionando!",
        "version": settings.PROJECT_VERSION,
        "environment": settings.APP_ENVIRONMENT,
    }
