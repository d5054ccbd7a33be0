"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.upload.router import router as upload_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks (/health e /api/health)
    api_router.include_router(health_router, tags=["health"])

    # Upload (/api/upload e /api/batch-upload)
    api_router.include_router(upload_router, prefix="/api", tags=["upload"])

    return api_router
