"""Endpoints de health check."""

from __future__ import annotations

import logging
import platform
from datetime import UTC, datetime

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from api.routes.responses import (
    json_response,
    method_not_allowed_response,
    preflight_response,
    success_envelope,
)

logger = logging.getLogger(__name__)

router = APIRouter()

HEALTH_ALLOWED_METHODS = ("GET",)


class HealthResponse(BaseModel):
    """Resposta do liveness probe."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    settings = request.app.state.base_settings
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        timestamp=datetime.now(UTC).isoformat(),
        version=settings.version,
    )


async def api_health(request: Request) -> Response:
    """Health no envelope padrão, com estado das credenciais.

    Informa apenas se token e chat estão configurados, nunca os valores.
    """
    if request.method == "OPTIONS":
        return preflight_response()
    if request.method not in HEALTH_ALLOWED_METHODS:
        return method_not_allowed_response(HEALTH_ALLOWED_METHODS)

    base = request.app.state.base_settings
    telegram = request.app.state.telegram_settings
    data = {
        "status": "healthy",
        "service": base.service_name,
        "version": base.version,
        "environment": {
            "botTokenConfigured": bool(telegram.bot_token),
            "chatIdConfigured": bool(telegram.chat_id),
            "pythonVersion": platform.python_version(),
        },
    }
    return json_response(success_envelope(data, "Service is healthy"))


# Sem lista de métodos: o guard acima responde 405 no formato padrão
router.add_route("/api/health", api_health, methods=None, include_in_schema=False)
