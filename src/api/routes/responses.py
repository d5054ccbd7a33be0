"""Envelope padrão de resposta e cabeçalhos CORS dos endpoints.

Sucesso: {success: true, message, data, timestamp}
Erro:    {success: false, error, code, timestamp}
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from fastapi import Response, status
from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from collections.abc import Iterable

CORS_ALLOW_METHODS = "GET, POST, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type"


def utc_timestamp() -> str:
    """ISO-8601 em UTC com milissegundos e sufixo Z."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def success_envelope(data: Any, message: str = "Success") -> dict[str, Any]:
    return {
        "success": True,
        "message": message,
        "data": data,
        "timestamp": utc_timestamp(),
    }


def error_envelope(error: str, code: str | None = None) -> dict[str, Any]:
    return {
        "success": False,
        "error": error,
        "code": code,
        "timestamp": utc_timestamp(),
    }


def cors_headers(allow_origin: str = "*") -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
    }


def resolve_allow_origin(request_origin: str | None, allowed: Iterable[str]) -> str:
    """Origem a devolver no Access-Control-Allow-Origin.

    "*" na configuração libera qualquer origem; caso contrário ecoa a
    origem da requisição se estiver na lista, senão a primeira da lista.
    """
    allowed = tuple(allowed)
    if not allowed or "*" in allowed:
        return "*"
    if request_origin and request_origin in allowed:
        return request_origin
    return allowed[0]


def json_response(
    content: dict[str, Any],
    status_code: int = status.HTTP_200_OK,
    allow_origin: str = "*",
) -> JSONResponse:
    return JSONResponse(
        content=content,
        status_code=status_code,
        headers=cors_headers(allow_origin),
    )


def preflight_response(allow_origin: str = "*") -> Response:
    """Resposta fixa 200 para OPTIONS."""
    return Response(status_code=status.HTTP_200_OK, headers=cors_headers(allow_origin))


def method_not_allowed_response(
    allowed_methods: Iterable[str],
    allow_origin: str = "*",
) -> JSONResponse:
    return json_response(
        {"error": "Method not allowed", "allowedMethods": list(allowed_methods)},
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        allow_origin=allow_origin,
    )
