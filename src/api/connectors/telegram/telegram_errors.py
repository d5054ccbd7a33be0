"""Parsing de respostas e classificação de erros da Telegram Bot API.

Formato da resposta: {"ok": bool, "result": {"message_id": int},
"description": str, "error_code": int}.

Transitórios (retry): 429 e 5xx, além de falhas de conexão tratadas
no sender. Permanentes: demais 4xx e resposta malformada.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from utils.errors import UpstreamPermanentError, UpstreamTransientError

if TYPE_CHECKING:
    import httpx

GENERIC_UPSTREAM_ERROR = "Telegram API returned error"
MALFORMED_RESPONSE_ERROR = "Malformed response from Telegram API"


@dataclass(frozen=True)
class TelegramApiResponse:
    """Corpo da resposta da Bot API, já validado estruturalmente."""

    ok: bool
    message_id: int | None = None
    description: str | None = None
    error_code: int | None = None
    retry_after: int | None = None


def is_retryable_status(status_code: int) -> bool:
    """429 (rate limit) e qualquer 5xx."""
    return status_code == 429 or 500 <= status_code < 600


def parse_telegram_body(raw: bytes) -> TelegramApiResponse | None:
    """Interpreta o corpo JSON da Bot API.

    Returns:
        TelegramApiResponse, ou None se o corpo não for um objeto
        JSON com o campo "ok".
    """
    try:
        data: Any = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict) or not isinstance(data.get("ok"), bool):
        return None

    result = data.get("result")
    message_id = result.get("message_id") if isinstance(result, dict) else None
    parameters = data.get("parameters")
    retry_after = parameters.get("retry_after") if isinstance(parameters, dict) else None
    description = data.get("description")

    return TelegramApiResponse(
        ok=data["ok"],
        message_id=message_id if isinstance(message_id, int) else None,
        description=description if isinstance(description, str) and description else None,
        error_code=data.get("error_code") if isinstance(data.get("error_code"), int) else None,
        retry_after=retry_after if isinstance(retry_after, int) else None,
    )


def extract_message_id(response: httpx.Response) -> int | None:
    """Valida a resposta HTTP e devolve o message_id.

    Sucesso exige status 2xx E "ok": true no corpo.

    Raises:
        UpstreamTransientError: 429 ou 5xx.
        UpstreamPermanentError: Demais falhas (4xx, ok=false, corpo inválido).
    """
    body = parse_telegram_body(response.content)
    description = body.description if body else None

    if is_retryable_status(response.status_code):
        raise UpstreamTransientError(
            description or f"HTTP {response.status_code}",
            status_code=response.status_code,
            retry_after=body.retry_after if body else None,
        )

    if not response.is_success:
        raise UpstreamPermanentError(
            description or f"HTTP {response.status_code}",
            status_code=response.status_code,
        )

    if body is None:
        raise UpstreamPermanentError(MALFORMED_RESPONSE_ERROR, status_code=response.status_code)

    if not body.ok:
        raise UpstreamPermanentError(
            description or GENERIC_UPSTREAM_ERROR,
            status_code=body.error_code or response.status_code,
        )

    return body.message_id
