"""Conector da Telegram Bot API (envio de fotos e vídeos)."""

from api.connectors.telegram.sender import (
    MAX_RETRIES,
    METHOD_BY_KIND,
    RETRY_DELAYS_MS,
    TelegramMediaSender,
    retry_delay_ms,
)
from api.connectors.telegram.telegram_errors import (
    GENERIC_UPSTREAM_ERROR,
    MALFORMED_RESPONSE_ERROR,
    TelegramApiResponse,
    extract_message_id,
    is_retryable_status,
    parse_telegram_body,
)

__all__ = [
    "GENERIC_UPSTREAM_ERROR",
    "MALFORMED_RESPONSE_ERROR",
    "MAX_RETRIES",
    "METHOD_BY_KIND",
    "RETRY_DELAYS_MS",
    "TelegramApiResponse",
    "TelegramMediaSender",
    "extract_message_id",
    "is_retryable_status",
    "parse_telegram_body",
    "retry_delay_ms",
]
