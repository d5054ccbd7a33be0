"""Formatter de logs JSON com campos padronizados.

`timestamp` sai em ISO-8601 UTC, no mesmo relógio dos envelopes de
resposta, para cruzar log e resposta pelo horário.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON.

    Exemplo de output:
        {
            "level": "INFO",
            "logger": "api.connectors.telegram.sender",
            "message": "telegram_send_succeeded",
            "correlation_id": "abc-123",
            "service": "telegram_media_relay",
            "message_id": 123,
            "timestamp": "2026-02-02T10:30:00.123456+00:00"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        timestamp=True,
    )
