"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_retry,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    BotTokenRedactionFilter,
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_retry,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
        ],
    )
    def test_configure_logging_sets_root_level(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "telegram_media_relay"


class TestGetLogger:
    def test_same_name_returns_same_instance(self) -> None:
        logger = get_logger("same.module")
        assert logger is get_logger("same.module")
        assert logger.name == "same.module"


class TestLogRetry:
    """Testes para log_retry."""

    def test_log_retry_emits_warning_with_context(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_retry(logger, "telegram_sender", attempt=1, delay_ms=1000, reason="http_429")

        logger.warning.assert_called_once()
        args, kwargs = logger.warning.call_args
        # Formato lazy: template + componente
        assert args == ("%s_retry_scheduled", "telegram_sender")
        assert kwargs["extra"] == {
            "component": "telegram_sender",
            "attempt": 1,
            "delay_ms": 1000,
            "reason": "http_429",
        }

    def test_log_retry_includes_retry_after_when_known(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_retry(
            logger,
            "telegram_sender",
            attempt=2,
            delay_ms=2000,
            reason="http_429",
            retry_after_seconds=7,
        )

        assert logger.warning.call_args[1]["extra"]["retry_after_seconds"] == 7


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        record = _record()
        assert CorrelationIdFilter("my_service", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"
        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        record = _record(level=logging.ERROR)
        assert CorrelationIdFilter("service_name").filter(record) is True
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_field_constants(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_renames_fields(self) -> None:
        formatter = create_json_formatter()
        record = _record("telegram_send_succeeded")
        record.correlation_id = "abc-123"
        record.service = "test_service"
        record.message_id = 42

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "telegram_send_succeeded"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "test"
        assert payload["correlation_id"] == "abc-123"
        assert payload["service"] == "test_service"
        assert payload["message_id"] == 42
        assert payload["timestamp"].endswith("+00:00")


class TestBotTokenRedactionFilter:
    """Token do bot nunca chega ao output, nem via logs do httpx."""

    def test_redacts_token_in_formatted_message(self) -> None:
        record = logging.LogRecord(
            name="httpx",
            level=logging.INFO,
            pathname="",
            lineno=0,
            msg='HTTP Request: %s %s "%s"',
            args=("POST", "https://api.telegram.org/bot123456:AAE-x_yZ/sendPhoto", "HTTP/1.1 200 OK"),
            exc_info=None,
        )

        assert BotTokenRedactionFilter().filter(record) is True
        message = record.getMessage()
        assert "123456:AAE-x_yZ" not in message
        assert "/bot<redacted>/sendPhoto" in message

    def test_leaves_other_messages_untouched(self) -> None:
        record = _record("upload_received %s")
        record.args = ("ok",)

        BotTokenRedactionFilter().filter(record)

        assert record.msg == "upload_received %s"
        assert record.args == ("ok",)

    def test_configured_handler_redacts(self) -> None:
        configure_logging()
        handler = logging.getLogger().handlers[0]

        assert any(isinstance(f, BotTokenRedactionFilter) for f in handler.filters)
