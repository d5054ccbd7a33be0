"""Testes de parsing e classificação de respostas da Bot API."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.telegram import (
    GENERIC_UPSTREAM_ERROR,
    MALFORMED_RESPONSE_ERROR,
    extract_message_id,
    is_retryable_status,
    parse_telegram_body,
)
from utils.errors import UpstreamPermanentError, UpstreamTransientError


@pytest.mark.parametrize("status_code", [429, 500, 502, 503, 599])
def test_retryable_statuses(status_code: int) -> None:
    assert is_retryable_status(status_code) is True


@pytest.mark.parametrize("status_code", [200, 400, 401, 403, 404, 413, 600])
def test_non_retryable_statuses(status_code: int) -> None:
    assert is_retryable_status(status_code) is False


class TestParseTelegramBody:
    """Testes para parse_telegram_body."""

    def test_success_body(self) -> None:
        body = parse_telegram_body(b'{"ok": true, "result": {"message_id": 42}}')

        assert body is not None
        assert body.ok is True
        assert body.message_id == 42

    def test_error_body_with_retry_after(self) -> None:
        raw = (
            b'{"ok": false, "error_code": 429, "description": "Too Many Requests",'
            b' "parameters": {"retry_after": 7}}'
        )

        body = parse_telegram_body(raw)

        assert body is not None
        assert body.ok is False
        assert body.error_code == 429
        assert body.description == "Too Many Requests"
        assert body.retry_after == 7

    @pytest.mark.parametrize("raw", [b"", b"<html>", b"[]", b'{"result": {}}', b'{"ok": "yes"}'])
    def test_malformed_bodies(self, raw: bytes) -> None:
        assert parse_telegram_body(raw) is None


class TestExtractMessageId:
    """Testes para extract_message_id."""

    def test_ok_response_returns_message_id(self) -> None:
        response = httpx.Response(200, json={"ok": True, "result": {"message_id": 123}})

        assert extract_message_id(response) == 123

    def test_rate_limit_is_transient_with_description(self) -> None:
        response = httpx.Response(429, json={"ok": False, "description": "Too Many Requests"})

        with pytest.raises(UpstreamTransientError) as exc_info:
            extract_message_id(response)

        assert exc_info.value.message == "Too Many Requests"
        assert exc_info.value.upstream_status == 429
        assert exc_info.value.retry_after is None

    def test_rate_limit_carries_retry_after(self) -> None:
        response = httpx.Response(
            429,
            json={
                "ok": False,
                "description": "Too Many Requests: retry after 7",
                "parameters": {"retry_after": 7},
            },
        )

        with pytest.raises(UpstreamTransientError) as exc_info:
            extract_message_id(response)

        assert exc_info.value.retry_after == 7

    def test_server_error_without_body_is_transient(self) -> None:
        response = httpx.Response(502, content=b"Bad Gateway")

        with pytest.raises(UpstreamTransientError, match="HTTP 502"):
            extract_message_id(response)

    def test_client_error_is_permanent_with_description(self) -> None:
        response = httpx.Response(
            400,
            json={"ok": False, "error_code": 400, "description": "Bad Request: chat not found"},
        )

        with pytest.raises(UpstreamPermanentError, match="chat not found"):
            extract_message_id(response)

    def test_ok_false_on_2xx_is_permanent(self) -> None:
        response = httpx.Response(200, json={"ok": False})

        with pytest.raises(UpstreamPermanentError) as exc_info:
            extract_message_id(response)

        assert exc_info.value.message == GENERIC_UPSTREAM_ERROR

    def test_unparsable_2xx_is_permanent(self) -> None:
        response = httpx.Response(200, content=b"not json")

        with pytest.raises(UpstreamPermanentError) as exc_info:
            extract_message_id(response)

        assert exc_info.value.message == MALFORMED_RESPONSE_ERROR
