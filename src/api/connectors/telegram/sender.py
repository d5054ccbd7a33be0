"""Sender de mídia para a Telegram Bot API.

Um arquivo por chamada: sendPhoto (campo "photo") para imagens e
sendVideo (campo "video") para vídeos, multipart com chat_id.

Retry: até 3 novas tentativas com espera de 1s, 2s e 4s, apenas para
timeout, falha de conexão, HTTP 429 e 5xx. O loop é explícito e
limitado; o sender nunca levanta exceção para falhas do destino.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.telegram.telegram_errors import extract_message_id
from app.domain import FileClassification, SendOutcome
from app.infra.media import staged_payload
from config.logging import log_retry
from utils.errors import (
    ConfigError,
    UpstreamError,
    UpstreamPermanentError,
    UpstreamTransientError,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.domain import DecodedFile
    from config.settings import TelegramSettings

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
RETRY_DELAYS_MS: tuple[int, ...] = (1000, 2000, 4000)

# (método da Bot API, nome do campo do arquivo)
METHOD_BY_KIND: dict[FileClassification, tuple[str, str]] = {
    FileClassification.IMAGE: ("sendPhoto", "photo"),
    FileClassification.VIDEO: ("sendVideo", "video"),
}


def retry_delay_ms(attempt: int) -> int:
    """Espera antes da tentativa seguinte à tentativa `attempt` (0-based)."""
    return RETRY_DELAYS_MS[min(attempt, len(RETRY_DELAYS_MS) - 1)]


class TelegramMediaSender:
    """Envia DecodedFile para o chat configurado."""

    def __init__(
        self,
        settings: TelegramSettings,
        *,
        stage_to_disk: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        """Inicializa o sender.

        Args:
            settings: Credenciais e timeouts do Telegram (construídas no bootstrap)
            stage_to_disk: Passa o payload por arquivo temporário antes do envio
            transport: Transport httpx alternativo (testes)
            sleep: Função de espera do backoff (testes)
        """
        self._settings = settings
        self._stage_to_disk = stage_to_disk
        self._transport = transport
        self._sleep = sleep
        self._max_retries = max(0, min(settings.max_retries, MAX_RETRIES))

    async def send(self, file: DecodedFile, kind: FileClassification) -> SendOutcome:
        """Envia o arquivo, retentando falhas transitórias.

        Returns:
            SendOutcome terminal. retry_count conta as tentativas extras.
        """
        if kind not in METHOD_BY_KIND:
            return SendOutcome.failed(
                f"Unsupported file type: {file.mime_type}",
                error_code="UNSUPPORTED_FILE_TYPE",
            )

        try:
            self._ensure_configured()
        except ConfigError as exc:
            logger.error("telegram_sender_not_configured", extra={"error": exc.message})
            return SendOutcome.failed(exc.message, error_code=exc.code)

        method, _ = METHOD_BY_KIND[kind]
        attempt = 0
        while True:
            try:
                message_id = await self._attempt(file, kind)
            except UpstreamTransientError as exc:
                if attempt >= self._max_retries:
                    return self._failure(exc, method, attempt)
                delay_ms = retry_delay_ms(attempt)
                log_retry(
                    logger,
                    "telegram_sender",
                    attempt=attempt + 1,
                    delay_ms=delay_ms,
                    reason=_reason(exc),
                    retry_after_seconds=exc.retry_after,
                )
                await self._sleep(delay_ms / 1000)
                attempt += 1
            except UpstreamPermanentError as exc:
                return self._failure(exc, method, attempt)
            else:
                logger.info(
                    "telegram_send_succeeded",
                    extra={
                        "method": method,
                        "message_id": message_id,
                        "retry_count": attempt,
                        "file_size": file.size,
                    },
                )
                return SendOutcome.succeeded(message_id, retry_count=attempt)

    def _ensure_configured(self) -> None:
        missing = self._settings.credential_errors()
        if missing:
            raise ConfigError(missing[0])

    async def _attempt(self, file: DecodedFile, kind: FileClassification) -> int | None:
        method, field_name = METHOD_BY_KIND[kind]
        url = self._settings.method_url(method)
        data = {"chat_id": self._settings.chat_id}

        if not self._stage_to_disk:
            files = {field_name: (file.filename, file.payload, file.mime_type)}
            return await self._post(url, data, files)

        with staged_payload(file) as path, path.open("rb") as handle:
            files = {field_name: (file.filename, handle, file.mime_type)}
            return await self._post(url, data, files)

    async def _post(self, url: str, data: dict[str, str], files: dict[str, Any]) -> int | None:
        """Executa um POST e converte falhas de transporte na taxonomia."""
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._settings.request_timeout_seconds,
            ) as client:
                response = await client.post(url, data=data, files=files)
        except httpx.TimeoutException as exc:
            raise UpstreamTransientError("Telegram request timed out") from exc
        except (httpx.NetworkError, httpx.RemoteProtocolError) as exc:
            raise UpstreamTransientError("Connection to Telegram failed") from exc
        except httpx.HTTPError as exc:
            raise UpstreamPermanentError(f"Telegram request failed: {type(exc).__name__}") from exc
        return extract_message_id(response)

    def _failure(self, exc: UpstreamError, method: str, attempt: int) -> SendOutcome:
        logger.warning(
            "telegram_send_failed",
            extra={
                "method": method,
                "error_code": exc.code,
                "upstream_status": exc.upstream_status,
                "retry_count": attempt,
            },
        )
        return SendOutcome.failed(exc.message, retry_count=attempt, error_code=exc.code)


def _reason(exc: UpstreamError) -> str:
    if exc.upstream_status is None:
        return "connection_error"
    return f"http_{exc.upstream_status}"
