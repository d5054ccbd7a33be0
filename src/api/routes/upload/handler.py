"""Handler HTTP do relay de uploads.

Fluxo por requisição, linear:
    recebida -> método validado -> config validada -> decodificada
    -> classificada -> enviada (+retries) -> limpeza -> respondida

Qualquer falha de etapa vai direto para a resposta com envelope de
erro. OPTIONS responde 200 antes de validar método e configuração.
A estratégia de decodificação multipart é fixada na construção.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import Response, status

from api.routes.responses import (
    error_envelope,
    json_response,
    method_not_allowed_response,
    preflight_response,
    resolve_allow_origin,
    success_envelope,
)
from app.observability import CORRELATION_HEADER, correlation_scope
from app.use_cases.media import (
    INTERNAL_ERROR_MESSAGE,
    RelayBatchUseCase,
    RelaySingleUseCase,
)
from utils.errors import ConfigError, MethodNotAllowedError, RelayError, UpstreamError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from starlette.requests import Request

    from api.connectors.multipart import RequestFileDecoder
    from app.domain import BatchResult, FileOutcome
    from app.protocols.media_sender import MediaSenderProtocol
    from app.use_cases.media import SingleRelayResult
    from config.settings import BaseSettings, TelegramSettings, UploadSettings

logger = logging.getLogger(__name__)

# Contrato com o uploader web (FormData)
SINGLE_FILE_FIELD = "file"
BATCH_FILES_FIELD = "files"

UPLOAD_ALLOWED_METHODS: tuple[str, ...] = ("POST",)


class UploadRequestHandler:
    """Compõe decoder, classificador e sender para os dois fluxos."""

    def __init__(
        self,
        *,
        base_settings: BaseSettings,
        telegram_settings: TelegramSettings,
        upload_settings: UploadSettings,
        decoder: RequestFileDecoder,
        sender: MediaSenderProtocol,
    ) -> None:
        self._base_settings = base_settings
        self._telegram_settings = telegram_settings
        self._upload_settings = upload_settings
        self._decoder = decoder
        self._single = RelaySingleUseCase(sender, upload_settings.max_file_size_bytes)
        self._batch = RelayBatchUseCase(
            sender,
            upload_settings.max_file_size_bytes,
            expose_error_details=base_settings.expose_error_details,
        )

    @property
    def decoder_name(self) -> str:
        return self._decoder.name

    async def handle_single(self, request: Request) -> Response:
        """POST com um campo `file`."""
        return await self._handle(request, "single_upload", self._relay_single)

    async def handle_batch(self, request: Request) -> Response:
        """POST com campos `files` repetidos."""
        return await self._handle(request, "batch_upload", self._relay_batch)

    async def _handle(
        self,
        request: Request,
        context: str,
        flow: Callable[[Request, str], Awaitable[Response]],
    ) -> Response:
        allow_origin = resolve_allow_origin(
            request.headers.get("origin"),
            self._upload_settings.cors_allow_origins,
        )
        if request.method == "OPTIONS":
            return preflight_response(allow_origin)

        with correlation_scope(request.headers.get(CORRELATION_HEADER)):
            try:
                self._validate_method(request.method)
                self._validate_config()
                return await flow(request, allow_origin)
            except MethodNotAllowedError as exc:
                logger.info(
                    "upload_method_rejected",
                    extra={"context": context, "method": exc.method},
                )
                return method_not_allowed_response(exc.allowed_methods, allow_origin)
            except RelayError as exc:
                logger.info(
                    "upload_rejected",
                    extra={
                        "context": context,
                        "error_code": exc.code,
                        "status_code": exc.status_code,
                    },
                )
                return json_response(
                    error_envelope(exc.message, exc.code),
                    status_code=exc.status_code,
                    allow_origin=allow_origin,
                )
            except Exception as exc:
                logger.exception(
                    "upload_unexpected_error",
                    extra={"context": context, "error_type": type(exc).__name__},
                )
                message = (
                    str(exc) or INTERNAL_ERROR_MESSAGE
                    if self._base_settings.expose_error_details
                    else INTERNAL_ERROR_MESSAGE
                )
                return json_response(
                    error_envelope(message, "INTERNAL_ERROR"),
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    allow_origin=allow_origin,
                )

    def _validate_method(self, method: str) -> None:
        if method not in UPLOAD_ALLOWED_METHODS:
            raise MethodNotAllowedError(method, UPLOAD_ALLOWED_METHODS)

    def _validate_config(self) -> None:
        missing = self._telegram_settings.credential_errors()
        if missing:
            raise ConfigError(missing[0])

    async def _relay_single(self, request: Request, allow_origin: str) -> Response:
        files = await self._decoder.decode(request, SINGLE_FILE_FIELD)
        logger.info(
            "upload_received",
            extra={"decoder": self.decoder_name, "file_count": len(files)},
        )
        result = await self._single.execute(files[0] if files else None)

        if not result.outcome.success:
            logger.error(
                "single_upload_failed",
                extra={
                    "error_code": result.outcome.error_code,
                    "retry_count": result.outcome.retry_count,
                },
            )
            return json_response(
                error_envelope(
                    result.outcome.error or "Telegram upload failed",
                    result.outcome.error_code or UpstreamError.code,
                ),
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                allow_origin=allow_origin,
            )

        return json_response(
            success_envelope(
                _single_payload(result),
                "File uploaded successfully to Telegram",
            ),
            allow_origin=allow_origin,
        )

    async def _relay_batch(self, request: Request, allow_origin: str) -> Response:
        files = await self._decoder.decode(request, BATCH_FILES_FIELD)
        logger.info(
            "upload_received",
            extra={"decoder": self.decoder_name, "file_count": len(files)},
        )
        result = await self._batch.execute(files)
        return json_response(
            success_envelope(
                batch_payload(result),
                f"Batch upload completed: {result.successful} successful, "
                f"{result.failed} failed",
            ),
            allow_origin=allow_origin,
        )


def _single_payload(result: SingleRelayResult) -> dict[str, Any]:
    return {
        "filename": result.file.filename,
        "fileSize": result.file.size,
        "fileType": result.file.mime_type,
        "telegramMessageId": result.outcome.message_id,
    }


def file_outcome_payload(entry: FileOutcome) -> dict[str, Any]:
    """Entrada de `results[]` do lote."""
    outcome = entry.outcome
    if outcome.success:
        return {
            "success": True,
            "filename": entry.filename,
            "fileSize": entry.file_size,
            "fileType": entry.mime_type,
            "telegramMessageId": outcome.message_id,
        }
    return {
        "success": False,
        "filename": entry.filename,
        "error": outcome.error,
        "retryCount": outcome.retry_count,
    }


def batch_payload(result: BatchResult) -> dict[str, Any]:
    return {
        "results": [file_outcome_payload(entry) for entry in result.per_file],
        "summary": {
            "total": result.total,
            "successful": result.successful,
            "failed": result.failed,
        },
    }
