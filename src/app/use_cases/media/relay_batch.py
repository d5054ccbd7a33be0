"""Use case de relay em lote.

Processa os arquivos em sequência: o envio de um arquivo (incluindo
retries) termina antes do próximo começar. Falha de um arquivo nunca
interrompe os demais.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain import BatchResult, FileOutcome, SendOutcome
from app.use_cases.media._validation import validate_file
from utils.errors import ClientError, NoFileUploadedError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain import DecodedFile
    from app.protocols.media_sender import MediaSenderProtocol

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class RelayBatchUseCase:
    """Orquestra classificação e envio de uma lista de arquivos."""

    def __init__(
        self,
        sender: MediaSenderProtocol,
        max_file_size_bytes: int,
        *,
        expose_error_details: bool = False,
    ) -> None:
        self._sender = sender
        self._max_file_size_bytes = max_file_size_bytes
        self._expose_error_details = expose_error_details

    async def execute(self, files: Sequence[DecodedFile]) -> BatchResult:
        """Envia cada arquivo e agrega os resultados na ordem de entrada.

        Raises:
            NoFileUploadedError: Lista vazia.
        """
        if not files:
            raise NoFileUploadedError("No files uploaded")

        total = len(files)
        logger.info("batch_upload_started", extra={"file_count": total})

        entries: list[FileOutcome] = []
        for index, file in enumerate(files, start=1):
            entries.append(await self._process_file(file, index, total))

        result = BatchResult(per_file=tuple(entries))
        logger.info(
            "batch_upload_completed",
            extra={
                "total": result.total,
                "successful": result.successful,
                "failed": result.failed,
            },
        )
        return result

    async def _process_file(self, file: DecodedFile, index: int, total: int) -> FileOutcome:
        logger.info(
            "batch_file_processing",
            extra={"position": index, "total": total, "file_name": file.filename},
        )
        try:
            kind, normalized = validate_file(file, self._max_file_size_bytes)
        except ClientError as exc:
            logger.info(
                "batch_file_rejected",
                extra={"position": index, "error_code": exc.code},
            )
            return FileOutcome(
                filename=file.filename,
                outcome=SendOutcome.failed(exc.message, error_code=exc.code),
                file_size=file.size,
                mime_type=file.mime_type,
            )

        try:
            outcome = await self._sender.send(normalized, kind)
        except Exception as exc:
            logger.exception(
                "batch_file_send_crashed",
                extra={"position": index, "error_type": type(exc).__name__},
            )
            outcome = SendOutcome.failed(self._crash_message(exc), error_code="INTERNAL_ERROR")

        return FileOutcome(
            filename=normalized.filename,
            outcome=outcome,
            file_size=normalized.size,
            mime_type=normalized.mime_type,
        )

    def _crash_message(self, exc: Exception) -> str:
        # Texto da exceção só sai do processo quando explicitamente liberado
        if self._expose_error_details:
            return str(exc) or INTERNAL_ERROR_MESSAGE
        return INTERNAL_ERROR_MESSAGE
