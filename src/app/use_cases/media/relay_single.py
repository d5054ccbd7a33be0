"""Use case de relay de um único arquivo."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.use_cases.media._validation import validate_file
from utils.errors import NoFileUploadedError

if TYPE_CHECKING:
    from app.domain import DecodedFile, FileClassification, SendOutcome
    from app.protocols.media_sender import MediaSenderProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SingleRelayResult:
    """Arquivo efetivamente enviado (já normalizado) e resultado."""

    file: DecodedFile
    kind: FileClassification
    outcome: SendOutcome


class RelaySingleUseCase:
    """Valida, classifica e envia um arquivo.

    Falhas do cliente levantam ClientError; falhas do destino voltam
    no SendOutcome para o handler decidir o envelope.
    """

    def __init__(self, sender: MediaSenderProtocol, max_file_size_bytes: int) -> None:
        self._sender = sender
        self._max_file_size_bytes = max_file_size_bytes

    async def execute(self, file: DecodedFile | None) -> SingleRelayResult:
        if file is None:
            raise NoFileUploadedError("No file uploaded")

        kind, normalized = validate_file(file, self._max_file_size_bytes)
        logger.info(
            "single_upload_processing",
            extra={
                "file_name": normalized.filename,
                "mime_type": normalized.mime_type,
                "file_size": normalized.size,
                "kind": kind.value,
            },
        )
        outcome = await self._sender.send(normalized, kind)
        return SingleRelayResult(file=normalized, kind=kind, outcome=outcome)
