"""Protocolo de envio de mídia ao destino."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain import DecodedFile, FileClassification, SendOutcome


class MediaSenderProtocol(Protocol):
    """Contrato mínimo do sender: um arquivo, um resultado terminal.

    Implementações não levantam exceção para falhas do destino;
    toda falha volta como SendOutcome(success=False).
    """

    async def send(
        self,
        file: DecodedFile,
        kind: FileClassification,
    ) -> SendOutcome: ...
