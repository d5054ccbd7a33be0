"""Modelos de domínio do pipeline de upload.

Nenhuma entidade sobrevive à requisição que a criou: não há
persistência nem estado compartilhado entre requisições.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_MIME_TYPE = "application/octet-stream"


class FileClassification(str, Enum):
    """Categoria de mídia suportada pelo destino."""

    IMAGE = "image"
    VIDEO = "video"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True, slots=True)
class DecodedFile:
    """Arquivo extraído de um corpo multipart.

    Attributes:
        filename: Nome original enviado pelo cliente
        mime_type: Content-Type declarado na parte (ou normalizado)
        payload: Bytes do arquivo, sem transformação
    """

    filename: str
    mime_type: str
    payload: bytes

    @property
    def size(self) -> int:
        return len(self.payload)

    def __repr__(self) -> str:
        return (
            f"DecodedFile(filename={self.filename!r}, "
            f"mime_type={self.mime_type!r}, size={self.size})"
        )


@dataclass(frozen=True, slots=True)
class SendOutcome:
    """Resultado terminal do envio de um arquivo.

    Attributes:
        success: True se a Bot API confirmou a mensagem
        message_id: ID da mensagem criada (quando success)
        error: Mensagem legível da falha (quando not success)
        retry_count: Quantas novas tentativas foram feitas após a primeira
        error_code: Código estável da falha para o envelope
    """

    success: bool
    message_id: int | None = None
    error: str | None = None
    retry_count: int = 0
    error_code: str | None = None

    @classmethod
    def succeeded(cls, message_id: int | None, retry_count: int = 0) -> SendOutcome:
        return cls(success=True, message_id=message_id, retry_count=retry_count)

    @classmethod
    def failed(
        cls,
        error: str,
        *,
        retry_count: int = 0,
        error_code: str | None = None,
    ) -> SendOutcome:
        return cls(
            success=False,
            error=error,
            retry_count=retry_count,
            error_code=error_code,
        )


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Par (arquivo, resultado) dentro de um lote."""

    filename: str
    outcome: SendOutcome
    file_size: int = 0
    mime_type: str = DEFAULT_MIME_TYPE


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Resumo de um lote, na ordem de submissão.

    Invariante: successful + failed == total == len(per_file).
    """

    per_file: tuple[FileOutcome, ...]

    @property
    def total(self) -> int:
        return len(self.per_file)

    @property
    def successful(self) -> int:
        return sum(1 for entry in self.per_file if entry.outcome.success)

    @property
    def failed(self) -> int:
        return self.total - self.successful
