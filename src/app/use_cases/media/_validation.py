"""Validações compartilhadas entre o fluxo único e o lote."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain import FileClassification
from app.services.media_classifier import classify_file, supported_types_label
from utils.errors import FileTooLargeError, UnsupportedFileTypeError

if TYPE_CHECKING:
    from app.domain import DecodedFile


def validate_file(
    file: DecodedFile,
    max_file_size_bytes: int,
) -> tuple[FileClassification, DecodedFile]:
    """Checa tamanho e classifica.

    Returns:
        (classificação, arquivo com mime_type normalizado)

    Raises:
        FileTooLargeError: Arquivo acima do limite.
        UnsupportedFileTypeError: Nem imagem nem vídeo suportado.
    """
    if file.size > max_file_size_bytes:
        raise FileTooLargeError(
            f"File too large: {file.filename} has {file.size} bytes "
            f"(limit {max_file_size_bytes} bytes)"
        )

    kind, normalized = classify_file(file)
    if kind is FileClassification.UNSUPPORTED:
        raise UnsupportedFileTypeError(
            f"Unsupported file type: {file.mime_type}. "
            f"Supported types: {supported_types_label()}"
        )
    return kind, normalized
