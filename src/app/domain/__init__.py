"""Modelos de domínio do relay de mídia."""

from app.domain.media import (
    BatchResult,
    DecodedFile,
    FileClassification,
    FileOutcome,
    SendOutcome,
)

__all__ = [
    "BatchResult",
    "DecodedFile",
    "FileClassification",
    "FileOutcome",
    "SendOutcome",
]
