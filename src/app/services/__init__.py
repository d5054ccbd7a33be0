"""Serviços de aplicação (regras puras, sem IO)."""

from app.services.media_classifier import (
    SUPPORTED_IMAGE_TYPES,
    SUPPORTED_VIDEO_TYPES,
    classify,
    classify_file,
    file_extension,
    supported_types_label,
)

__all__ = [
    "SUPPORTED_IMAGE_TYPES",
    "SUPPORTED_VIDEO_TYPES",
    "classify",
    "classify_file",
    "file_extension",
    "supported_types_label",
]
