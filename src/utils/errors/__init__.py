"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ClientError,
    ConfigError,
    FileTooLargeError,
    MethodNotAllowedError,
    NoFileUploadedError,
    RelayError,
    RequestTooLargeError,
    UnsupportedFileTypeError,
    UpstreamError,
    UpstreamPermanentError,
    UpstreamTransientError,
)

__all__ = [
    "ClientError",
    "ConfigError",
    "FileTooLargeError",
    "MethodNotAllowedError",
    "NoFileUploadedError",
    "RelayError",
    "RequestTooLargeError",
    "UnsupportedFileTypeError",
    "UpstreamError",
    "UpstreamPermanentError",
    "UpstreamTransientError",
]
