"""Protocolos e contratos do core da aplicação."""

from .media_sender import MediaSenderProtocol

__all__ = ["MediaSenderProtocol"]
