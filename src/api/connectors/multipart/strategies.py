"""Estratégias de decodificação do corpo da requisição.

- manual: lê o corpo em chunks via `request.stream()` e usa o decoder
  de bytes deste pacote;
- library: usa `request.form()` do Starlette (python-multipart).

A estratégia é escolhida na construção do handler. As duas respeitam
o limite de corpo: Content-Length acima do limite é rejeitado antes de
qualquer leitura, e a contagem continua durante a leitura para corpos
sem Content-Length (ou com valor falso).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from starlette.datastructures import UploadFile
from starlette.formparsers import MultiPartException
from starlette.requests import ClientDisconnect, Request

from api.connectors.multipart.decoder import decode_files, extract_boundary
from app.domain import DecodedFile
from app.domain.media import DEFAULT_MIME_TYPE
from utils.errors import RequestTooLargeError

if TYPE_CHECKING:
    from starlette.types import Message, Receive

    from config.settings import DecoderStrategy

logger = logging.getLogger(__name__)


class RequestFileDecoder(Protocol):
    """Extrai os arquivos de um campo do formulário."""

    name: str

    async def decode(self, request: Request, field_name: str) -> list[DecodedFile]: ...


def _too_large(limit: int) -> RequestTooLargeError:
    return RequestTooLargeError(f"Request body too large (limit {limit} bytes)")


def check_declared_length(request: Request, limit: int | None) -> None:
    """Rejeita pelo Content-Length declarado, sem ler o corpo.

    Raises:
        RequestTooLargeError: Content-Length acima do limite.
    """
    if limit is None:
        return
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        logger.info(
            "upload_body_rejected",
            extra={"declared_length": int(declared), "limit": limit, "stage": "headers"},
        )
        raise _too_large(limit)


def capped_receive(receive: Receive, limit: int) -> Receive:
    """Envolve o `receive` ASGI contando bytes e abortando acima do limite."""
    received = 0

    async def _receive() -> Message:
        nonlocal received
        message = await receive()
        if message["type"] == "http.request":
            received += len(message.get("body", b""))
            if received > limit:
                logger.info(
                    "upload_body_rejected",
                    extra={"received": received, "limit": limit, "stage": "stream"},
                )
                raise _too_large(limit)
        return message

    return _receive


class ManualMultipartDecoder:
    """Decoder baseado no parser de bytes próprio."""

    name = "manual"

    def __init__(self, max_body_size_bytes: int | None = None) -> None:
        self._max_body_size_bytes = max_body_size_bytes

    async def decode(self, request: Request, field_name: str) -> list[DecodedFile]:
        boundary = extract_boundary(request.headers.get("content-type"))
        if boundary is None:
            return []
        check_declared_length(request, self._max_body_size_bytes)
        try:
            body = await self._read_body(request)
        except ClientDisconnect:
            logger.info("upload_client_disconnected", extra={"decoder": self.name})
            return []
        return decode_files(body, boundary, field_name)

    async def _read_body(self, request: Request) -> bytes:
        limit = self._max_body_size_bytes
        buffer = bytearray()
        async for chunk in request.stream():
            buffer.extend(chunk)
            if limit is not None and len(buffer) > limit:
                logger.info(
                    "upload_body_rejected",
                    extra={"received": len(buffer), "limit": limit, "stage": "stream"},
                )
                raise _too_large(limit)
        return bytes(buffer)


class LibraryMultipartDecoder:
    """Decoder baseado no parser de formulário do Starlette."""

    name = "library"

    def __init__(self, max_files: int = 1000, max_body_size_bytes: int | None = None) -> None:
        self._max_files = max_files
        self._max_body_size_bytes = max_body_size_bytes

    async def decode(self, request: Request, field_name: str) -> list[DecodedFile]:
        if extract_boundary(request.headers.get("content-type")) is None:
            return []
        check_declared_length(request, self._max_body_size_bytes)
        if self._max_body_size_bytes is not None:
            request = Request(
                request.scope,
                capped_receive(request.receive, self._max_body_size_bytes),
            )
        try:
            form = await request.form(max_files=self._max_files)
        except ClientDisconnect:
            logger.info("upload_client_disconnected", extra={"decoder": self.name})
            return []
        except (MultiPartException, ValueError) as exc:
            logger.info(
                "multipart_parse_failed",
                extra={"decoder": self.name, "error_type": type(exc).__name__},
            )
            return []

        files: list[DecodedFile] = []
        try:
            for item in form.getlist(field_name):
                if not isinstance(item, UploadFile):
                    continue
                payload = await item.read()
                if not payload:
                    continue
                files.append(
                    DecodedFile(
                        filename=item.filename or "",
                        mime_type=item.content_type or DEFAULT_MIME_TYPE,
                        payload=payload,
                    )
                )
        finally:
            await form.close()
        return files


def create_decoder(
    strategy: DecoderStrategy,
    max_body_size_bytes: int | None = None,
) -> RequestFileDecoder:
    """Factory da estratégia configurada em UPLOAD_DECODER."""
    if strategy == "library":
        return LibraryMultipartDecoder(max_body_size_bytes=max_body_size_bytes)
    if strategy == "manual":
        return ManualMultipartDecoder(max_body_size_bytes=max_body_size_bytes)
    raise ValueError(f"Estratégia de decoder inválida: {strategy}")
