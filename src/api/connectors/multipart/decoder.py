"""Decoder multipart manual, seguro para binário.

Só as regiões de cabeçalho de cada parte são decodificadas como
texto; o payload é recortado como bytes e nunca passa por encoding.

Uma parte é de arquivo quando o Content-Disposition traz o atributo
filename. O payload vai do fim do bloco de cabeçalhos (linha em
branco) até o CRLF que antecede o próximo boundary.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import unquote

from app.domain import DecodedFile
from app.domain.media import DEFAULT_MIME_TYPE

if TYPE_CHECKING:
    from collections.abc import Iterator

HEADER_SEPARATOR = b"\r\n\r\n"
LINE_BREAK = b"\r\n"

_BOUNDARY_RE = re.compile(r'boundary=(?:"([^"]+)"|([^;\s]+))', re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class MultipartFilePart:
    """Parte de arquivo com o nome do campo do formulário."""

    field_name: str | None
    file: DecodedFile


def extract_boundary(content_type: str | None) -> str | None:
    """Extrai o boundary do header Content-Type.

    Returns:
        Boundary sem aspas, ou None se o corpo não for
        multipart/form-data ou o parâmetro estiver ausente.
    """
    if not content_type or "multipart/form-data" not in content_type.lower():
        return None
    match = _BOUNDARY_RE.search(content_type)
    if not match:
        return None
    boundary = (match.group(1) or match.group(2) or "").strip()
    return boundary or None


def iter_file_parts(body: bytes, boundary: str) -> Iterator[MultipartFilePart]:
    """Itera as partes de arquivo do corpo, na ordem em que aparecem.

    Partes malformadas ou com payload vazio são puladas.
    """
    delimiter = b"--" + boundary.encode("latin-1")
    for part in body.split(delimiter):
        header_end = part.find(HEADER_SEPARATOR)
        if header_end == -1:
            continue

        headers = _parse_headers(part[:header_end])
        disposition = headers.get("content-disposition", "")
        filename = _filename_param(disposition)
        if filename is None:
            continue

        binary_start = header_end + len(HEADER_SEPARATOR)
        binary_end = part.rfind(LINE_BREAK)
        if binary_end <= binary_start:
            continue

        mime_type = headers.get("content-type", "").strip() or DEFAULT_MIME_TYPE
        yield MultipartFilePart(
            field_name=_disposition_param(disposition, "name"),
            file=DecodedFile(
                filename=filename,
                mime_type=mime_type,
                payload=part[binary_start:binary_end],
            ),
        )


def decode_files(body: bytes, boundary: str, field_name: str | None = None) -> list[DecodedFile]:
    """Todos os arquivos do campo `field_name` (ou de qualquer campo se None)."""
    return [
        part.file
        for part in iter_file_parts(body, boundary)
        if field_name is None or part.field_name == field_name
    ]


def decode_multipart_file(
    body: bytes,
    content_type: str | None,
    field_name: str | None = "file",
) -> DecodedFile | None:
    """Primeiro arquivo do campo, ou None.

    Corpo não-multipart, boundary ausente e ausência de arquivo
    resultam todos em None; o chamador trata igual (400).
    """
    boundary = extract_boundary(content_type)
    if boundary is None:
        return None
    for part in iter_file_parts(body, boundary):
        if field_name is None or part.field_name == field_name:
            return part.file
    return None


def _parse_headers(raw: bytes) -> dict[str, str]:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        text = raw.decode("latin-1")

    headers: dict[str, str] = {}
    for line in text.split("\r\n"):
        name, sep, value = line.partition(":")
        if sep and name.strip():
            headers[name.strip().lower()] = value.strip()
    return headers


def _disposition_param(disposition: str, param: str) -> str | None:
    # `;\s*name=` não casa com `filename=`
    pattern = rf'(?:^|;)\s*{re.escape(param)}\s*=\s*(?:"((?:[^"\\]|\\.)*)"|([^;]*))'
    match = re.search(pattern, disposition, re.IGNORECASE)
    if not match:
        return None
    if match.group(1) is not None:
        return match.group(1).replace("\\\\", "\\").replace('\\"', '"')
    return match.group(2).strip()


def _filename_param(disposition: str) -> str | None:
    """filename* (RFC 5987) tem precedência sobre filename."""
    extended = _disposition_param(disposition, "filename*")
    if extended:
        _, _, encoded = extended.partition("''")
        filename = unquote(encoded or extended, encoding="utf-8", errors="replace")
    else:
        filename = _disposition_param(disposition, "filename")
    if filename is None:
        return None
    # Alguns navegadores enviam o caminho completo do cliente
    return re.split(r"[\\/]", filename)[-1]
