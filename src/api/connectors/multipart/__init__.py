"""Decodificação de corpos multipart/form-data."""

from api.connectors.multipart.decoder import (
    MultipartFilePart,
    decode_files,
    decode_multipart_file,
    extract_boundary,
    iter_file_parts,
)
from api.connectors.multipart.strategies import (
    LibraryMultipartDecoder,
    ManualMultipartDecoder,
    RequestFileDecoder,
    capped_receive,
    check_declared_length,
    create_decoder,
)

__all__ = [
    "LibraryMultipartDecoder",
    "ManualMultipartDecoder",
    "MultipartFilePart",
    "RequestFileDecoder",
    "capped_receive",
    "check_declared_length",
    "create_decoder",
    "decode_files",
    "decode_multipart_file",
    "extract_boundary",
    "iter_file_parts",
]
