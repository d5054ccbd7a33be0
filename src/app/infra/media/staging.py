"""Staging de payload em arquivo temporário.

O arquivo existe apenas dentro do bloco `with`; a remoção acontece
em sucesso, falha ou exceção.
"""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from app.domain import DecodedFile

logger = logging.getLogger(__name__)

STAGING_PREFIX = "upload_"


@contextmanager
def staged_payload(file: DecodedFile, directory: str | None = None) -> Iterator[Path]:
    """Grava o payload em disco e devolve o caminho.

    Args:
        file: Arquivo decodificado.
        directory: Diretório de staging (padrão: tempdir do sistema).

    Yields:
        Caminho do arquivo temporário.
    """
    suffix = Path(file.filename).suffix[:16]
    fd, raw_path = tempfile.mkstemp(prefix=STAGING_PREFIX, suffix=suffix, dir=directory)
    path = Path(raw_path)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(file.payload)
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning(
                "staged_payload_cleanup_failed",
                extra={"error_type": type(exc).__name__},
            )
