"""Settings do endpoint de upload."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

DecoderStrategy = Literal["manual", "library"]

DEFAULT_MAX_FILE_SIZE_BYTES = 50 * 1024 * 1024  # 50MB
# Limite do corpo inteiro: arquivos somados + cabeçalhos multipart
MULTIPART_OVERHEAD_BYTES = 1024 * 1024
DEFAULT_MAX_BODY_SIZE_BYTES = DEFAULT_MAX_FILE_SIZE_BYTES + MULTIPART_OVERHEAD_BYTES


@dataclass(frozen=True)
class UploadSettings:
    """Configurações de ingestão de arquivos.

    Attributes:
        max_file_size_bytes: Tamanho máximo aceito por arquivo
        max_body_size_bytes: Tamanho máximo do corpo da requisição, checado
            durante a leitura (antes de decodificar)
        decoder: Estratégia de decodificação multipart (manual|library)
        stage_to_disk: Grava o payload em arquivo temporário antes do envio
        cors_allow_origins: Origens liberadas no CORS
    """

    max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES
    max_body_size_bytes: int = DEFAULT_MAX_BODY_SIZE_BYTES
    decoder: DecoderStrategy = "manual"
    stage_to_disk: bool = False
    cors_allow_origins: tuple[str, ...] = ("*",)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.max_file_size_bytes <= 0:
            errors.append("UPLOAD_MAX_FILE_SIZE_BYTES deve ser > 0")
        if self.max_body_size_bytes <= 0:
            errors.append("UPLOAD_MAX_BODY_SIZE_BYTES deve ser > 0")
        if self.decoder not in ("manual", "library"):
            errors.append("UPLOAD_DECODER deve ser 'manual' ou 'library'")
        return errors


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(item.strip() for item in raw.split(",") if item.strip())
    return origins or ("*",)


def _load_from_env() -> UploadSettings:
    """Carrega UploadSettings de variáveis de ambiente."""
    return UploadSettings(
        max_file_size_bytes=int(
            os.getenv("UPLOAD_MAX_FILE_SIZE_BYTES", str(DEFAULT_MAX_FILE_SIZE_BYTES))
        ),
        max_body_size_bytes=int(
            os.getenv("UPLOAD_MAX_BODY_SIZE_BYTES", str(DEFAULT_MAX_BODY_SIZE_BYTES))
        ),
        decoder=os.getenv("UPLOAD_DECODER", "manual").lower(),  # type: ignore[arg-type]
        stage_to_disk=os.getenv("UPLOAD_STAGE_TO_DISK", "").lower() in ("true", "1", "yes"),
        cors_allow_origins=_parse_origins(os.getenv("UPLOAD_CORS_ALLOW_ORIGINS", "*")),
    )


@lru_cache(maxsize=1)
def get_upload_settings() -> UploadSettings:
    """Retorna instância cacheada de UploadSettings."""
    return _load_from_env()
