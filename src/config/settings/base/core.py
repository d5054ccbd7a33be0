"""Settings base do relay de mídia.

Configurações comuns ao serviço, independentes do canal de destino.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        version: Versão publicada no health check
        debug: Expõe mensagens de exceções inesperadas no envelope de erro.
            Ligado por DEBUG=true ou ENVIRONMENT=development explícito.
    """

    environment: Environment = "development"
    service_name: str = "telegram-media-uploader"
    version: str = "1.0.0"
    debug: bool = False

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    @property
    def expose_error_details(self) -> bool:
        """Detalhes de exceção só saem do processo com opt-in explícito."""
        return self.debug

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        valid_envs = {"development", "staging", "production"}
        if self.environment not in valid_envs:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _explicit_debug() -> bool:
    # ENVIRONMENT ausente cai em development, mas sem expor detalhes
    if os.getenv("DEBUG", "").lower() in ("true", "1", "yes"):
        return True
    return os.getenv("ENVIRONMENT", "").strip().lower() == "development"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "telegram-media-uploader"),
        version=os.getenv("SERVICE_VERSION", "1.0.0"),
        debug=_explicit_debug(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
