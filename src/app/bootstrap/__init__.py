"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings(base, telegram, upload)
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from app.bootstrap.relay_factory import create_media_sender, create_upload_handler
from app.observability import get_correlation_id
from config.logging import configure_logging

if TYPE_CHECKING:
    from config.settings import BaseSettings, TelegramSettings, UploadSettings

SERVICE_NAME = "telegram_media_relay"

DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)

__all__ = [
    "SERVICE_NAME",
    "create_media_sender",
    "create_upload_handler",
    "initialize_app",
    "validate_runtime_settings",
]


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no startup."""
    configure_logging(
        level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(
    base_settings: BaseSettings,
    telegram_settings: TelegramSettings,
    upload_settings: UploadSettings,
) -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` apenas alerta; cada upload responde então com o
    erro de configuração (500).
    """
    environment = base_settings.environment
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base_settings.validate())
    errors.extend(f"telegram: {error}" for error in telegram_settings.validate())
    errors.extend(f"upload: {error}" for error in upload_settings.validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
