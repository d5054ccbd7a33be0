"""Agregador de settings do relay de mídia.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Destino Telegram
from config.settings.telegram import (
    BOT_TOKEN_MISSING,
    CHAT_ID_MISSING,
    TELEGRAM_API_BASE_URL,
    TelegramSettings,
    get_telegram_settings,
)

# Upload
from config.settings.upload import (
    DEFAULT_MAX_BODY_SIZE_BYTES,
    DEFAULT_MAX_FILE_SIZE_BYTES,
    DecoderStrategy,
    UploadSettings,
    get_upload_settings,
)

__all__ = [
    # Constants
    "BOT_TOKEN_MISSING",
    "CHAT_ID_MISSING",
    "DEFAULT_MAX_BODY_SIZE_BYTES",
    "DEFAULT_MAX_FILE_SIZE_BYTES",
    "TELEGRAM_API_BASE_URL",
    # Base
    "BaseSettings",
    "DecoderStrategy",
    "Environment",
    # Telegram
    "TelegramSettings",
    # Upload
    "UploadSettings",
    "get_base_settings",
    "get_telegram_settings",
    "get_upload_settings",
]
