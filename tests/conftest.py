"""Configuração do pytest para o relay de mídia."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import BaseSettings, TelegramSettings, UploadSettings  # noqa: E402


@pytest.fixture
def base_settings() -> BaseSettings:
    return BaseSettings(environment="development")


@pytest.fixture
def telegram_settings() -> TelegramSettings:
    return TelegramSettings(
        bot_token="123456:TEST-TOKEN",
        chat_id="-100200300",
        api_base_url="https://telegram.test",
    )


@pytest.fixture
def upload_settings() -> UploadSettings:
    return UploadSettings()
