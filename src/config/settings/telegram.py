"""Settings específicas de Telegram.

Configurações do destino Telegram via Bot API. Construídas uma vez no
bootstrap e injetadas no handler e no sender; nunca relidas no meio
de uma requisição.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Telegram Bot API
TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"

# Mensagens expostas no envelope de erro (contrato com o uploader web)
BOT_TOKEN_MISSING = "Telegram Bot Token not configured"
CHAT_ID_MISSING = "Telegram Chat ID not configured"


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do destino Telegram.

    Attributes:
        bot_token: Token do bot Telegram (obtido via @BotFather)
        chat_id: Chat de destino dos arquivos
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Tentativas adicionais em falhas transitórias
    """

    # Credenciais
    bot_token: str = ""
    chat_id: str = ""

    # API
    api_base_url: str = TELEGRAM_API_BASE_URL

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com token do bot."""
        if not self.bot_token:
            raise ValueError("bot_token é obrigatório")
        return f"{self.api_base_url.rstrip('/')}/bot{self.bot_token}"

    def method_url(self, method: str) -> str:
        """Retorna URL de um método da Bot API (ex: sendPhoto)."""
        return f"{self.api_endpoint}/{method}"

    @property
    def is_configured(self) -> bool:
        return bool(self.bot_token and self.chat_id)

    def credential_errors(self) -> list[str]:
        """Credenciais ausentes, na ordem em que são checadas."""
        errors: list[str] = []
        if not self.bot_token:
            errors.append(BOT_TOKEN_MISSING)
        if not self.chat_id:
            errors.append(CHAT_ID_MISSING)
        return errors

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Telegram.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors = self.credential_errors()
        if self.request_timeout_seconds <= 0:
            errors.append("TELEGRAM_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        if self.max_retries < 0:
            errors.append("TELEGRAM_MAX_RETRIES deve ser >= 0")
        return errors


def _load_from_env() -> TelegramSettings:
    """Carrega TelegramSettings de variáveis de ambiente."""
    return TelegramSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", "").strip(),
        chat_id=os.getenv("TELEGRAM_CHAT_ID", "").strip(),
        api_base_url=os.getenv("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        max_retries=int(os.getenv("TELEGRAM_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_telegram_settings() -> TelegramSettings:
    """Retorna instância cacheada de TelegramSettings."""
    return _load_from_env()
