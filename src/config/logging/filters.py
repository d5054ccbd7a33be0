"""Filters de logging.

- CorrelationIdFilter: injeta correlation_id e service em cada record.
- BotTokenRedactionFilter: mascara o token do bot em mensagens de
  terceiros. O httpx loga a URL completa de cada request em INFO, e a
  URL da Bot API carrega o token no path (/bot<TOKEN>/sendPhoto).
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

BOT_TOKEN_PATTERN = re.compile(r"/bot\d+:[A-Za-z0-9_-]+")
REDACTED_BOT_PATH = "/bot<redacted>"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service; nunca descarta o record.

    Um correlation_id passado via `extra` tem precedência sobre o getter.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        record.service = self._service_name
        return True


class BotTokenRedactionFilter(logging.Filter):
    """Reescreve a mensagem final trocando /bot<TOKEN> por /bot<redacted>."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = BOT_TOKEN_PATTERN.sub(REDACTED_BOT_PATH, message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True
