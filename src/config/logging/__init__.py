"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="telegram_media_relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("upload_received", extra={"file_count": 1})

Campos obrigatórios em todo log: correlation_id, service, level,
logger, message, timestamp. Bytes de arquivo nunca entram em log;
o token do bot é mascarado mesmo em logs de bibliotecas (httpx).
"""

from config.logging.config import configure_logging, get_logger, log_retry
from config.logging.filters import BotTokenRedactionFilter, CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "BotTokenRedactionFilter",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_retry",
]
