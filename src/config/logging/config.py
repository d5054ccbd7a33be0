"""Configuração centralizada de logging JSON."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import BotTokenRedactionFilter, CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "telegram_media_relay"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).
    Chamadas repetidas substituem o handler anterior.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id
            da requisição corrente.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(BotTokenRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (service/correlation_id via filter)."""
    return logging.getLogger(name)


def log_retry(
    logger: logging.Logger,
    component: str,
    *,
    attempt: int,
    delay_ms: int,
    reason: str,
    retry_after_seconds: int | None = None,
) -> None:
    """Registra agendamento de nova tentativa após falha transitória.

    Args:
        logger: Logger instance.
        component: Componente que vai retentar (ex: "telegram_sender").
        attempt: Número da tentativa que falhou (1-based).
        delay_ms: Espera antes da próxima tentativa.
        reason: Classificação da falha (ex: "http_429") sem PII.
        retry_after_seconds: Espera sugerida pelo destino, quando houver.
    """
    extra: dict[str, object] = {
        "component": component,
        "attempt": attempt,
        "delay_ms": delay_ms,
        "reason": reason,
    }
    if retry_after_seconds is not None:
        extra["retry_after_seconds"] = retry_after_seconds
    logger.warning("%s_retry_scheduled", component, extra=extra)
