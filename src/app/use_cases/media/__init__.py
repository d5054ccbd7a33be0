"""Casos de uso de relay de mídia (arquivo único e lote)."""

from app.use_cases.media.relay_batch import INTERNAL_ERROR_MESSAGE, RelayBatchUseCase
from app.use_cases.media.relay_single import RelaySingleUseCase, SingleRelayResult

__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "RelayBatchUseCase",
    "RelaySingleUseCase",
    "SingleRelayResult",
]
