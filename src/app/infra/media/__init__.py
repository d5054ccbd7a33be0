"""Infra de mídia: staging temporário em disco."""

from app.infra.media.staging import staged_payload

__all__ = ["staged_payload"]
