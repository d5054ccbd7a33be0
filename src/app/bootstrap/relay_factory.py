"""Factory de wiring do relay de mídia (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.multipart import create_decoder
from api.connectors.telegram import TelegramMediaSender
from api.routes.upload.handler import UploadRequestHandler

if TYPE_CHECKING:
    import httpx

    from api.connectors.multipart import RequestFileDecoder
    from app.protocols.media_sender import MediaSenderProtocol
    from config.settings import BaseSettings, TelegramSettings, UploadSettings


def create_media_sender(
    telegram_settings: TelegramSettings,
    upload_settings: UploadSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TelegramMediaSender:
    """Cria sender da Bot API (implementa MediaSenderProtocol)."""
    return TelegramMediaSender(
        telegram_settings,
        stage_to_disk=upload_settings.stage_to_disk,
        transport=transport,
    )


def create_upload_handler(
    base_settings: BaseSettings,
    telegram_settings: TelegramSettings,
    upload_settings: UploadSettings,
    *,
    sender: MediaSenderProtocol | None = None,
    decoder: RequestFileDecoder | None = None,
) -> UploadRequestHandler:
    """Cria o handler com a estratégia de decoder configurada.

    `sender` e `decoder` podem ser injetados (testes); por padrão vêm
    das settings.
    """
    return UploadRequestHandler(
        base_settings=base_settings,
        telegram_settings=telegram_settings,
        upload_settings=upload_settings,
        decoder=decoder
        or create_decoder(upload_settings.decoder, upload_settings.max_body_size_bytes),
        sender=sender or create_media_sender(telegram_settings, upload_settings),
    )
