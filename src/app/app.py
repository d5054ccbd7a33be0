"""Entrypoint do relay de mídia para o Telegram.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import create_upload_handler, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings, get_telegram_settings, get_upload_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from api.connectors.multipart import RequestFileDecoder
    from app.protocols import MediaSenderProtocol
    from config.settings import BaseSettings, TelegramSettings, UploadSettings

# Inicializar logging ANTES de qualquer log
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida settings no startup e registra o shutdown."""
    logger.info("app_starting", extra={"service": app.state.base_settings.service_name})
    validate_runtime_settings(
        app.state.base_settings,
        app.state.telegram_settings,
        app.state.upload_settings,
    )

    yield

    logger.info("app_shutting_down", extra={"service": app.state.base_settings.service_name})


def create_app(
    *,
    base_settings: BaseSettings | None = None,
    telegram_settings: TelegramSettings | None = None,
    upload_settings: UploadSettings | None = None,
    sender: MediaSenderProtocol | None = None,
    decoder: RequestFileDecoder | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Settings são lidas uma vez aqui (ou injetadas) e ficam em
    app.state; handlers nunca releem o ambiente durante a requisição.
    """
    base = base_settings or get_base_settings()
    telegram = telegram_settings or get_telegram_settings()
    upload = upload_settings or get_upload_settings()

    fastapi_app = FastAPI(
        title="Telegram Media Relay",
        description="Relay de imagens e vídeos do navegador para um chat do Telegram",
        version=base.version,
        lifespan=lifespan,
        docs_url=None if base.is_production else "/docs",
        redoc_url=None,
    )

    fastapi_app.state.base_settings = base
    fastapi_app.state.telegram_settings = telegram
    fastapi_app.state.upload_settings = upload
    fastapi_app.state.upload_handler = create_upload_handler(
        base,
        telegram,
        upload,
        sender=sender,
        decoder=decoder,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(upload.cors_allow_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    fastapi_app.include_router(create_api_router())

    logger.info(
        "app_configured",
        extra={
            "service": base.service_name,
            "decoder": fastapi_app.state.upload_handler.decoder_name,
            "stage_to_disk": upload.stage_to_disk,
        },
    )
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("app_starting_dev_server")
    uvicorn.run(
        "app.app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        reload=True,
    )


if __name__ == "__main__":
    main()
