"""Rotas e handler do relay de uploads."""

from api.routes.upload.handler import (
    BATCH_FILES_FIELD,
    SINGLE_FILE_FIELD,
    UploadRequestHandler,
)
from api.routes.upload.router import router

__all__ = [
    "BATCH_FILES_FIELD",
    "SINGLE_FILE_FIELD",
    "UploadRequestHandler",
    "router",
]
