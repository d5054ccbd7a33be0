"""Endpoints de upload.

Endpoints:
- /api/upload: um arquivo no campo `file`
- /api/batch-upload: vários arquivos no campo `files`

Registrados sem lista de métodos: qualquer método chega ao handler,
que responde OPTIONS com 200 e os demais métodos diferentes de POST
com 405 no formato do uploader.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response

if TYPE_CHECKING:
    from api.routes.upload.handler import UploadRequestHandler

router = APIRouter()


def _get_handler(request: Request) -> UploadRequestHandler:
    """Handler criado no bootstrap e guardado em app.state."""
    return request.app.state.upload_handler


async def upload_file(request: Request) -> Response:
    """Relay de um único arquivo para o Telegram."""
    return await _get_handler(request).handle_single(request)


async def upload_batch(request: Request) -> Response:
    """Relay sequencial de vários arquivos para o Telegram."""
    return await _get_handler(request).handle_batch(request)


# Rota Starlette com methods=None aceita qualquer método (HEAD, TRACE, ...)
router.add_route("/upload", upload_file, methods=None, include_in_schema=False)
router.add_route("/batch-upload", upload_batch, methods=None, include_in_schema=False)
