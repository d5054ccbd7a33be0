"""Rotas HTTP da API.

Estrutura:
- routes/upload/: relay de arquivos (único e lote)
- routes/health/: health checks
- responses.py: envelope padrão e CORS

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
