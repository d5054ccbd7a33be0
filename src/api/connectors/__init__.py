"""Connectors: adapters de borda.

Estrutura:
- multipart/: decodificação do corpo multipart/form-data
- telegram/: Telegram Bot API (sendPhoto/sendVideo)
"""

__all__: list[str] = []
