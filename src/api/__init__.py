"""API: camada de borda HTTP.

Responsabilidades:
- Receber uploads multipart do navegador
- Decodificar o corpo em arquivos
- Enviar arquivos para a Telegram Bot API
- Montar envelopes de resposta e cabeçalhos CORS

Subpastas:
- connectors/: multipart (entrada) e Telegram (saída)
- routes/: endpoints HTTP (upload, health)

NÃO PODE conter: regras de classificação nem orquestração de lote.
"""
