"""Exceções de domínio do relay de mídia.

Cada exceção carrega o status HTTP e o código estável usados no
envelope de erro. Mensagens são legíveis para o usuário final;
detalhes internos vão apenas para o log.
"""

from __future__ import annotations


class RelayError(Exception):
    """Base para falhas esperadas do pipeline de upload."""

    status_code: int = 500
    code: str = "RELAY_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(RelayError):
    """Credenciais ausentes (token do bot ou chat de destino)."""

    status_code = 500
    code = "CONFIG_ERROR"


class ClientError(RelayError):
    """Requisição inválida do cliente. Nunca é retentada."""

    status_code = 400
    code = "CLIENT_ERROR"


class MethodNotAllowedError(ClientError):
    """Método HTTP fora da lista permitida."""

    status_code = 405
    code = "METHOD_NOT_ALLOWED"

    def __init__(self, method: str, allowed_methods: tuple[str, ...]) -> None:
        super().__init__("Method not allowed")
        self.method = method
        self.allowed_methods = allowed_methods


class NoFileUploadedError(ClientError):
    """Corpo sem parte de arquivo ou multipart malformado."""

    code = "NO_FILE"


class UnsupportedFileTypeError(ClientError):
    """Arquivo classificado como não suportado."""

    code = "UNSUPPORTED_FILE_TYPE"


class FileTooLargeError(ClientError):
    """Arquivo acima do limite configurado."""

    status_code = 413
    code = "FILE_TOO_LARGE"


class RequestTooLargeError(ClientError):
    """Corpo da requisição acima do limite, rejeitado antes de ser lido."""

    status_code = 413
    code = "PAYLOAD_TOO_LARGE"


class UpstreamError(RelayError):
    """Falha na chamada à Bot API."""

    code = "UPSTREAM_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message)
        self.upstream_status = status_code
        # parameters.retry_after da Bot API (segundos), quando informado
        self.retry_after = retry_after


class UpstreamTransientError(UpstreamError):
    """Timeout, reset de conexão, 429 ou 5xx. Elegível a retry."""

    code = "UPSTREAM_TRANSIENT"


class UpstreamPermanentError(UpstreamError):
    """4xx (exceto 429) ou resposta malformada. Sem retry."""

    code = "UPSTREAM_ERROR"
