"""Sender fake para testes de use cases e handler."""

from __future__ import annotations

from app.domain import DecodedFile, FileClassification, SendOutcome


class FakeMediaSender:
    """Registra chamadas e devolve resultados pré-definidos por nome de arquivo."""

    def __init__(
        self,
        outcomes: dict[str, SendOutcome] | None = None,
        default_message_id: int = 100,
    ) -> None:
        self._outcomes = outcomes or {}
        self._next_message_id = default_message_id
        self.calls: list[tuple[DecodedFile, FileClassification]] = []

    async def send(self, file: DecodedFile, kind: FileClassification) -> SendOutcome:
        self.calls.append((file, kind))
        if file.filename in self._outcomes:
            return self._outcomes[file.filename]
        message_id = self._next_message_id
        self._next_message_id += 1
        return SendOutcome.succeeded(message_id)


def build_multipart(
    parts: list[tuple[str, str | None, str | None, bytes]],
    boundary: str = "----relayboundary7MA4YWxkTrZu0gW",
) -> tuple[bytes, str]:
    """Monta corpo multipart/form-data.

    Args:
        parts: (campo, filename, content_type, payload). filename None
            gera campo de texto.

    Returns:
        (corpo, header Content-Type)
    """
    chunks: list[bytes] = []
    for field, filename, content_type, payload in parts:
        disposition = f'Content-Disposition: form-data; name="{field}"'
        if filename is not None:
            disposition += f'; filename="{filename}"'
        headers = disposition + "\r\n"
        if content_type is not None:
            headers += f"Content-Type: {content_type}\r\n"
        chunks.append(f"--{boundary}\r\n{headers}\r\n".encode() + payload + b"\r\n")
    chunks.append(f"--{boundary}--\r\n".encode())
    return b"".join(chunks), f"multipart/form-data; boundary={boundary}"
