"""Classificação de arquivos em imagem, vídeo ou não suportado.

Regra: o Content-Type declarado manda; se não estiver nas allow-lists,
cai para a extensão do nome do arquivo (última parte após o ponto,
case-insensitive). Classificação por extensão normaliza o mime_type
para o valor canônico da extensão.
"""

from __future__ import annotations

from dataclasses import replace

from app.domain import DecodedFile, FileClassification

SUPPORTED_IMAGE_TYPES: tuple[str, ...] = (
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
)
SUPPORTED_VIDEO_TYPES: tuple[str, ...] = (
    "video/mp4",
    "video/avi",
    "video/mov",
    "video/webm",
)

IMAGE_EXTENSIONS: dict[str, str] = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
}
VIDEO_EXTENSIONS: dict[str, str] = {
    "mp4": "video/mp4",
    "avi": "video/avi",
    "mov": "video/quicktime",
    "webm": "video/webm",
}


def supported_types_label() -> str:
    """Lista legível das allow-lists, usada na mensagem de erro."""
    return ", ".join((*SUPPORTED_IMAGE_TYPES, *SUPPORTED_VIDEO_TYPES))


def file_extension(filename: str) -> str:
    """Extensão em minúsculas após o último ponto ("" se não houver)."""
    if not filename or "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].strip().lower()


def _normalize_mime(mime_type: str | None) -> str:
    # "image/JPEG; charset=binary" -> "image/jpeg"
    return (mime_type or "").split(";", 1)[0].strip().lower()


def classify(mime_type: str | None, filename: str | None) -> FileClassification:
    """Classifica a partir do tipo declarado e do nome do arquivo.

    Total: qualquer entrada mapeia para exatamente uma variante,
    sem levantar exceção.
    """
    declared = _normalize_mime(mime_type)
    if declared in SUPPORTED_IMAGE_TYPES:
        return FileClassification.IMAGE
    if declared in SUPPORTED_VIDEO_TYPES:
        return FileClassification.VIDEO

    extension = file_extension(filename or "")
    if extension in IMAGE_EXTENSIONS:
        return FileClassification.IMAGE
    if extension in VIDEO_EXTENSIONS:
        return FileClassification.VIDEO
    return FileClassification.UNSUPPORTED


def classify_file(file: DecodedFile) -> tuple[FileClassification, DecodedFile]:
    """Classifica o arquivo e devolve cópia com mime_type normalizado.

    Quando o tipo declarado já está na allow-list o arquivo volta
    intacto. Quando a classificação veio da extensão, o mime_type é
    trocado pelo canônico da extensão (ex: jpg -> image/jpeg).
    """
    kind = classify(file.mime_type, file.filename)
    if kind is FileClassification.UNSUPPORTED:
        return kind, file

    declared = _normalize_mime(file.mime_type)
    if declared in SUPPORTED_IMAGE_TYPES or declared in SUPPORTED_VIDEO_TYPES:
        if declared != file.mime_type:
            return kind, replace(file, mime_type=declared)
        return kind, file

    extension = file_extension(file.filename)
    canonical = IMAGE_EXTENSIONS.get(extension) or VIDEO_EXTENSIONS[extension]
    return kind, replace(file, mime_type=canonical)
