"""Testes do staging de payload em disco."""

from __future__ import annotations

from pathlib import Path

import pytest

from app.domain import DecodedFile
from app.infra.media import staged_payload


def _file(name: str = "photo.png") -> DecodedFile:
    return DecodedFile(filename=name, mime_type="image/png", payload=b"\x89PNG" + b"\x00" * 64)


def test_staged_file_holds_payload_and_is_removed(tmp_path: Path) -> None:
    file = _file()

    with staged_payload(file, directory=str(tmp_path)) as path:
        assert path.parent == tmp_path
        assert path.name.startswith("upload_")
        assert path.suffix == ".png"
        assert path.read_bytes() == file.payload

    assert not path.exists()
    assert list(tmp_path.iterdir()) == []


def test_staged_file_removed_when_block_raises(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError), staged_payload(_file(), directory=str(tmp_path)) as path:
        raise RuntimeError("send failed")

    assert not path.exists()
    assert list(tmp_path.iterdir()) == []


def test_already_removed_file_does_not_fail(tmp_path: Path) -> None:
    with staged_payload(_file("clip"), directory=str(tmp_path)) as path:
        path.unlink()

    assert list(tmp_path.iterdir()) == []
