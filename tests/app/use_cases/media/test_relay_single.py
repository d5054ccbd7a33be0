"""Testes do RelaySingleUseCase."""

from __future__ import annotations

import pytest

from app.domain import DecodedFile, FileClassification, SendOutcome
from app.use_cases.media import RelaySingleUseCase
from tests.fakes.fake_media_sender import FakeMediaSender
from utils.errors import FileTooLargeError, NoFileUploadedError, UnsupportedFileTypeError

MAX_SIZE = 1024


@pytest.mark.asyncio
async def test_image_is_sent_with_normalized_mime() -> None:
    sender = FakeMediaSender()
    use_case = RelaySingleUseCase(sender, MAX_SIZE)
    file = DecodedFile(filename="test.jpg", mime_type="IMAGE/JPEG; charset=x", payload=b"a" * 10)

    result = await use_case.execute(file)

    assert result.kind is FileClassification.IMAGE
    assert result.file.mime_type == "image/jpeg"
    assert result.outcome.success is True
    assert result.outcome.message_id == 100
    assert sender.calls[0][1] is FileClassification.IMAGE


@pytest.mark.asyncio
async def test_octet_stream_video_is_classified_by_extension() -> None:
    sender = FakeMediaSender()
    use_case = RelaySingleUseCase(sender, MAX_SIZE)
    file = DecodedFile(filename="clip.MP4", mime_type="application/octet-stream", payload=b"v")

    result = await use_case.execute(file)

    assert result.kind is FileClassification.VIDEO
    assert result.file.mime_type == "video/mp4"


@pytest.mark.asyncio
async def test_missing_file_raises() -> None:
    sender = FakeMediaSender()

    with pytest.raises(NoFileUploadedError, match="No file uploaded"):
        await RelaySingleUseCase(sender, MAX_SIZE).execute(None)

    assert sender.calls == []


@pytest.mark.asyncio
async def test_unsupported_type_raises_before_sending() -> None:
    sender = FakeMediaSender()
    file = DecodedFile(filename="test.txt", mime_type="text/plain", payload=b"hello")

    with pytest.raises(UnsupportedFileTypeError) as exc_info:
        await RelaySingleUseCase(sender, MAX_SIZE).execute(file)

    assert exc_info.value.message.startswith("Unsupported file type: text/plain")
    assert "image/jpeg" in exc_info.value.message
    assert sender.calls == []


@pytest.mark.asyncio
async def test_oversized_file_raises() -> None:
    sender = FakeMediaSender()
    file = DecodedFile(filename="big.png", mime_type="image/png", payload=b"x" * (MAX_SIZE + 1))

    with pytest.raises(FileTooLargeError):
        await RelaySingleUseCase(sender, MAX_SIZE).execute(file)

    assert sender.calls == []


@pytest.mark.asyncio
async def test_upstream_failure_is_returned_not_raised() -> None:
    failure = SendOutcome.failed("Bad Request: chat not found", error_code="UPSTREAM_ERROR")
    sender = FakeMediaSender(outcomes={"test.jpg": failure})
    file = DecodedFile(filename="test.jpg", mime_type="image/jpeg", payload=b"a")

    result = await RelaySingleUseCase(sender, MAX_SIZE).execute(file)

    assert result.outcome is failure
