"""Testes do RelayBatchUseCase."""

from __future__ import annotations

import pytest

from app.domain import DecodedFile, FileClassification, SendOutcome
from app.use_cases.media import RelayBatchUseCase
from tests.fakes.fake_media_sender import FakeMediaSender
from utils.errors import NoFileUploadedError

MAX_SIZE = 1024


def _image(name: str = "a.jpg") -> DecodedFile:
    return DecodedFile(filename=name, mime_type="image/jpeg", payload=b"i" * 8)


def _video(name: str = "c.mp4") -> DecodedFile:
    return DecodedFile(filename=name, mime_type="video/mp4", payload=b"v" * 16)


def _text(name: str = "b.txt") -> DecodedFile:
    return DecodedFile(filename=name, mime_type="text/plain", payload=b"t")


class CrashingSender(FakeMediaSender):
    async def send(self, file: DecodedFile, kind: FileClassification) -> SendOutcome:
        if file.filename == "boom.jpg":
            raise RuntimeError("sender exploded")
        return await super().send(file, kind)


@pytest.mark.asyncio
async def test_mixed_batch_keeps_order_and_counts() -> None:
    sender = FakeMediaSender()
    use_case = RelayBatchUseCase(sender, MAX_SIZE)

    result = await use_case.execute([_image(), _text(), _video()])

    assert result.total == 3
    assert result.successful == 2
    assert result.failed == 1
    assert [entry.filename for entry in result.per_file] == ["a.jpg", "b.txt", "c.mp4"]
    assert [entry.outcome.success for entry in result.per_file] == [True, False, True]
    assert result.per_file[1].outcome.error_code == "UNSUPPORTED_FILE_TYPE"
    assert [kind for _, kind in sender.calls] == [
        FileClassification.IMAGE,
        FileClassification.VIDEO,
    ]


@pytest.mark.asyncio
async def test_upstream_failure_does_not_stop_batch() -> None:
    failure = SendOutcome.failed("Internal Server Error", retry_count=3, error_code="UPSTREAM_TRANSIENT")
    sender = FakeMediaSender(outcomes={"first.jpg": failure})

    result = await RelayBatchUseCase(sender, MAX_SIZE).execute(
        [_image("first.jpg"), _image("second.jpg")]
    )

    assert result.successful == 1
    assert result.failed == 1
    assert result.per_file[0].outcome.retry_count == 3
    assert result.per_file[1].outcome.message_id == 100


@pytest.mark.asyncio
async def test_oversized_file_fails_only_itself() -> None:
    big = DecodedFile(filename="big.jpg", mime_type="image/jpeg", payload=b"x" * (MAX_SIZE + 1))

    result = await RelayBatchUseCase(FakeMediaSender(), MAX_SIZE).execute([big, _video()])

    assert result.per_file[0].outcome.error_code == "FILE_TOO_LARGE"
    assert result.per_file[1].outcome.success is True


@pytest.mark.asyncio
async def test_sender_exception_becomes_generic_failed_entry() -> None:
    sender = CrashingSender()

    result = await RelayBatchUseCase(sender, MAX_SIZE).execute([_image("boom.jpg"), _image()])

    assert result.per_file[0].outcome.success is False
    assert result.per_file[0].outcome.error == "Internal server error"
    assert result.per_file[0].outcome.error_code == "INTERNAL_ERROR"
    assert result.per_file[1].outcome.success is True


@pytest.mark.asyncio
async def test_sender_exception_text_only_with_details_enabled() -> None:
    use_case = RelayBatchUseCase(CrashingSender(), MAX_SIZE, expose_error_details=True)

    result = await use_case.execute([_image("boom.jpg")])

    assert result.per_file[0].outcome.error == "sender exploded"

@pytest.mark.asyncio
async def test_empty_batch_raises() -> None:
    with pytest.raises(NoFileUploadedError, match="No files uploaded"):
        await RelayBatchUseCase(FakeMediaSender(), MAX_SIZE).execute([])
