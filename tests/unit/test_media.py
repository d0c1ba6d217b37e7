from __future__ import annotations

from pathlib import Path

import pytest

from twitter_rest.exceptions import MediaValidationError
from twitter_rest.media import IMAGE_MAX_BYTES, TweetMedia


def test_from_path_loads_image(tmp_path: Path) -> None:
    image = tmp_path / "cat.png"
    image.write_bytes(b"\x89PNG\r\n")

    media = TweetMedia.from_path(image)

    assert media.filename == "cat.png"
    assert media.mime_type == "image/png"
    assert media.as_file_part() == ("cat.png", b"\x89PNG\r\n", "image/png")


def test_from_path_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(MediaValidationError):
        TweetMedia.from_path(tmp_path / "missing.png")


def test_from_path_rejects_large_image(tmp_path: Path) -> None:
    image = tmp_path / "huge.jpg"
    image.write_bytes(b"0" * (IMAGE_MAX_BYTES + 1))

    with pytest.raises(MediaValidationError, match="size limit"):
        TweetMedia.from_path(image)


def test_from_path_rejects_unsupported_type(tmp_path: Path) -> None:
    document = tmp_path / "notes.txt"
    document.write_text("hello", encoding="utf-8")

    with pytest.raises(MediaValidationError, match="Unsupported"):
        TweetMedia.from_path(document)
