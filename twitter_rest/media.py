"""
Image attachments for ``statuses/update_with_media``.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path

from twitter_rest.exceptions import MediaValidationError

IMAGE_MAX_BYTES = 5 * 1024 * 1024
ALLOWED_IMAGE_MIME_TYPES = {"image/jpeg", "image/png", "image/webp", "image/gif"}


@dataclass(frozen=True, slots=True)
class TweetMedia:
    """An in-memory image sent as the ``media[]`` part of a multipart body."""

    filename: str
    data: bytes
    mime_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, path: Path | str) -> "TweetMedia":
        """
        Load and validate an image file (up to 5MB).

        Raises:
            MediaValidationError: If the file is missing, too large or of an
                unsupported MIME type
        """
        resolved = cls._validate_path(Path(path))
        mime_type = cls._validate_image(resolved)
        return cls(filename=resolved.name, data=resolved.read_bytes(), mime_type=mime_type)

    def as_file_part(self) -> tuple[str, bytes, str]:
        return (self.filename, self.data, self.mime_type)

    @staticmethod
    def _validate_path(path: Path) -> Path:
        resolved = path.expanduser()
        if not resolved.exists() or not resolved.is_file():
            raise MediaValidationError(f"Media file '{path}' does not exist or is not a file.")
        return resolved

    @staticmethod
    def _validate_image(path: Path) -> str:
        size = path.stat().st_size
        if size > IMAGE_MAX_BYTES:
            raise MediaValidationError(
                f"Image '{path}' exceeds the {IMAGE_MAX_BYTES} byte size limit."
            )
        mime_type, _ = mimetypes.guess_type(path.name)
        if mime_type not in ALLOWED_IMAGE_MIME_TYPES:
            raise MediaValidationError(
                f"Unsupported image MIME type '{mime_type}' for '{path.name}'."
            )
        return mime_type
