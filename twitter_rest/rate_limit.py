"""
Rate limit metadata reported alongside API errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping

LIMIT_HEADER = "x-rate-limit-limit"
REMAINING_HEADER = "x-rate-limit-remaining"
RESET_HEADER = "x-rate-limit-reset"


@dataclass(slots=True)
class RateLimitStatus:
    """Represents parsed rate limit metadata from Twitter headers."""

    limit: int | None
    remaining: int | None
    reset_at: int | None

    @property
    def reset_datetime(self) -> datetime | None:
        if self.reset_at is None:
            return None
        return datetime.fromtimestamp(self.reset_at, tz=timezone.utc)

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitStatus | None":
        """Parse the ``x-rate-limit-*`` headers; None when none are present."""

        lowered = {key.lower(): value for key, value in headers.items()}
        values = [
            _to_int(lowered.get(name))
            for name in (LIMIT_HEADER, REMAINING_HEADER, RESET_HEADER)
        ]
        if all(value is None for value in values):
            return None
        return cls(limit=values[0], remaining=values[1], reset_at=values[2])


def _to_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
