"""
Typed optional parameters for endpoint wrappers.

Unset fields (``None``) are never sent. ``extra`` carries any parameter the
typed fields do not cover, e.g. ``TimelineOptions(extra={"tweet_mode": "extended"})``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from twitter_rest.params import ParameterSet


class _Options:
    __slots__ = ()

    def to_params(self) -> ParameterSet:
        params = ParameterSet()
        for item in fields(self):
            if item.name == "extra":
                continue
            params.add(item.name, getattr(self, item.name))
        params.update(getattr(self, "extra", None) or {})
        return params


@dataclass(slots=True)
class TimelineOptions(_Options):
    count: int | None = None
    since_id: int | None = None
    max_id: int | None = None
    trim_user: bool | None = None
    exclude_replies: bool | None = None
    contributor_details: bool | None = None
    include_entities: bool | None = None
    include_rts: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class TweetOptions(_Options):
    """Options for ``statuses/update`` and ``statuses/update_with_media``."""

    in_reply_to_status_id: int | None = None
    possibly_sensitive: bool | None = None
    lat: float | None = None
    long: float | None = None
    place_id: str | None = None
    display_coordinates: bool | None = None
    trim_user: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SearchOptions(_Options):
    geocode: str | None = None
    lang: str | None = None
    locale: str | None = None
    result_type: str | None = None
    count: int | None = None
    until: str | None = None
    since_id: int | None = None
    max_id: int | None = None
    include_entities: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class UserOptions(_Options):
    """Options shared by user lookups and ``account/verify_credentials``."""

    include_entities: bool | None = None
    skip_status: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ProfileOptions(_Options):
    name: str | None = None
    url: str | None = None
    location: str | None = None
    description: str | None = None
    include_entities: bool | None = None
    skip_status: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ProfileColorOptions(_Options):
    profile_background_color: str | None = None
    profile_link_color: str | None = None
    profile_sidebar_border_color: str | None = None
    profile_sidebar_fill_color: str | None = None
    profile_text_color: str | None = None
    include_entities: bool | None = None
    skip_status: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class AccountSettingsOptions(_Options):
    trend_location_woeid: int | None = None
    sleep_time_enabled: bool | None = None
    start_sleep_time: int | None = None
    end_sleep_time: int | None = None
    time_zone: str | None = None
    lang: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class MessageOptions(_Options):
    since_id: int | None = None
    max_id: int | None = None
    count: int | None = None
    page: int | None = None
    include_entities: bool | None = None
    skip_status: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)
