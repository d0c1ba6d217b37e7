"""
Pydantic models for Twitter REST API v1.1 responses.

Every field is optional: depending on the endpoint a payload may carry only a
subset of an object, and mismatching fields are dropped by the decoder.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from twitter_rest.decoding import decode_payload


class ApiModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @classmethod
    def from_api(cls, payload: Any):
        """Leniently build the model from an already parsed JSON payload."""

        return decode_payload(payload, cls).value


# ============================================================================
# Entities
# ============================================================================


class UrlEntity(ApiModel):
    url: str | None = None
    display_url: str | None = None
    expanded_url: str | None = None
    indices: list[int] = Field(default_factory=list)


class HashtagEntity(ApiModel):
    text: str | None = None
    indices: list[int] = Field(default_factory=list)


class UserMention(ApiModel):
    id: int | None = None
    id_str: str | None = None
    screen_name: str | None = None
    name: str | None = None
    indices: list[int] = Field(default_factory=list)


class MediaEntity(ApiModel):
    id: int | None = None
    id_str: str | None = None
    type: str | None = None
    url: str | None = None
    display_url: str | None = None
    expanded_url: str | None = None
    media_url: str | None = None
    media_url_https: str | None = None
    indices: list[int] = Field(default_factory=list)


class Entities(ApiModel):
    urls: list[UrlEntity] = Field(default_factory=list)
    hashtags: list[HashtagEntity] = Field(default_factory=list)
    user_mentions: list[UserMention] = Field(default_factory=list)
    media: list[MediaEntity] = Field(default_factory=list)


# ============================================================================
# Tweets and users
# ============================================================================


class User(ApiModel):
    """A Twitter user. Some endpoints only populate the id fields."""

    id: int | None = None
    id_str: str | None = None
    screen_name: str | None = None
    name: str | None = None
    description: str | None = None
    location: str | None = None
    url: str | None = None
    lang: str | None = None
    created_at: str | None = None
    time_zone: str | None = None
    utc_offset: int | None = None
    protected: bool = False
    verified: bool = False
    geo_enabled: bool = False
    following: bool = False
    notifications: bool = False
    follow_request_sent: bool = False
    contributors_enabled: bool = False
    is_translator: bool = False
    show_all_inline_media: bool = False
    followers_count: int | None = None
    friends_count: int | None = None
    listed_count: int | None = None
    favourites_count: int | None = None
    statuses_count: int | None = None
    profile_image_url: str | None = None
    profile_image_url_https: str | None = None
    profile_background_image_url: str | None = None
    profile_background_color: str | None = None
    profile_background_tile: bool = False
    profile_use_background_image: bool = False
    profile_link_color: str | None = None
    profile_text_color: str | None = None
    profile_sidebar_fill_color: str | None = None
    profile_sidebar_border_color: str | None = None
    status: Tweet | None = None


class Tweet(ApiModel):
    """A single tweet. How much of it is populated depends on the endpoint."""

    id: int | None = None
    id_str: str | None = None
    text: str | None = None
    created_at: str | None = None
    source: str | None = None
    truncated: bool = False
    user: User | None = None
    entities: Entities | None = None
    in_reply_to_screen_name: str | None = None
    in_reply_to_status_id: int | None = None
    in_reply_to_status_id_str: str | None = None
    in_reply_to_user_id: int | None = None
    in_reply_to_user_id_str: str | None = None
    retweet_count: int | None = None
    favorite_count: int | None = None
    retweeted: bool = False
    favorited: bool = False
    possibly_sensitive: bool = False
    retweeted_status: Tweet | None = None
    geo: dict[str, Any] | None = None
    coordinates: dict[str, Any] | None = None
    place: dict[str, Any] | None = None
    contributors: list[Any] | None = None


User.model_rebuild()
Tweet.model_rebuild()


TweetList = list[Tweet]
UserList = list[User]


class TweetSearchMetadata(ApiModel):
    max_id: int | None = None
    max_id_str: str | None = None
    since_id: int | None = None
    since_id_str: str | None = None
    refresh_url: str | None = None
    next_results: str | None = None
    count: int | None = None
    completed_in: float | None = None
    query: str | None = None


class TweetSearchResults(ApiModel):
    statuses: list[Tweet] = Field(default_factory=list)
    search_metadata: TweetSearchMetadata | None = None


# ============================================================================
# Direct messages
# ============================================================================


class Message(ApiModel):
    id: int | None = None
    id_str: str | None = None
    created_at: str | None = None
    text: str | None = None
    sender: User | None = None
    sender_id: int | None = None
    sender_screen_name: str | None = None
    recipient: User | None = None
    recipient_id: int | None = None
    recipient_screen_name: str | None = None


MessageList = list[Message]


# ============================================================================
# Lists and social graph
# ============================================================================


class TwitterList(ApiModel):
    id: int | None = None
    id_str: str | None = None
    name: str | None = None
    slug: str | None = None
    full_name: str | None = None
    description: str | None = None
    mode: str | None = None
    uri: str | None = None
    created_at: str | None = None
    subscriber_count: int | None = None
    member_count: int | None = None
    following: bool = False
    user: User | None = None


ListList = list[TwitterList]


class Cursor(ApiModel):
    """A cursored page of user ids."""

    ids: list[int] = Field(default_factory=list)
    next_cursor: int | None = None
    next_cursor_str: str | None = None
    previous_cursor: int | None = None
    previous_cursor_str: str | None = None


# ============================================================================
# Account and help
# ============================================================================


class SleepTime(ApiModel):
    enabled: bool = False
    start_time: int | None = None
    end_time: int | None = None


class TimeZone(ApiModel):
    name: str | None = None
    tzinfo_name: str | None = None
    utc_offset: int | None = None


class PlaceType(ApiModel):
    code: int | None = None
    name: str | None = None


class TrendLocation(ApiModel):
    name: str | None = None
    country: str | None = None
    country_code: str | None = Field(default=None, alias="countryCode")
    parent_id: int | None = Field(default=None, alias="parentid")
    place_type: PlaceType | None = Field(default=None, alias="placeType")
    url: str | None = None
    woeid: int | None = None


class AccountSettings(ApiModel):
    always_use_https: bool = False
    discoverable_by_email: bool = False
    geo_enabled: bool = False
    language: str | None = None
    protected: bool = False
    screen_name: str | None = None
    show_all_inline_media: bool = False
    use_cookie_personalization: bool = False
    sleep_time: SleepTime | None = None
    time_zone: TimeZone | None = None
    trend_location: list[TrendLocation] = Field(default_factory=list)


class PhotoSize(ApiModel):
    w: int | None = None
    h: int | None = None
    resize: str | None = None


class Configuration(ApiModel):
    characters_reserved_per_media: int | None = None
    max_media_per_upload: int | None = None
    non_username_paths: list[str] = Field(default_factory=list)
    photo_size_limit: int | None = None
    photo_sizes: dict[str, PhotoSize] = Field(default_factory=dict)
    short_url_length: int | None = None
    short_url_length_https: int | None = None


class LimitEntry(ApiModel):
    limit: int | None = None
    remaining: int | None = None
    reset: int | None = None


class RateLimitContext(ApiModel):
    access_token: str | None = None


class Limits(ApiModel):
    """Rate limits per resource family, e.g. ``resources["statuses"]["/statuses/home_timeline"]``."""

    rate_limit_context: RateLimitContext | None = None
    resources: dict[str, dict[str, LimitEntry]] = Field(default_factory=dict)


# ============================================================================
# Error payloads
# ============================================================================


class ErrorReply(BaseModel):
    """Single error shape: ``{"error": "...", "request": "..."}``."""

    error: str
    request: str | None = None


class ErrorDetail(BaseModel):
    message: str
    code: int | None = None


class ErrorsReply(BaseModel):
    """Multi error shape: ``{"errors": "..."}`` or the v1.1 list of details."""

    errors: str | list[ErrorDetail]

    @property
    def message(self) -> str:
        if isinstance(self.errors, str):
            return self.errors
        return "; ".join(detail.message for detail in self.errors)

    @property
    def code(self) -> int | None:
        if isinstance(self.errors, str) or not self.errors:
            return None
        return self.errors[0].code

