"""Mock responses for Twitter REST API integration tests."""

from __future__ import annotations

API_BASE = "https://api.example.test/1.1"

UPDATE_RESPONSE = {
    "id": 1050118621198921728,
    "id_str": "1050118621198921728",
    "text": "hello",
    "created_at": "Wed Oct 10 20:19:24 +0000 2018",
    "truncated": False,
    "user": {
        "id": 6253282,
        "id_str": "6253282",
        "screen_name": "twitterapi",
        "name": "Twitter API",
        "followers_count": 6133636,
        "protected": False,
    },
    "entities": {"hashtags": [], "urls": [], "user_mentions": []},
}

HOME_TIMELINE_RESPONSE = [
    {
        "id": 1,
        "text": "first",
        "user": {"id": 10, "screen_name": "alice"},
        "retweet_count": 3,
    },
    {
        # Stale cache entries sometimes report counts as strings.
        "id": 2,
        "text": "second",
        "user": {"id": 11, "screen_name": "bob", "followers_count": "lots"},
        "retweet_count": "many",
    },
]

REQUEST_TOKEN_BODY = "oauth_token=temp-token&oauth_token_secret=temp-secret&oauth_callback_confirmed=true"
ACCESS_TOKEN_BODY = "oauth_token=user-token&oauth_token_secret=user-secret&user_id=6253282&screen_name=twitterapi"

INVALID_TOKEN_RESPONSE = {"error": "Invalid or expired token", "request": "/1.1/statuses/update.json"}

RATE_LIMIT_HEADERS = {
    "x-rate-limit-limit": "15",
    "x-rate-limit-remaining": "0",
    "x-rate-limit-reset": "1700000900",
}
