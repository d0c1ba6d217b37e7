"""
Tweet related endpoints: timelines, posting, retweets and search.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from twitter_rest.exceptions import InvalidArgumentError
from twitter_rest.media import TweetMedia
from twitter_rest.models import Tweet, TweetList, TweetSearchResults
from twitter_rest.params import as_parameters
from twitter_rest.services.base import ApiClient

logger = logging.getLogger(__name__)

MEDIA_FIELD = "media[]"


@dataclass(slots=True)
class TweetService:
    """High level wrappers for the ``statuses/*`` family."""

    client: ApiClient

    def mentions(self, options: Any = None) -> list[Tweet]:
        return self.client.call("GET", "statuses/mentions_timeline", as_parameters(options), TweetList)

    def user_timeline(self, screen_name: str, options: Any = None) -> list[Tweet]:
        params = as_parameters(options).add("screen_name", screen_name)
        return self.client.call("GET", "statuses/user_timeline", params, TweetList)

    def home_timeline(self, options: Any = None) -> list[Tweet]:
        return self.client.call("GET", "statuses/home_timeline", as_parameters(options), TweetList)

    def retweets_of_me(self, options: Any = None) -> list[Tweet]:
        return self.client.call("GET", "statuses/retweets_of_me", as_parameters(options), TweetList)

    def update(self, status: str, options: Any = None) -> Tweet:
        """
        Post a new tweet.

        Args:
            status: Tweet text
            options: TweetOptions, a mapping or a ParameterSet

        Returns:
            The created tweet as echoed by the API
        """
        if not status:
            raise InvalidArgumentError("Tweet text must not be empty.")
        params = as_parameters(options).set("status", status)
        tweet = self.client.call("POST", "statuses/update", params, Tweet)
        logger.info("Posted tweet %s", getattr(tweet, "id", None))
        return tweet

    def update_with_media(self, status: str, media: TweetMedia, options: Any = None) -> Tweet:
        """Post a tweet with one image attached as a multipart ``media[]`` part."""

        params = as_parameters(options).set("status", status)
        tweet = self.client.call_multipart(
            "statuses/update_with_media",
            params,
            {MEDIA_FIELD: media.as_file_part()},
            Tweet,
        )
        logger.info("Posted tweet %s with media %s", getattr(tweet, "id", None), media.filename)
        return tweet

    def retweets(self, tweet_id: int, options: Any = None) -> list[Tweet]:
        return self.client.call("GET", f"statuses/retweets/{tweet_id}", as_parameters(options), TweetList)

    def get(self, tweet_id: int, options: Any = None) -> Tweet:
        params = as_parameters(options).set("id", tweet_id)
        return self.client.call("GET", "statuses/show", params, Tweet)

    def destroy(self, tweet_id: int, options: Any = None) -> Tweet:
        params = as_parameters(options).set("id", tweet_id)
        return self.client.call("POST", f"statuses/destroy/{tweet_id}", params, Tweet)

    def retweet(self, tweet_id: int, options: Any = None) -> Tweet:
        params = as_parameters(options).set("id", tweet_id)
        return self.client.call("POST", f"statuses/retweet/{tweet_id}", params, Tweet)

    def search(self, query: str, options: Any = None) -> TweetSearchResults:
        params = as_parameters(options).set("q", query)
        return self.client.call("GET", "search/tweets", params, TweetSearchResults)
