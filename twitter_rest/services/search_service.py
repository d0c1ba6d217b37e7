"""
Search endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from twitter_rest.models import TweetSearchResults
from twitter_rest.params import as_parameters
from twitter_rest.services.base import ApiClient


@dataclass(slots=True)
class SearchService:
    client: ApiClient

    def tweets(self, query: str, options: Any = None) -> TweetSearchResults:
        params = as_parameters(options).set("q", query)
        return self.client.call("GET", "search/tweets", params, TweetSearchResults)
