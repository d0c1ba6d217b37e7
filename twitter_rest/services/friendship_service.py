"""
Social graph endpoints: ids of friends and followers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from twitter_rest.models import Cursor
from twitter_rest.params import as_parameters
from twitter_rest.services.base import ApiClient


@dataclass(slots=True)
class _IdsService:
    client: ApiClient
    resource = ""

    def ids(
        self,
        screen_name: str | None = None,
        user_id: int | None = None,
        cursor: int = 0,
        options: Any = None,
    ) -> Cursor:
        """
        One page of user ids.

        The screen name wins over ``user_id`` when both are given. Pass the
        previous page's ``next_cursor`` to continue; 0 starts from the top.
        """
        params = as_parameters(options)
        if screen_name:
            params.set("screen_name", screen_name)
        else:
            params.set("user_id", user_id)
        if cursor:
            params.set("cursor", cursor)
        return self.client.call("GET", f"{self.resource}/ids", params, Cursor)


@dataclass(slots=True)
class FriendsService(_IdsService):
    resource = "friends"


@dataclass(slots=True)
class FollowersService(_IdsService):
    resource = "followers"
