"""
User lookup endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from twitter_rest.exceptions import InvalidArgumentError
from twitter_rest.models import User, UserList
from twitter_rest.params import as_parameters
from twitter_rest.services.base import ApiClient

LOOKUP_LIMIT = 100


@dataclass(slots=True)
class UserService:
    client: ApiClient

    def search(self, query: str, options: Any = None) -> list[User]:
        params = as_parameters(options).set("q", query)
        return self.client.call("GET", "users/search", params, UserList)

    def show(self, screen_name: str | None = None, options: Any = None) -> User:
        """Fetch a single user; ``options`` may carry ``user_id`` instead of a screen name."""

        params = as_parameters(options)
        if screen_name:
            params.set("screen_name", screen_name)
        return self.client.call("GET", "users/show", params, User)

    def lookup(
        self,
        screen_names: Sequence[str] | None = None,
        user_ids: Sequence[int] | None = None,
        options: Any = None,
    ) -> list[User]:
        """
        Fetch up to 100 users in one request.

        Screen names take precedence over ids when both are given.

        Raises:
            InvalidArgumentError: If neither list is given or the usable one
                holds more than 100 entries
        """
        params = as_parameters(options)
        if screen_names is not None and len(screen_names) <= LOOKUP_LIMIT:
            params.set("screen_name", list(screen_names))
        elif user_ids is not None and len(user_ids) <= LOOKUP_LIMIT:
            params.set("user_id", list(user_ids))
        else:
            raise InvalidArgumentError(
                f"users/lookup needs screen names or user ids, at most {LOOKUP_LIMIT} of them."
            )
        return self.client.call("POST", "users/lookup", params, UserList)
