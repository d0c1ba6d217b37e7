"""
List endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from twitter_rest.models import ListList, TwitterList
from twitter_rest.params import as_parameters
from twitter_rest.services.base import ApiClient


@dataclass(slots=True)
class ListService:
    client: ApiClient

    def get_all(self, screen_name: str, options: Any = None) -> list[TwitterList]:
        """Lists the user subscribes to, including their own."""

        params = as_parameters(options).set("screen_name", screen_name)
        return self.client.call("GET", "lists/list", params, ListList)
