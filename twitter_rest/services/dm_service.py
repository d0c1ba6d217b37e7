"""
Direct message endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from twitter_rest.exceptions import InvalidArgumentError
from twitter_rest.models import Message, MessageList
from twitter_rest.params import as_parameters
from twitter_rest.services.base import ApiClient


@dataclass(slots=True)
class DirectMessageService:
    client: ApiClient

    def list(self, options: Any = None) -> list[Message]:
        """Messages received by the authenticated user, newest first."""

        return self.client.call("GET", "direct_messages", as_parameters(options), MessageList)

    def sent(self, options: Any = None) -> list[Message]:
        return self.client.call("GET", "direct_messages/sent", as_parameters(options), MessageList)

    def get(self, message_id: int, options: Any = None) -> Message:
        params = as_parameters(options).set("id", message_id)
        return self.client.call("GET", "direct_messages/show", params, Message)

    def destroy(self, message_id: int, options: Any = None) -> Message:
        params = as_parameters(options).set("id", message_id)
        return self.client.call("POST", "direct_messages/destroy", params, Message)

    def send(self, screen_name: str, text: str, options: Any = None) -> Message:
        if not screen_name:
            raise InvalidArgumentError("A recipient screen name is required.")
        params = as_parameters(options).set("screen_name", screen_name).set("text", text)
        return self.client.call("POST", "direct_messages/new", params, Message)
