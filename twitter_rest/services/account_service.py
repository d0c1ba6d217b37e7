"""
Account settings and profile endpoints.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any

from twitter_rest.models import AccountSettings, User
from twitter_rest.params import as_parameters
from twitter_rest.services.base import ApiClient


def _encode_image(image: bytes) -> str:
    return base64.b64encode(image).decode("ascii")


@dataclass(slots=True)
class AccountService:
    client: ApiClient

    def settings(self) -> AccountSettings:
        return self.client.call("GET", "account/settings", None, AccountSettings)

    def verify_credentials(self, options: Any = None) -> User:
        """Return the authenticating user; fails with 401 when the credentials are bad."""

        return self.client.call("GET", "account/verify_credentials", as_parameters(options), User)

    def update_settings(self, options: Any = None) -> AccountSettings:
        return self.client.call("POST", "account/settings", as_parameters(options), AccountSettings)

    def enable_sms(self, enable: bool) -> None:
        params = as_parameters({"device": "sms" if enable else "none"})
        self.client.call("POST", "account/update_delivery_device", params)

    def update_profile(self, options: Any = None) -> User:
        return self.client.call("POST", "account/update_profile", as_parameters(options), User)

    def update_profile_background_image(self, image: bytes | None, options: Any = None) -> User:
        """Upload a background image, or stop using one when ``image`` is empty."""

        params = as_parameters(options)
        if image:
            params.set("image", _encode_image(image)).set("use", True)
        else:
            params.set("use", False)
        return self.client.call("POST", "account/update_profile_background_image", params, User)

    def update_profile_colors(self, options: Any = None) -> User:
        return self.client.call("POST", "account/update_profile_colors", as_parameters(options), User)

    def update_profile_image(self, image: bytes, options: Any = None) -> User:
        params = as_parameters(options).set("image", _encode_image(image))
        return self.client.call("POST", "account/update_profile_image", params, User)
