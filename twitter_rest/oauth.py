"""
OAuth 1.0a HMAC-SHA1 request signing.

Every signed request gets a fresh timestamp and nonce, so a header is never
reused. The base string is built as::

    METHOD & enc(url without query) & enc(sorted "k=v" pairs joined by "&")

and signed with ``enc(consumer_secret) & enc(token_secret)``.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from twitter_rest.exceptions import ConfigurationError
from twitter_rest.params import percent_encode

REQUEST_TOKEN_URL = "https://api.twitter.com/oauth/request_token"
AUTHORIZE_URL = "https://api.twitter.com/oauth/authorize"
ACCESS_TOKEN_URL = "https://api.twitter.com/oauth/access_token"

OUT_OF_BAND = "oob"


@dataclass(frozen=True, slots=True)
class OAuthConfig:
    """Application identity used to sign requests."""

    consumer_key: str
    consumer_secret: str
    callback_url: str | None = None

    @property
    def callback(self) -> str:
        return self.callback_url or OUT_OF_BAND


@dataclass(frozen=True, slots=True)
class Token:
    """Access token issued once the user has authorized the application."""

    token: str
    secret: str


@dataclass(frozen=True, slots=True)
class TemporaryToken:
    """Short-lived request token used to complete the three-legged flow."""

    token: str
    secret: str
    callback_confirmed: bool = True

    @property
    def authorization_url(self) -> str:
        return f"{AUTHORIZE_URL}?{urlencode({'oauth_token': self.token})}"


def _default_nonce() -> str:
    return secrets.token_hex(16)


def _default_clock() -> int:
    return int(time.time())


def strip_query(url: str) -> str:
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def normalize_parameters(params: Iterable[tuple[str, str]]) -> str:
    """Encode each pair, sort the encoded ``k=v`` strings and join them with ``&``."""

    pairs = [f"{percent_encode(key)}={percent_encode(value)}" for key, value in params]
    return "&".join(sorted(pairs))


def signature_base_string(method: str, url: str, params: Iterable[tuple[str, str]]) -> str:
    return "&".join(
        (
            method.upper(),
            percent_encode(strip_query(url)),
            percent_encode(normalize_parameters(params)),
        )
    )


def sign_base_string(base_string: str, consumer_secret: str, token_secret: str = "") -> str:
    key = f"{percent_encode(consumer_secret)}&{percent_encode(token_secret)}"
    digest = hmac.new(key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


class Signer:
    """Produces ``Authorization: OAuth ...`` headers for outgoing requests.

    The held :class:`Token` is read once per signature and replaced atomically
    by :meth:`set_token`, so concurrent requests never see a half-updated
    token/secret pair.
    """

    def __init__(
        self,
        config: OAuthConfig,
        token: Token | None = None,
        *,
        nonce_factory: Callable[[], str] = _default_nonce,
        clock: Callable[[], int] = _default_clock,
    ) -> None:
        if not config.consumer_key or not config.consumer_secret:
            raise ConfigurationError("Consumer key and secret are required")
        self.config = config
        self._token = token
        self._lock = threading.Lock()
        self._nonce_factory = nonce_factory
        self._clock = clock

    @property
    def token(self) -> Token | None:
        with self._lock:
            return self._token

    def set_token(self, token: Token | None) -> None:
        with self._lock:
            self._token = token

    def protocol_parameters(self, token: Token | None) -> dict[str, str]:
        params = {
            "oauth_signature_method": "HMAC-SHA1",
            "oauth_timestamp": str(self._clock()),
            "oauth_nonce": self._nonce_factory(),
            "oauth_version": "1.0",
            "oauth_consumer_key": self.config.consumer_key,
        }
        if token is not None and token.token:
            params["oauth_token"] = token.token
        return params

    def authorization_header(
        self,
        method: str,
        url: str,
        params: Iterable[tuple[str, str]] = (),
        *,
        extra_oauth: Mapping[str, str] | None = None,
        token: Token | None = None,
        use_held_token: bool = True,
    ) -> str:
        """
        Sign a request and return the value of its ``Authorization`` header.

        Args:
            method: HTTP method, GET or POST
            url: Absolute URL; its query string is folded into the parameters
            params: Request parameters (query or form body), already decoded
            extra_oauth: Additional protocol parameters such as ``oauth_callback``
            token: Token to sign with instead of the held one
            use_held_token: Set False to sign with no token at all
        """
        if token is None and use_held_token:
            token = self.token

        merged: dict[str, list[str]] = {}
        for key, value in _query_pairs(url):
            merged.setdefault(key, []).append(value)
        for key, value in params:
            merged.setdefault(key, []).append(value)
        oauth_params = self.protocol_parameters(token)
        oauth_params.update(extra_oauth or {})
        for key, value in oauth_params.items():
            merged[key] = [value]

        pairs = [(key, value) for key, values in merged.items() for value in values]
        base_string = signature_base_string(method, url, pairs)
        signature = sign_base_string(
            base_string,
            self.config.consumer_secret,
            token.secret if token is not None else "",
        )

        header_pairs = [
            f'{percent_encode(key)}="{percent_encode(values[0])}"'
            for key, values in merged.items()
            if key.startswith("oauth_")
        ]
        return (
            "OAuth "
            + ", ".join(header_pairs)
            + f', oauth_signature="{percent_encode(signature)}"'
        )


def _query_pairs(url: str) -> list[tuple[str, str]]:
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)
