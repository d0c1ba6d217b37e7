"""
Three-legged OAuth 1.0a handshake.

    1. request_temporary_token()           -> TemporaryToken
    2. authorization_url(temporary_token)  -> URL the user visits
    3. exchange_access_token(temporary_token, verifier) -> Token

The last step installs the new token on the shared :class:`Signer`, so every
client built on that signer is authorized from then on.
"""

from __future__ import annotations

import logging
from typing import Callable
from urllib.parse import parse_qs

import requests

from twitter_rest.config import DEFAULT_TIMEOUT, ConfigManager, TwitterCredentials
from twitter_rest.exceptions import ConfigurationError, OAuthError, TransportError
from twitter_rest.oauth import (
    ACCESS_TOKEN_URL,
    REQUEST_TOKEN_URL,
    OAuthConfig,
    Signer,
    TemporaryToken,
    Token,
)

logger = logging.getLogger(__name__)

CallbackHandler = Callable[[str], str]


class OAuthManager:
    """Runs the token handshake and keeps the signer's token current."""

    def __init__(
        self,
        signer: Signer,
        *,
        session: requests.Session | None = None,
        config_manager: ConfigManager | None = None,
        callback_handler: CallbackHandler | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        self.signer = signer
        self._session = session or requests.Session()
        self._config_manager = config_manager
        self._callback_handler = callback_handler
        self._timeout = timeout

    @classmethod
    def from_credentials(
        cls,
        credentials: TwitterCredentials,
        *,
        callback_url: str | None = None,
        **kwargs,
    ) -> "OAuthManager":
        if not credentials.has_consumer():
            raise ConfigurationError("API key and secret are required")
        token = None
        if credentials.has_access_token():
            token = Token(credentials.access_token or "", credentials.access_token_secret or "")
        config = OAuthConfig(credentials.api_key or "", credentials.api_secret or "", callback_url)
        return cls(Signer(config, token), **kwargs)

    def request_temporary_token(self) -> TemporaryToken:
        """
        Obtain a request token.

        Raises:
            OAuthError: If the callback is not confirmed or the reply is unusable
            TransportError: If the request could not be sent
        """
        data = self._post(
            REQUEST_TOKEN_URL,
            extra_oauth={"oauth_callback": self.signer.config.callback},
            token=None,
        )
        confirmed = _first(data, "oauth_callback_confirmed").lower() == "true"
        if not confirmed:
            raise OAuthError("Rejected callback: oauth_callback_confirmed is not true.")

        token, secret = _first(data, "oauth_token"), _first(data, "oauth_token_secret")
        if not token or not secret:
            raise OAuthError("Request token reply did not contain oauth_token and oauth_token_secret.")
        return TemporaryToken(token=token, secret=secret, callback_confirmed=confirmed)

    def authorization_url(self, temporary_token: TemporaryToken) -> str:
        return temporary_token.authorization_url

    def exchange_access_token(self, temporary_token: TemporaryToken, verifier: str) -> Token:
        """
        Trade an authorized request token and its verifier for an access token.

        The signer's token is replaced only after the exchange succeeded.
        """
        if not verifier:
            raise OAuthError("An oauth_verifier is required to obtain an access token.")

        data = self._post(
            ACCESS_TOKEN_URL,
            extra_oauth={"oauth_verifier": verifier},
            token=Token(temporary_token.token, temporary_token.secret),
        )
        token, secret = _first(data, "oauth_token"), _first(data, "oauth_token_secret")
        if not token or not secret:
            raise OAuthError("Access token reply did not contain oauth_token and oauth_token_secret.")

        access_token = Token(token=token, secret=secret)
        self.signer.set_token(access_token)
        logger.info("OAuth handshake completed")
        return access_token

    def ensure_access_token(self) -> Token:
        """Return the held or stored token, or run the full flow and persist its result."""

        token = self.signer.token
        if token is not None:
            return token

        stored = self._stored_token()
        if stored is not None:
            self.signer.set_token(stored)
            return stored
        return self.start_oauth_flow()

    def _stored_token(self) -> Token | None:
        if self._config_manager is None:
            return None
        try:
            credentials = self._config_manager.load_credentials()
        except ConfigurationError:
            return None
        if not credentials.has_access_token():
            return None
        return Token(credentials.access_token or "", credentials.access_token_secret or "")

    def start_oauth_flow(self) -> Token:
        if self._callback_handler is None:
            raise ConfigurationError(
                "A callback handler is required to obtain the OAuth verifier interactively."
            )

        temporary_token = self.request_temporary_token()
        verifier = self._callback_handler(self.authorization_url(temporary_token))
        token = self.exchange_access_token(temporary_token, verifier.strip())

        if self._config_manager is not None:
            self._config_manager.save_credentials(
                TwitterCredentials(access_token=token.token, access_token_secret=token.secret)
            )
        return token

    def _post(
        self,
        url: str,
        *,
        extra_oauth: dict[str, str],
        token: Token | None,
    ) -> dict[str, list[str]]:
        header = self.signer.authorization_header(
            "POST",
            url,
            extra_oauth=extra_oauth,
            token=token,
            use_held_token=False,
        )
        try:
            response = self._session.post(
                url,
                headers={"Authorization": header},
                auth=_presigned,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"OAuth request to {url} failed: {exc}") from exc

        if not 200 <= response.status_code <= 299:
            raise OAuthError(
                f"OAuth request to {url} returned {response.status_code}: {response.text}"
            )

        try:
            return parse_qs(response.text, keep_blank_values=True, strict_parsing=True)
        except ValueError as exc:
            raise OAuthError(f"Unparseable OAuth reply from {url}: {response.text!r}") from exc


def _presigned(request: requests.PreparedRequest) -> requests.PreparedRequest:
    """Request-level auth that keeps the handshake header over any session auth hook."""

    return request


def _first(data: dict[str, list[str]], name: str) -> str:
    values = data.get(name)
    return values[0] if values else ""
