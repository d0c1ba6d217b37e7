"""
requests auth hooks that authorize every outgoing API request.
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qsl, urlsplit

import requests
from requests.auth import AuthBase

from twitter_rest.exceptions import ConfigurationError
from twitter_rest.oauth import Signer, strip_query

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _form_parameters(request: requests.PreparedRequest) -> list[tuple[str, str]]:
    content_type = request.headers.get("Content-Type", "")
    if not content_type.startswith(FORM_CONTENT_TYPE) or not request.body:
        return []
    body = request.body
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    return parse_qsl(body, keep_blank_values=True)


class OAuth1Auth(AuthBase):
    """Signs each request with the user-context OAuth 1.0a header."""

    def __init__(self, signer: Signer) -> None:
        self.signer = signer

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        token = self.signer.token
        if token is None:
            raise ConfigurationError("No OAuth token supplied; complete the OAuth handshake first.")

        url = request.url or ""
        header = self.signer.authorization_header(
            request.method or "GET",
            url,
            _form_parameters(request),
            token=token,
        )
        if request.method == "POST":
            # Query parameters of a POST are carried by the signature only.
            request.url = strip_query(url)
        request.headers["Authorization"] = header
        logger.debug("Signed %s %s", request.method, urlsplit(url).path)
        return request


class BearerAuth(AuthBase):
    """Attaches a static application-only bearer token."""

    def __init__(self, bearer_token: str) -> None:
        if not bearer_token:
            raise ConfigurationError("The bearer token must be a non-empty string.")
        self.bearer_token = bearer_token

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        request.headers["Authorization"] = f"Bearer {self.bearer_token}"
        return request


def authorized_session(
    *,
    signer: Signer | None = None,
    bearer_token: str | None = None,
    session: requests.Session | None = None,
) -> requests.Session:
    """
    Install exactly one authorization mode on a requests session.

    Args:
        signer: Signer holding consumer credentials (user context); it must hold
            a token by the time the first request is sent
        bearer_token: Static token for application-only calls
        session: Session to configure; a new one is created when omitted

    Raises:
        ConfigurationError: If neither or both modes are supplied
    """
    if signer is not None and bearer_token:
        raise ConfigurationError("User-context signing and a bearer token are mutually exclusive.")
    if signer is None and not bearer_token:
        raise ConfigurationError("Either an OAuth signer with a token or a bearer token is required.")

    session = session or requests.Session()
    if signer is not None:
        session.auth = OAuth1Auth(signer)
    else:
        session.auth = BearerAuth(bearer_token or "")
    return session
