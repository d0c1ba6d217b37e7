"""
Factory for creating Twitter client instances with proper initialization.
"""

from __future__ import annotations

import logging

import requests

from twitter_rest.client import Client, TraceHook
from twitter_rest.config import ClientSettings, ConfigManager, TwitterCredentials
from twitter_rest.exceptions import ConfigurationError
from twitter_rest.oauth import OAuthConfig, Signer, Token
from twitter_rest.transport import authorized_session

logger = logging.getLogger(__name__)


class TwitterClientFactory:
    """Factory for creating properly initialized Twitter API clients."""

    @staticmethod
    def create_from_config(
        config_manager: ConfigManager,
        *,
        trace: TraceHook | None = None,
    ) -> Client:
        """
        Create a Client from stored credentials and settings.

        Args:
            config_manager: ConfigManager reading env, .env and the credential file

        Returns:
            Client authorized with OAuth 1.0a user context or a bearer token

        Raises:
            ConfigurationError: If credentials are missing or invalid
        """
        credentials = config_manager.load_credentials()
        settings = config_manager.load_settings()
        return TwitterClientFactory.create_from_credentials(credentials, settings=settings, trace=trace)

    @staticmethod
    def create_from_credentials(
        credentials: TwitterCredentials,
        *,
        settings: ClientSettings | None = None,
        session: requests.Session | None = None,
        trace: TraceHook | None = None,
    ) -> Client:
        """
        Create a Client directly from credentials.

        User context is chosen when the access token pair is present; otherwise
        an application-only client is built from the bearer token.

        Raises:
            ConfigurationError: If required credentials are missing
        """
        settings = settings or ClientSettings()

        if credentials.has_access_token():
            if not credentials.api_key or not credentials.api_secret:
                raise ConfigurationError("API key and secret are required")
            signer = Signer(
                OAuthConfig(credentials.api_key, credentials.api_secret, settings.callback_url),
                Token(credentials.access_token or "", credentials.access_token_secret or ""),
            )
            return TwitterClientFactory.create_user_client(
                signer, settings=settings, session=session, trace=trace
            )

        if credentials.bearer_token:
            return TwitterClientFactory.create_application_client(
                credentials.bearer_token, settings=settings, session=session, trace=trace
            )

        if not credentials.api_key or not credentials.api_secret:
            raise ConfigurationError("API key and secret are required")
        raise ConfigurationError("Access token and secret are required")

    @staticmethod
    def create_user_client(
        signer: Signer,
        *,
        settings: ClientSettings | None = None,
        session: requests.Session | None = None,
        trace: TraceHook | None = None,
    ) -> Client:
        """Client signing every request with ``signer``; the token may arrive later via the handshake."""

        settings = settings or ClientSettings()
        logger.debug("Creating user-context client for %s", settings.endpoint)
        return Client(
            authorized_session(signer=signer, session=session),
            endpoint=settings.endpoint,
            timeout=settings.timeout,
            trace=trace,
        )

    @staticmethod
    def create_application_client(
        bearer_token: str,
        *,
        settings: ClientSettings | None = None,
        session: requests.Session | None = None,
        trace: TraceHook | None = None,
    ) -> Client:
        """
        Client using application-only authentication.

        Raises:
            ConfigurationError: If ``bearer_token`` is empty
        """
        if not bearer_token:
            raise ConfigurationError("A bearer token is required for application-only access")

        settings = settings or ClientSettings()
        logger.debug("Creating application-only client for %s", settings.endpoint)
        return Client(
            authorized_session(bearer_token=bearer_token, session=session),
            endpoint=settings.endpoint,
            timeout=settings.timeout,
            trace=trace,
        )
