"""
Client library for the Twitter REST API v1.1.

    from twitter_rest import ConfigManager, TwitterClientFactory

    client = TwitterClientFactory.create_from_config(ConfigManager())
    tweet = client.tweets.update("Hello from twitter_rest")
"""

import logging

from twitter_rest.auth import OAuthManager
from twitter_rest.client import Client, TraceEvent
from twitter_rest.config import ClientSettings, ConfigManager, TwitterCredentials
from twitter_rest.decoding import DecodeResult, FieldMismatch, decode_json
from twitter_rest.exceptions import (
    ApiResponseError,
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    InvalidArgumentError,
    MediaValidationError,
    OAuthError,
    RateLimitExceeded,
    TransportError,
    TwitterClientError,
)
from twitter_rest.factory import TwitterClientFactory
from twitter_rest.media import TweetMedia
from twitter_rest.oauth import OAuthConfig, Signer, TemporaryToken, Token
from twitter_rest.params import ParameterSet
from twitter_rest.services import SearchOptions, TimelineOptions, TweetOptions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApiResponseError",
    "AuthenticationError",
    "Client",
    "ClientSettings",
    "ConfigManager",
    "ConfigurationError",
    "DecodeError",
    "DecodeResult",
    "FieldMismatch",
    "InvalidArgumentError",
    "MediaValidationError",
    "OAuthConfig",
    "OAuthError",
    "OAuthManager",
    "ParameterSet",
    "RateLimitExceeded",
    "SearchOptions",
    "Signer",
    "TemporaryToken",
    "TimelineOptions",
    "Token",
    "TraceEvent",
    "TransportError",
    "TweetMedia",
    "TweetOptions",
    "TwitterClientError",
    "TwitterClientFactory",
    "TwitterCredentials",
    "decode_json",
]
