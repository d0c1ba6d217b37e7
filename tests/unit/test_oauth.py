from __future__ import annotations

import pytest

from twitter_rest.exceptions import ConfigurationError
from twitter_rest.oauth import (
    AUTHORIZE_URL,
    OAuthConfig,
    Signer,
    TemporaryToken,
    Token,
    sign_base_string,
    signature_base_string,
)

CONSUMER_KEY = "xvz1evFS4wEEPTGEFPHBog"
CONSUMER_SECRET = "kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw"
TOKEN = Token(
    "370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb",
    "LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE",
)
NONCE = "kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg"
TIMESTAMP = 1318622958
URL = "https://api.twitter.com/1.1/statuses/update.json"
STATUS = "Hello Ladies + Gentlemen, a signed OAuth request!"

EXPECTED_BASE_STRING = (
    "POST&https%3A%2F%2Fapi.twitter.com%2F1.1%2Fstatuses%2Fupdate.json&"
    "include_entities%3Dtrue%26oauth_consumer_key%3Dxvz1evFS4wEEPTGEFPHBog%26"
    "oauth_nonce%3DkYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg%26"
    "oauth_signature_method%3DHMAC-SHA1%26oauth_timestamp%3D1318622958%26"
    "oauth_token%3D370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb%26"
    "oauth_version%3D1.0%26status%3DHello%2520Ladies%2520%252B%2520Gentlemen"
    "%252C%2520a%2520signed%2520OAuth%2520request%2521"
)
EXPECTED_SIGNATURE = "hCtSmYh+iHYCEqBWrE7C7hYmtUk="

PARAMS = [
    ("status", STATUS),
    ("include_entities", "true"),
    ("oauth_consumer_key", CONSUMER_KEY),
    ("oauth_nonce", NONCE),
    ("oauth_signature_method", "HMAC-SHA1"),
    ("oauth_timestamp", str(TIMESTAMP)),
    ("oauth_token", TOKEN.token),
    ("oauth_version", "1.0"),
]


def _signer(token: Token | None = TOKEN) -> Signer:
    return Signer(
        OAuthConfig(CONSUMER_KEY, CONSUMER_SECRET),
        token,
        nonce_factory=lambda: NONCE,
        clock=lambda: TIMESTAMP,
    )


def test_signature_base_string_matches_reference() -> None:
    assert signature_base_string("POST", URL, PARAMS) == EXPECTED_BASE_STRING


def test_base_string_is_independent_of_parameter_order() -> None:
    assert signature_base_string("post", URL, list(reversed(PARAMS))) == EXPECTED_BASE_STRING


def test_hmac_sha1_reference_signature() -> None:
    signature = sign_base_string(EXPECTED_BASE_STRING, CONSUMER_SECRET, TOKEN.secret)

    assert signature == EXPECTED_SIGNATURE


def test_authorization_header_contains_reference_signature() -> None:
    header = _signer().authorization_header(
        "POST",
        URL + "?include_entities=true",
        [("status", STATUS)],
    )

    assert header.startswith("OAuth ")
    assert 'oauth_consumer_key="xvz1evFS4wEEPTGEFPHBog"' in header
    assert f'oauth_token="{TOKEN.token}"' in header
    assert 'oauth_signature_method="HMAC-SHA1"' in header
    assert header.endswith('oauth_signature="hCtSmYh%2BiHYCEqBWrE7C7hYmtUk%3D"')
    assert "status" not in header
    assert "include_entities" not in header


def test_query_string_and_explicit_parameters_sign_identically() -> None:
    signer = _signer()
    query = signer.authorization_header("GET", URL + "?count=5&trim_user=true")
    form = signer.authorization_header("GET", URL, [("trim_user", "true"), ("count", "5")])

    assert query == form


def test_extra_protocol_parameters_are_signed_and_listed() -> None:
    header = _signer(None).authorization_header(
        "POST",
        "https://api.twitter.com/oauth/request_token",
        extra_oauth={"oauth_callback": "http://localhost/cb"},
    )

    assert 'oauth_callback="http%3A%2F%2Flocalhost%2Fcb"' in header
    assert "oauth_token=" not in header


def test_signer_requires_consumer_credentials() -> None:
    with pytest.raises(ConfigurationError):
        Signer(OAuthConfig("", "secret"))


def test_set_token_replaces_held_token() -> None:
    signer = _signer(None)
    signer.set_token(Token("access", "secret"))

    assert signer.token == Token("access", "secret")


def test_authorization_url_escapes_token() -> None:
    temporary = TemporaryToken("abc+def", "secret")

    assert temporary.authorization_url == f"{AUTHORIZE_URL}?oauth_token=abc%2Bdef"


def test_default_callback_is_out_of_band() -> None:
    assert OAuthConfig("key", "secret").callback == "oob"
