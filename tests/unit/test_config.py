from __future__ import annotations

import json
import os
import stat
from pathlib import Path

import pytest
from dotenv import dotenv_values

from twitter_rest.config import DEFAULT_ENDPOINT, ConfigManager, TwitterCredentials
from twitter_rest.exceptions import ConfigurationError


def test_load_credentials_prefers_environment(tmp_path: Path) -> None:
    env = {
        "TWITTER_API_KEY": "env-key",
        "TWITTER_API_SECRET": "env-secret",
        "TWITTER_ACCESS_TOKEN": "env-access",
        "TWITTER_ACCESS_TOKEN_SECRET": "env-secret-token",
        "TWITTER_BEARER_TOKEN": "env-bearer",
    }
    credential_path = tmp_path / "twitter.json"
    credential_path.write_text(
        json.dumps(
            {
                "api_key": "file-key",
                "api_secret": "file-secret",
                "access_token": "file-access",
                "access_token_secret": "file-access-secret",
            }
        ),
        encoding="utf-8",
    )

    manager = ConfigManager(credential_path=credential_path, env=env)
    credentials = manager.load_credentials()

    assert credentials.api_key == "env-key"
    assert credentials.access_token == "env-access"
    assert credentials.bearer_token == "env-bearer"


def test_load_credentials_from_file_when_env_empty(tmp_path: Path) -> None:
    credential_path = tmp_path / "twitter.json"
    credential_path.write_text(
        json.dumps({"api_key": "file-key", "api_secret": "file-secret"}),
        encoding="utf-8",
    )

    manager = ConfigManager(credential_path=credential_path, env={})
    credentials = manager.load_credentials(priority=("file",))

    assert credentials.api_key == "file-key"
    assert not credentials.has_access_token()


def test_load_credentials_from_dotenv(tmp_path: Path) -> None:
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text(
        """
TWITTER_API_KEY=dotenv-key
TWITTER_API_SECRET=dotenv-secret
TWITTER_ACCESS_TOKEN=dotenv-access
TWITTER_ACCESS_TOKEN_SECRET=dotenv-access-secret
""".strip()
    )

    manager = ConfigManager(credential_path=tmp_path / "credentials.json", env={}, dotenv_path=dotenv_file)
    credentials = manager.load_credentials(priority=("dotenv",))

    assert credentials.api_key == "dotenv-key"
    assert credentials.access_token_secret == "dotenv-access-secret"


def test_load_credentials_raises_when_missing(tmp_path: Path) -> None:
    manager = ConfigManager(credential_path=tmp_path / "twitter.json", env={})

    with pytest.raises(ConfigurationError):
        manager.load_credentials()


def test_credential_file_must_hold_a_mapping(tmp_path: Path) -> None:
    credential_path = tmp_path / "twitter.json"
    credential_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigManager(credential_path=credential_path, env={}).load_credentials(priority=("file",))


def test_save_credentials_merges_existing_values(tmp_path: Path) -> None:
    credential_path = tmp_path / "twitter.json"
    credential_path.write_text(
        json.dumps(
            {
                "api_key": "existing-key",
                "api_secret": "existing-secret",
                "access_token": "existing-access",
            }
        ),
        encoding="utf-8",
    )
    manager = ConfigManager(credential_path=credential_path, env={})

    manager.save_credentials(
        TwitterCredentials(
            access_token="new-access",
            access_token_secret="new-secret",
        )
    )

    data = json.loads(credential_path.read_text(encoding="utf-8"))
    assert data["api_key"] == "existing-key"
    assert data["access_token"] == "new-access"
    assert data["access_token_secret"] == "new-secret"
    assert stat.S_IMODE(os.stat(credential_path).st_mode) == 0o600


def test_save_credentials_to_dotenv(tmp_path: Path) -> None:
    dotenv_path = tmp_path / ".env"
    dotenv_path.write_text("TWITTER_API_KEY=kept\n", encoding="utf-8")
    manager = ConfigManager(env={}, dotenv_path=dotenv_path)

    manager.save_credentials(TwitterCredentials(access_token="access", access_token_secret="secret"))

    values = dotenv_values(dotenv_path)
    assert values["TWITTER_API_KEY"] == "kept"
    assert values["TWITTER_ACCESS_TOKEN"] == "access"
    assert values["TWITTER_ACCESS_TOKEN_SECRET"] == "secret"


def test_load_settings_defaults(tmp_path: Path) -> None:
    settings = ConfigManager(credential_path=tmp_path / "x.json", env={}).load_settings()

    assert settings.endpoint == DEFAULT_ENDPOINT
    assert settings.callback_url is None
    assert settings.timeout == 30.0


def test_load_settings_environment_overrides_dotenv(tmp_path: Path) -> None:
    dotenv_path = tmp_path / ".env"
    dotenv_path.write_text(
        "TWITTER_API_ENDPOINT=http://dotenv.test/1.1\nTWITTER_TIMEOUT=5\n",
        encoding="utf-8",
    )
    env = {"TWITTER_API_ENDPOINT": "http://env.test/1.1/", "TWITTER_CALLBACK_URL": "http://localhost/cb"}

    settings = ConfigManager(env=env, dotenv_path=dotenv_path).load_settings()

    assert settings.endpoint == "http://env.test/1.1"
    assert settings.callback_url == "http://localhost/cb"
    assert settings.timeout == 5.0


def test_load_settings_rejects_bad_timeout() -> None:
    with pytest.raises(ConfigurationError):
        ConfigManager(env={"TWITTER_TIMEOUT": "soon"}).load_settings()


def test_credentials_merge_prefers_other() -> None:
    merged = TwitterCredentials(api_key="a", bearer_token="b").merge(TwitterCredentials(api_key="c"))

    assert merged.api_key == "c"
    assert merged.bearer_token == "b"
