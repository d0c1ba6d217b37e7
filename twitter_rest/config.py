"""
Configuration management utilities for twitter_rest.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Mapping, Sequence

from dotenv import dotenv_values, set_key

from twitter_rest.exceptions import ConfigurationError

DEFAULT_ENDPOINT = "https://api.twitter.com/1.1"
DEFAULT_TIMEOUT = 30.0

ENV_VAR_MAP = {
    "api_key": "TWITTER_API_KEY",
    "api_secret": "TWITTER_API_SECRET",
    "access_token": "TWITTER_ACCESS_TOKEN",
    "access_token_secret": "TWITTER_ACCESS_TOKEN_SECRET",
    "bearer_token": "TWITTER_BEARER_TOKEN",
}

SETTINGS_ENV_VAR_MAP = {
    "endpoint": "TWITTER_API_ENDPOINT",
    "callback_url": "TWITTER_CALLBACK_URL",
    "timeout": "TWITTER_TIMEOUT",
}


@dataclass(frozen=True, slots=True)
class TwitterCredentials:
    """Credential container for OAuth 1.0a user context or an application bearer token."""

    api_key: str | None = None
    api_secret: str | None = None
    access_token: str | None = None
    access_token_secret: str | None = None
    bearer_token: str | None = None

    def is_empty(self) -> bool:
        return all(value in (None, "") for value in asdict(self).values())

    def has_consumer(self) -> bool:
        return bool(self.api_key and self.api_secret)

    def has_access_token(self) -> bool:
        return bool(self.access_token and self.access_token_secret)

    def merge(self, other: "TwitterCredentials") -> "TwitterCredentials":
        """Merge credential sets, preferring non-null values from ``other``."""

        return TwitterCredentials(
            api_key=other.api_key or self.api_key,
            api_secret=other.api_secret or self.api_secret,
            access_token=other.access_token or self.access_token,
            access_token_secret=other.access_token_secret or self.access_token_secret,
            bearer_token=other.bearer_token or self.bearer_token,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            key: value
            for key, value in asdict(self).items()
            if isinstance(value, str) and value
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, str | None]) -> "TwitterCredentials":
        return cls(
            api_key=data.get("api_key"),
            api_secret=data.get("api_secret"),
            access_token=data.get("access_token"),
            access_token_secret=data.get("access_token_secret"),
            bearer_token=data.get("bearer_token"),
        )


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Per-client settings that are not secrets."""

    endpoint: str = DEFAULT_ENDPOINT
    callback_url: str | None = None
    timeout: float | None = DEFAULT_TIMEOUT


class ConfigManager:
    """Loads and persists credentials from environment variables, a .env file or disk."""

    def __init__(
        self,
        credential_path: Path | None = None,
        *,
        env: Mapping[str, str] | None = None,
        dotenv_path: Path | None = None,
    ) -> None:
        self._credential_path = credential_path or Path("credentials/twitter_config.json")
        self._env = os.environ if env is None else env
        self._dotenv_path = dotenv_path

    def load_credentials(
        self,
        priority: Sequence[str] = ("env", "dotenv", "file"),
    ) -> TwitterCredentials:
        """
        Load credentials according to the requested priority order.

        Raises:
            ConfigurationError: when no credentials are available.
        """

        for source in priority:
            if source == "env":
                credentials = self._from_env_mapping(self._env)
            elif source == "dotenv":
                credentials = self._from_env_mapping(self._dotenv())
            elif source == "file":
                credentials = self._load_from_file()
            else:
                raise ValueError(f"Unknown credential source '{source}'.")

            if credentials and not credentials.is_empty():
                return credentials

        raise ConfigurationError("Twitter credentials are not configured.")

    def load_settings(self) -> ClientSettings:
        """Read endpoint, callback and timeout overrides; environment wins over .env."""

        values: dict[str, str] = {}
        for source in (self._dotenv(), self._env):
            for field, env_name in SETTINGS_ENV_VAR_MAP.items():
                if source.get(env_name):
                    values[field] = source[env_name]

        timeout: float | None = DEFAULT_TIMEOUT
        if "timeout" in values:
            try:
                timeout = float(values["timeout"])
            except ValueError as exc:
                raise ConfigurationError(
                    f"{SETTINGS_ENV_VAR_MAP['timeout']} must be a number, got {values['timeout']!r}."
                ) from exc

        return ClientSettings(
            endpoint=values.get("endpoint", DEFAULT_ENDPOINT).rstrip("/"),
            callback_url=values.get("callback_url"),
            timeout=timeout,
        )

    def save_credentials(self, credentials: TwitterCredentials) -> None:
        """Persist credentials, merging with existing values.

        Tokens go to the .env file when one is configured, otherwise to the
        JSON credential file.
        """

        if self._dotenv_path is not None:
            self._dotenv_path.parent.mkdir(parents=True, exist_ok=True)
            self._dotenv_path.touch(exist_ok=True)
            for field, value in credentials.to_dict().items():
                set_key(str(self._dotenv_path), ENV_VAR_MAP[field], value, quote_mode="never")
            os.chmod(self._dotenv_path, 0o600)
            return

        existing = self._load_from_file()
        merged = existing.merge(credentials) if existing else credentials

        self._credential_path.parent.mkdir(parents=True, exist_ok=True)
        with self._credential_path.open("w", encoding="utf-8") as fp:
            json.dump(merged.to_dict(), fp, indent=2, sort_keys=True)

        # Owner read/write only
        os.chmod(self._credential_path, 0o600)

    def _dotenv(self) -> Mapping[str, str | None]:
        if self._dotenv_path is None or not self._dotenv_path.exists():
            return {}
        return dotenv_values(self._dotenv_path)

    @staticmethod
    def _from_env_mapping(source: Mapping[str, str | None]) -> TwitterCredentials | None:
        values: dict[str, str | None] = {
            field: source.get(env_name) for field, env_name in ENV_VAR_MAP.items()
        }
        credentials = TwitterCredentials.from_mapping(values)
        return credentials if not credentials.is_empty() else None

    def _load_from_file(self) -> TwitterCredentials | None:
        if not self._credential_path.exists():
            return None

        with self._credential_path.open("r", encoding="utf-8") as fp:
            data = json.load(fp)

        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Credential file {self._credential_path} did not contain a mapping."
            )

        credentials = TwitterCredentials.from_mapping(data)
        return credentials if not credentials.is_empty() else None
