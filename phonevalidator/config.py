"""
Configuration loader.

Only the CLI reads configuration; `phonevalidator.client.Client` takes its
API key and base URL as constructor arguments and never looks at the
environment.

Precedence (highest to lowest):
1. OS environment variables
2. `.env` values
3. YAML config file values
4. Code defaults
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import httpx
import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, Field
from pydantic import ConfigDict as PydanticConfigDict

from phonevalidator.client import DEFAULT_BASE_URL, Client
from phonevalidator.net.http import DEFAULT_USER_AGENT, HttpClientConfig


class MissingApiKeyError(ValueError):
    """Raised when a client is requested but no API key is configured."""


class PhoneValidatorSettings(BaseModel):
    model_config = PydanticConfigDict(extra="ignore")

    # Service
    api_key: str | None = Field(default=None, repr=False)
    base_url: str = DEFAULT_BASE_URL

    # Logging
    log_level: str = "INFO"
    json_logging: bool = False

    # HTTP
    http_timeout_seconds: float = 10.0
    http_user_agent: str = DEFAULT_USER_AGENT

    def http_config(self) -> HttpClientConfig:
        return HttpClientConfig(
            timeout_seconds=self.http_timeout_seconds,
            user_agent=self.http_user_agent,
        )

    def build_client(self, *, transport: httpx.BaseTransport | None = None) -> Client:
        if not self.api_key:
            raise MissingApiKeyError(
                "No API key configured. Set `GENDERAPI_API_KEY` in your environment or .env, "
                "or pass --api-key."
            )
        return Client(
            self.api_key,
            base_url=self.base_url,
            http_config=self.http_config(),
            transport=transport,
        )


_ENV_MAP: dict[str, str] = {
    "GENDERAPI_API_KEY": "api_key",
    "PHONEVALIDATOR_BASE_URL": "base_url",
    "PHONEVALIDATOR_LOG_LEVEL": "log_level",
    "PHONEVALIDATOR_JSON_LOGGING": "json_logging",
    "PHONEVALIDATOR_HTTP_TIMEOUT_SECONDS": "http_timeout_seconds",
    "PHONEVALIDATOR_HTTP_USER_AGENT": "http_user_agent",
}


def _read_yaml(path: Path) -> dict[str, Any]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return raw if isinstance(raw, dict) else {}


def _read_dotenv(path: Path) -> dict[str, str]:
    # dotenv_values does not mutate os.environ; it just parses the file.
    values = dotenv_values(path)
    return {k: v for k, v in values.items() if isinstance(k, str) and isinstance(v, str)}


def _overlay_env(target: dict[str, Any], env: dict[str, str]) -> None:
    for env_key, field_name in _ENV_MAP.items():
        if env_key in env:
            target[field_name] = env[env_key]


def load_settings(
    *, yaml_path: Path | None = None, env_path: Path | None = None
) -> PhoneValidatorSettings:
    """
    Load settings from YAML and .env, with OS env overrides.

    Args:
        yaml_path: Optional YAML config path.
        env_path: Optional .env path (default: `.env` if present).
    """

    data: dict[str, Any] = {}

    if env_path is None:
        maybe = Path(".env")
        env_path = maybe if maybe.exists() else None

    dotenv = _read_dotenv(env_path) if env_path is not None and env_path.exists() else {}

    # YAML path resolution:
    # - explicit yaml_path wins
    # - else PHONEVALIDATOR_CONFIG from OS env wins
    # - else PHONEVALIDATOR_CONFIG from .env
    if yaml_path is None:
        cfg = os.environ.get("PHONEVALIDATOR_CONFIG") or dotenv.get("PHONEVALIDATOR_CONFIG")
        if cfg:
            yaml_path = Path(cfg)

    if yaml_path is not None and yaml_path.exists():
        data.update(_read_yaml(yaml_path))

    if dotenv:
        _overlay_env(data, dotenv)

    os_env: dict[str, str] = {k: v for k, v in os.environ.items() if k in _ENV_MAP}
    _overlay_env(data, os_env)

    return PhoneValidatorSettings.model_validate(data)
