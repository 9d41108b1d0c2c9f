"""Configuration loader for outlinemd.toml."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .errors import ConfigError

DEFAULT_BASE_URL = "https://app.getoutline.com/api"
DEFAULT_TOKEN_ENV = "OUTLINE_TOKEN"
CONFIG_NAME = "outlinemd.toml"


@dataclass
class ApiConfig:
    """Outline API configuration."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    token_env: str = DEFAULT_TOKEN_ENV


@dataclass
class AppConfig:
    """Complete outlinemd configuration."""
    api: ApiConfig


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    Load configuration from outlinemd.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/outlinemd.toml

    An explicit config_path that does not exist is an error; a missing
    file in the working directory just means defaults.
    """
    toml_data: dict[str, Any] = {}

    if config_path is not None and not config_path.exists():
        raise ConfigError(f"config file not found: {config_path}")

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_NAME)

    for path in search_paths:
        if path.exists():
            try:
                with open(path, "rb") as f:
                    toml_data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"{path}: {e}") from e
            break

    api_data = toml_data.get("api", {})
    api_config = ApiConfig(
        base_url=str(api_data.get("base_url", DEFAULT_BASE_URL)).rstrip("/"),
        timeout=float(api_data.get("timeout", 30.0)),
        token_env=api_data.get("token_env", DEFAULT_TOKEN_ENV),
    )

    return AppConfig(api=api_config)


def resolve_token(config: AppConfig, environ: Mapping[str, str] | None = None) -> str:
    """Read the API token from the environment variable named in config."""
    if environ is None:
        environ = os.environ
    token = environ.get(config.api.token_env, "")
    if not token:
        raise ConfigError(f"{config.api.token_env} is not set")
    return token
