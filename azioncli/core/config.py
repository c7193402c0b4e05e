"""
Configuration Management.

Loads the API token from the environment (or a .env file in the working
directory) and settings from azioncli/settings/*.yaml.
No hardcoded values in code: all configuration comes from these sources.

Secrets (environment / .env):
    AZIONCLI_TOKEN

Optional overrides (environment / .env):
    AZIONCLI_EDGE_FUNCTIONS_URL, AZIONCLI_EDGE_SERVICES_URL, AZIONCLI_CONFIG_DIR

Settings (YAML):
    application.yaml   - App identity, API endpoints, timeout, list defaults
    logging.yaml       - Logging configuration
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from azioncli.core.config_schema import ApplicationSchema, LoggingSchema
from azioncli.core.exceptions import AuthenticationError, ConfigurationError

CONFIG_DIR_ENV = "AZIONCLI_CONFIG_DIR"
TOKEN_ENV = "AZIONCLI_TOKEN"


def find_settings_dir() -> Path:
    """Return the directory holding the YAML settings files."""
    override = os.environ.get(CONFIG_DIR_ENV, "").strip()
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "settings"


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from the settings directory."""
    config_path = find_settings_dir() / filename

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Values read from the environment. Only the token is a secret."""

    token: str = ""
    edge_functions_url: str | None = None
    edge_services_url: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="AZIONCLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def require_token(self) -> str:
        """Return the token or fail before any request is made."""
        token = self.token.strip()
        if not token:
            raise AuthenticationError(
                f"Missing API token. Set the {TOKEN_ENV} environment variable"
            )
        return token


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached environment settings."""
    return Settings()


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_api_base_url(api_name: str) -> tuple[str, float]:
    """
    Get the base URL and timeout for one of the configured APIs.

    Environment overrides take precedence over application.yaml.

    Args:
        api_name: "edge_functions" or "edge_services"

    Returns:
        Tuple of (base_url, timeout_seconds).
    """
    api = get_app_config().application.api
    field = f"{api_name}_url"
    if not hasattr(api, field):
        raise ConfigurationError(f"Unknown API: {api_name}")
    override = getattr(get_settings(), field, None)
    return override or getattr(api, field), api.timeout


def get_user_agent() -> str:
    """User-Agent header value, e.g. Azion_CLI/0.1.0."""
    app = get_app_config().application
    return f"{app.api.user_agent}/{app.version}"
