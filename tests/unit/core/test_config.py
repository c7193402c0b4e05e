"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
Tests run against the packaged YAML settings. Failure scenarios use
tmp_path and AZIONCLI_CONFIG_DIR to create controlled settings.
"""

import pytest

from azioncli.core.config import (
    AppConfig,
    Settings,
    find_settings_dir,
    get_api_base_url,
    get_app_config,
    get_settings,
    get_user_agent,
    load_yaml_config,
)
from azioncli.core.config_schema import ApplicationSchema, LoggingSchema
from azioncli.core.exceptions import AuthenticationError, ConfigurationError

VALID_APPLICATION = """
name: azioncli
version: "9.9.9"
description: test
api:
  edge_functions_url: https://functions.test
  edge_services_url: https://services.test/edge_services
  timeout: 5
  accept: application/json; version=3
  user_agent: Azion_CLI
list_defaults:
  page: 1
  page_size: 25
"""

VALID_LOGGING = """
level: WARNING
format: console
handlers:
  console:
    enabled: true
  file:
    enabled: false
    path: logs/test.jsonl
    max_bytes: 1024
    backup_count: 1
"""


@pytest.fixture
def settings_dir(tmp_path, monkeypatch):
    """A settings directory with valid files, selected via AZIONCLI_CONFIG_DIR."""
    (tmp_path / "application.yaml").write_text(VALID_APPLICATION)
    (tmp_path / "logging.yaml").write_text(VALID_LOGGING)
    monkeypatch.setenv("AZIONCLI_CONFIG_DIR", str(tmp_path))
    return tmp_path


# =============================================================================
# Settings files
# =============================================================================


class TestSettingsDir:
    """Tests for settings directory discovery."""

    def test_defaults_to_packaged_settings(self):
        """Should point at the settings shipped with the package."""
        settings_dir = find_settings_dir()

        assert settings_dir.name == "settings"
        assert (settings_dir / "application.yaml").exists()
        assert (settings_dir / "logging.yaml").exists()

    def test_env_override(self, settings_dir):
        """Should honour AZIONCLI_CONFIG_DIR."""
        assert find_settings_dir() == settings_dir


class TestLoadYamlConfig:
    """Tests for raw YAML loading."""

    def test_loads_packaged_application(self):
        data = load_yaml_config("application.yaml")

        assert data["name"] == "azioncli"
        assert "api" in data

    def test_missing_file_raises(self, tmp_path, monkeypatch):
        """Should raise ConfigurationError naming the missing file."""
        monkeypatch.setenv("AZIONCLI_CONFIG_DIR", str(tmp_path))

        with pytest.raises(ConfigurationError, match="application.yaml"):
            load_yaml_config("application.yaml")

    def test_empty_file_is_empty_dict(self, tmp_path, monkeypatch):
        (tmp_path / "empty.yaml").write_text("")
        monkeypatch.setenv("AZIONCLI_CONFIG_DIR", str(tmp_path))

        assert load_yaml_config("empty.yaml") == {}


# =============================================================================
# AppConfig
# =============================================================================


class TestAppConfig:
    """Tests for validated application configuration."""

    def test_packaged_config_is_valid(self):
        config = AppConfig()

        assert isinstance(config.application, ApplicationSchema)
        assert isinstance(config.logging, LoggingSchema)
        assert config.application.api.timeout == 10
        assert config.application.api.accept == "application/json; version=3"

    def test_get_app_config_is_cached(self):
        assert get_app_config() is get_app_config()

    def test_unknown_key_rejected(self, settings_dir):
        """Should reject unknown keys with the file name in the message."""
        (settings_dir / "application.yaml").write_text(VALID_APPLICATION + "surprise: true\n")

        with pytest.raises(ConfigurationError, match="application.yaml"):
            AppConfig()

    def test_unknown_log_level_rejected(self, settings_dir):
        (settings_dir / "logging.yaml").write_text(VALID_LOGGING.replace("level: WARNING", "level: LOUD"))

        with pytest.raises(ConfigurationError, match="logging.yaml"):
            AppConfig()

    def test_non_positive_page_size_rejected(self, settings_dir):
        (settings_dir / "application.yaml").write_text(
            VALID_APPLICATION.replace("page_size: 25", "page_size: 0")
        )

        with pytest.raises(ConfigurationError):
            AppConfig()


# =============================================================================
# Settings (environment)
# =============================================================================


class TestSettings:
    """Tests for environment-derived settings."""

    def test_token_from_env(self, monkeypatch):
        monkeypatch.setenv("AZIONCLI_TOKEN", "abc123")

        assert get_settings().require_token() == "abc123"

    def test_missing_token_raises(self, monkeypatch):
        monkeypatch.delenv("AZIONCLI_TOKEN", raising=False)

        with pytest.raises(AuthenticationError, match="AZIONCLI_TOKEN"):
            Settings(_env_file=None).require_token()

    def test_blank_token_raises(self):
        with pytest.raises(AuthenticationError):
            Settings(token="   ", _env_file=None).require_token()


class TestApiBaseUrl:
    """Tests for API endpoint resolution."""

    def test_from_yaml(self, settings_dir, monkeypatch):
        monkeypatch.delenv("AZIONCLI_EDGE_FUNCTIONS_URL", raising=False)

        assert get_api_base_url("edge_functions") == ("https://functions.test", 5)
        assert get_api_base_url("edge_services") == ("https://services.test/edge_services", 5)

    def test_env_override(self, settings_dir, monkeypatch):
        monkeypatch.setenv("AZIONCLI_EDGE_FUNCTIONS_URL", "https://override.test")

        base_url, _ = get_api_base_url("edge_functions")

        assert base_url == "https://override.test"

    def test_unknown_api(self):
        with pytest.raises(ConfigurationError, match="Unknown API"):
            get_api_base_url("edge_firewalls")

    def test_user_agent(self, settings_dir):
        assert get_user_agent() == "Azion_CLI/9.9.9"
