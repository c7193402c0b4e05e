"""
Unit Tests for Centralized Logging.

Tests the logging configuration, handler placement, and source handling.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from unittest.mock import MagicMock, patch

import pytest

from azioncli.core import logging as logging_module
from azioncli.core.exceptions import ConfigurationError

TEST_CONFIG = {
    "level": "WARNING",
    "format": "console",
    "handlers": {
        "console": {"enabled": True},
        "file": {
            "enabled": False,
            "path": "logs/azioncli.jsonl",
            "max_bytes": 1024,
            "backup_count": 1,
        },
    },
}


@pytest.fixture(autouse=True)
def _fresh_logging_config():
    logging_module._logging_config = None
    yield
    logging_module._logging_config = None


class TestValidSources:
    """Tests for VALID_SOURCES constant."""

    def test_valid_sources_contains_expected_values(self):
        assert logging_module.VALID_SOURCES == frozenset({"cli", "api", "internal"})


class TestLoggingConfigLoading:
    """Tests for logging configuration loading from YAML."""

    def test_load_logging_config_reads_yaml_file(self):
        with patch("azioncli.core.logging.load_yaml_config", return_value=TEST_CONFIG) as loader:
            config = logging_module._load_logging_config()

        loader.assert_called_once_with("logging.yaml")
        assert config["level"] == "WARNING"

    def test_config_is_cached(self):
        with patch("azioncli.core.logging.load_yaml_config", return_value=TEST_CONFIG) as loader:
            logging_module._load_logging_config()
            logging_module._load_logging_config()

        loader.assert_called_once()

    def test_packaged_config_loads(self):
        config = logging_module._load_logging_config()

        assert config["level"] == "WARNING"
        assert config["handlers"]["file"]["enabled"] is False


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level_from_config(self):
        with patch("azioncli.core.logging.load_yaml_config", return_value=TEST_CONFIG):
            logging_module.setup_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_level_override(self):
        with patch("azioncli.core.logging.load_yaml_config", return_value=TEST_CONFIG):
            logging_module.setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_level_raises_configuration_error(self):
        config = {**TEST_CONFIG, "level": "LOUD"}
        with patch("azioncli.core.logging.load_yaml_config", return_value=config):
            with pytest.raises(ConfigurationError, match="LOUD"):
                logging_module.setup_logging()

    def test_console_handler_writes_to_stderr(self):
        """Should keep stdout free for command output."""
        with patch("azioncli.core.logging.load_yaml_config", return_value=TEST_CONFIG):
            logging_module.setup_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_console_can_be_disabled(self):
        with patch("azioncli.core.logging.load_yaml_config", return_value=TEST_CONFIG):
            logging_module.setup_logging(enable_console=False)

        assert logging.getLogger().handlers == []

    def test_file_handler(self, tmp_path):
        config = {
            **TEST_CONFIG,
            "handlers": {
                "console": {"enabled": False},
                "file": {
                    "enabled": True,
                    "path": str(tmp_path / "logs" / "azioncli.jsonl"),
                    "max_bytes": 1024,
                    "backup_count": 1,
                },
            },
        }
        with patch("azioncli.core.logging.load_yaml_config", return_value=config):
            logging_module.setup_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)
        assert (tmp_path / "logs").is_dir()
        handlers[0].close()

    def test_repeated_setup_does_not_stack_handlers(self):
        with patch("azioncli.core.logging.load_yaml_config", return_value=TEST_CONFIG):
            logging_module.setup_logging()
            logging_module.setup_logging()

        assert len(logging.getLogger().handlers) == 1


class TestLogWithSource:
    """Tests for log_with_source."""

    def test_passes_source_and_fields(self):
        logger = MagicMock()

        logging_module.log_with_source(logger, "api", "debug", "API request", method="GET")

        logger.debug.assert_called_once_with("API request", source="api", method="GET")

    def test_invalid_level_raises(self):
        logger = MagicMock(spec=["info"])

        with pytest.raises(AttributeError):
            logging_module.log_with_source(logger, "cli", "verbose", "nope")
