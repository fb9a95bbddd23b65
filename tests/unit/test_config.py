"""Unit tests for configuration loading and logging setup."""

import json
import logging

import pytest

from principia.config import PrincipiaConfig, load_config, load_from_env
from principia.errors import ConfigError
from principia.infra import configure_logging, get_logger


class TestDefaults:
    """Test default configuration values."""

    def test_values(self):
        """Test the documented defaults."""
        config = PrincipiaConfig()
        assert config.cache.page_ttl_seconds == 3600
        assert config.cache.principle_ttl_seconds == 7200
        assert config.cache.max_entries == 1000
        assert config.engine.default_max_depth == 3
        assert config.engine.default_max_results == 10
        assert config.server.port == 3001
        assert "bridge" in config.engine.warm_up_terms


class TestEnv:
    """Test PRINCIPIA_* environment parsing."""

    def test_sections_and_fields(self):
        """Test env keys map to sections and coerce scalars."""
        env = {
            "PRINCIPIA_CACHE_MAX_ENTRIES": "50",
            "PRINCIPIA_SERVER_JSON_LOGS": "true",
            "PRINCIPIA_ENGINE_WARM_UP_TERMS": "gear, lever",
            "PRINCIPIA_UNKNOWN_X": "1",
            "OTHER_VAR": "2",
        }
        data = load_from_env("PRINCIPIA", env)
        assert data == {
            "cache": {"max_entries": 50},
            "server": {"json_logs": True},
            "engine": {"warm_up_terms": ["gear", "lever"]},
        }

    def test_single_item_list(self):
        """Test a list field with one item still parses as a list."""
        data = load_from_env("PRINCIPIA", {"PRINCIPIA_ENGINE_WARM_UP_TERMS": "bridge"})
        assert data == {"engine": {"warm_up_terms": ["bridge"]}}
        config = load_config(environ={"PRINCIPIA_ENGINE_WARM_UP_TERMS": "bridge"})
        assert config.engine.warm_up_terms == ["bridge"]

    def test_json_array_list(self):
        """Test a list field accepts a JSON array."""
        data = load_from_env("PRINCIPIA", {"PRINCIPIA_ENGINE_WARM_UP_TERMS": '["gear", "lever"]'})
        assert data["engine"]["warm_up_terms"] == ["gear", "lever"]

    def test_string_with_comma_not_split(self):
        """Test a string field containing commas stays a string."""
        env = {"PRINCIPIA_PROVIDER_USER_AGENT": "Bot/1.0 (a, b)"}
        config = load_config(environ=env)
        assert config.provider.user_agent == "Bot/1.0 (a, b)"

    def test_numeric_looking_string_field(self):
        """Test a string field keeps its raw text."""
        data = load_from_env("PRINCIPIA", {"PRINCIPIA_SERVER_HOST": "localhost"})
        assert data == {"server": {"host": "localhost"}}

    def test_load_config_from_env(self):
        """Test load_config reads the given environment."""
        config = load_config(environ={"PRINCIPIA_SERVER_PORT": "8080"})
        assert config.server.port == 8080


class TestFile:
    """Test file-based configuration."""

    def test_yaml(self, tmp_path):
        """Test loading a YAML file."""
        path = tmp_path / "config.yaml"
        path.write_text("cache:\n  max_entries: 10\nengine:\n  default_max_depth: 1\n")
        config = load_config(path, environ={})
        assert config.cache.max_entries == 10
        assert config.engine.default_max_depth == 1

    def test_precedence(self, tmp_path):
        """Test overrides beat env, which beats the file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"server": {"port": 1000, "host": "127.0.0.1"}}))
        config = load_config(
            path,
            environ={"PRINCIPIA_SERVER_PORT": "2000"},
            overrides={"server": {"log_level": "DEBUG"}},
        )
        assert config.server.port == 2000
        assert config.server.host == "127.0.0.1"
        assert config.server.log_level == "DEBUG"

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ConfigError."""
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.yaml", environ={})

    def test_unsupported_format(self, tmp_path):
        """Test an unknown suffix raises ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text("x = 1")
        with pytest.raises(ConfigError):
            load_config(path, environ={})

    def test_invalid_values(self):
        """Test validation failures raise ConfigError."""
        with pytest.raises(ConfigError):
            load_config(environ={"PRINCIPIA_CACHE_MAX_ENTRIES": "0"})


class TestLogging:
    """Test logging setup."""

    def test_configure_is_idempotent(self):
        """Test repeated configuration keeps one handler."""
        configure_logging("DEBUG")
        configure_logging("DEBUG", json_format=True)
        handlers = [h for h in logging.getLogger().handlers if h.get_name() == "principia"]
        assert len(handlers) == 1
        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_level_falls_back(self):
        """Test an unknown level falls back to INFO."""
        configure_logging("LOUD")
        assert logging.getLogger().level == logging.INFO

    def test_get_logger_binds(self):
        """Test bound loggers accept structured events."""
        log = get_logger("principia.test").bind(term="bridge")
        log.info("bound_event")
