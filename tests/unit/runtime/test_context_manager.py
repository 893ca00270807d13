"""Unit tests for the application context and configuration overrides."""

import os
from unittest.mock import patch

from product_catalog.runtime.config.config_data import ConfigData, DatabaseConfig
from product_catalog.runtime.config.settings import EnvironmentVariables
from product_catalog.runtime.context import (
    AppContext,
    get_config,
    get_context,
    load_default_config,
    with_context,
)


class TestContextManager:
    def test_default_context_available(self):
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_with_context_override_single_field(self):
        original_config = get_config()

        override = ConfigData()
        override.app.host = "custom_host"

        with with_context(override):
            current = get_config()
            assert current.app.host == "custom_host"
            # Fields not set on the override are inherited
            assert current.app.port == original_config.app.port
            assert current.database.url == original_config.database.url

        assert get_config() is original_config

    def test_with_context_nested_overrides(self):
        original_config = get_config()

        level1 = ConfigData()
        level1.pagination.default_size = 5

        level2 = ConfigData(database=DatabaseConfig(url="sqlite://"))

        with with_context(level1):
            with with_context(level2):
                config = get_config()
                assert config.pagination.default_size == 5
                assert config.database.url == "sqlite://"
            assert get_config().database.url == original_config.database.url

        assert get_config().pagination.default_size == original_config.pagination.default_size

    def test_with_context_none_is_noop(self):
        original_config = get_config()

        with with_context(None):
            assert get_config() is original_config

    def test_with_context_rejects_other_types(self):
        try:
            with with_context({"app": {"host": "x"}}):  # type: ignore[arg-type]
                pass
        except ValueError as e:
            assert "ConfigData" in str(e)
        else:
            raise AssertionError("expected ValueError")


class TestLoadDefaultConfig:
    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        env = {"APP_CONFIG_FILE": str(tmp_path / "absent.yaml"), "APP_ENVIRONMENT": "test"}
        with patch.dict(os.environ, env, clear=True):
            config = load_default_config()

        assert config.app.environment == "test"
        assert config.database.url == "sqlite:///./products.db"

    def test_reads_configured_file(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("config:\n  app:\n    title: Custom Catalog\n")

        with patch.dict(os.environ, {"APP_CONFIG_FILE": str(path)}, clear=True):
            config = load_default_config()

        assert config.app.title == "Custom Catalog"


class TestEnvironmentVariables:
    def test_default_values(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)  # no stray .env file
        with patch.dict(os.environ, {}, clear=True):
            env_vars = EnvironmentVariables()

        assert env_vars.environment == "development"
        assert env_vars.config_file == "config.yaml"

    def test_environment_variable_loading(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        env = {"APP_ENVIRONMENT": "production", "APP_CONFIG_FILE": "/etc/catalog.yaml"}
        with patch.dict(os.environ, env, clear=True):
            env_vars = EnvironmentVariables()

        assert env_vars.environment == "production"
        assert env_vars.config_file == "/etc/catalog.yaml"
