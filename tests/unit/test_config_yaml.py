"""Tests for settings and .agentskills.yaml loading."""

import logging
from pathlib import Path

import pytest

from agentskills.config import (
    CONFIG_KEYS,
    Settings,
    _load_yaml_config,
    get_config_path,
    get_settings,
)
from agentskills.lib.logger import PACKAGE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestYamlConfig:
    def test_missing_file(self, tmp_path):
        assert _load_yaml_config(tmp_path) == {}

    def test_config_file_location(self, tmp_path):
        assert get_config_path(tmp_path) == tmp_path / ".agentskills.yaml"

    def test_loads_known_keys(self, tmp_path):
        get_config_path(tmp_path).write_text("strict: true\nlog_level: DEBUG\n")

        assert _load_yaml_config(tmp_path) == {"strict": True, "log_level": "DEBUG"}

    def test_drops_unknown_keys(self, tmp_path, caplog):
        get_config_path(tmp_path).write_text("strict: true\nport: 3333\n")

        with caplog.at_level(logging.WARNING):
            result = _load_yaml_config(tmp_path)

        assert result == {"strict": True}
        assert "port" in caplog.text

    def test_non_mapping_ignored(self, tmp_path):
        get_config_path(tmp_path).write_text("- a\n- b\n")
        assert _load_yaml_config(tmp_path) == {}

    def test_invalid_yaml_ignored(self, tmp_path, caplog):
        get_config_path(tmp_path).write_text("strict: [unclosed\n")

        with caplog.at_level(logging.WARNING):
            assert _load_yaml_config(tmp_path) == {}
        assert "Error loading" in caplog.text

    def test_known_keys(self):
        assert CONFIG_KEYS == {"base_path", "log_level", "log_format", "strict"}


class TestSettings:
    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("AGENTSKILLS_LOG_LEVEL", raising=False)

        settings = Settings()

        assert settings.base_path == Path(".")
        assert settings.strict is False
        assert settings.log_level == "WARNING"

    def test_yaml_used_as_fallback(self, tmp_path):
        get_config_path(tmp_path).write_text("strict: true\n")

        settings = Settings(base_path=tmp_path)

        assert settings.strict is True

    def test_env_beats_yaml(self, tmp_path, monkeypatch):
        get_config_path(tmp_path).write_text("strict: true\n")
        monkeypatch.setenv("AGENTSKILLS_STRICT", "false")

        settings = Settings(base_path=tmp_path)

        assert settings.strict is False

    def test_explicit_beats_yaml(self, tmp_path):
        get_config_path(tmp_path).write_text("strict: true\n")

        settings = Settings(base_path=tmp_path, strict=False)

        assert settings.strict is False

    def test_base_path_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AGENTSKILLS_BASE_PATH", str(tmp_path))
        get_config_path(tmp_path).write_text("strict: true\n")

        settings = get_settings()

        assert settings.base_path == tmp_path
        assert settings.strict is True


class TestSetupLogging:
    def test_sets_package_level(self):
        setup_logging(level="debug")
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    def test_repeated_calls_do_not_duplicate_handlers(self):
        setup_logging(level="INFO")
        setup_logging(level="INFO")
        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1
