"""
Configuration Tests
===================

Tests for YAML loading, environment overrides and validation.
"""

import logging

import pytest
from pydantic import ValidationError

from chronoscroll.config import (
    JSON_LOG_FORMAT,
    TEXT_LOG_FORMAT,
    LoggingConfig,
    MappingConfig,
    Settings,
    WeightConfig,
    load_config,
    setup_logging,
)


ENV_VARS = [
    "CHRONOSCROLL_MARGIN_START",
    "CHRONOSCROLL_MARGIN_END",
    "CHRONOSCROLL_FALLBACK_MIN_YEAR",
    "CHRONOSCROLL_FALLBACK_MAX_YEAR",
    "CHRONOSCROLL_LOG_LEVEL",
    "CHRONOSCROLL_LOG_FORMAT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove any chronoscroll overrides from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """Verify default values."""

    def test_mapping_defaults(self):
        config = Settings().mapping
        assert config.margin_start == 0.02
        assert config.margin_end == 0.02
        assert config.fallback_min_year == -4000
        assert config.fallback_max_year == 100

    def test_weight_defaults(self):
        config = Settings().weights
        assert config.density_base == 4.0
        assert config.milestone_per_entity == 20.0

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_config(str(tmp_path / "absent.yaml"))
        assert settings == Settings()


class TestLoadConfig:
    """Tests for load_config."""

    def test_yaml_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "mapping:\n"
            "  margin_start: 0.05\n"
            "weights:\n"
            "  milestone_base: 30\n"
            "logging:\n"
            "  level: DEBUG\n"
        )
        settings = load_config(str(path))
        assert settings.mapping.margin_start == 0.05
        assert settings.mapping.margin_end == 0.02
        assert settings.weights.milestone_base == 30.0
        assert settings.logging.level == "DEBUG"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == Settings()

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("mapping:\n  margin_start: 0.05\n")
        monkeypatch.setenv("CHRONOSCROLL_MARGIN_START", "0.1")
        monkeypatch.setenv("CHRONOSCROLL_FALLBACK_MIN_YEAR", "-5000")
        monkeypatch.setenv("CHRONOSCROLL_LOG_FORMAT", "json")

        settings = load_config(str(path))
        assert settings.mapping.margin_start == 0.1
        assert settings.mapping.fallback_min_year == -5000
        assert settings.logging.format == "json"


class TestValidation:
    """Out-of-range configuration is rejected."""

    def test_overlapping_margins(self):
        with pytest.raises(ValidationError):
            MappingConfig(margin_start=0.6, margin_end=0.5)

    def test_negative_margin(self):
        with pytest.raises(ValidationError):
            MappingConfig(margin_start=-0.01)

    def test_reversed_fallback_range(self):
        with pytest.raises(ValidationError):
            MappingConfig(fallback_min_year=100, fallback_max_year=-4000)

    def test_non_positive_divisor(self):
        with pytest.raises(ValidationError):
            WeightConfig(duration_bonus_divisor=0)

    def test_invalid_yaml_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("mapping:\n  margin_end: 1.5\n")
        with pytest.raises(ValidationError):
            load_config(str(path))


@pytest.fixture
def root_logger():
    """Root logger with its handlers and level restored after the test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_text_format(self, root_logger):
        setup_logging(Settings())

        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].formatter._fmt == TEXT_LOG_FORMAT

    def test_json_format(self, root_logger):
        setup_logging(Settings(logging=LoggingConfig(level="debug", format="json")))

        assert root_logger.level == logging.DEBUG
        assert root_logger.handlers[0].formatter._fmt == JSON_LOG_FORMAT

    def test_unknown_level_falls_back_to_info(self, root_logger):
        setup_logging(Settings(logging=LoggingConfig(level="chatty")))
        assert root_logger.level == logging.INFO

    def test_second_call_replaces_handler(self, root_logger):
        setup_logging(Settings())
        setup_logging(Settings(logging=LoggingConfig(level="WARNING", format="json")))

        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].formatter._fmt == JSON_LOG_FORMAT

    def test_env_format_reaches_handler(self, root_logger, monkeypatch, tmp_path):
        monkeypatch.setenv("CHRONOSCROLL_LOG_FORMAT", "json")
        monkeypatch.setenv("CHRONOSCROLL_LOG_LEVEL", "ERROR")

        setup_logging(load_config(str(tmp_path / "absent.yaml")))

        assert root_logger.level == logging.ERROR
        assert root_logger.handlers[0].formatter._fmt == JSON_LOG_FORMAT


class TestLoadConfigLogging:
    """load_config reports where its values came from."""

    def test_logs_file_path(self, tmp_path, caplog):
        path = tmp_path / "config.yaml"
        path.write_text("mapping:\n  margin_start: 0.05\n")
        with caplog.at_level(logging.INFO, logger="chronoscroll.config"):
            load_config(str(path))
        assert any(str(path) in r.getMessage() for r in caplog.records)

    def test_missing_file_warns(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="chronoscroll.config"):
            load_config(str(tmp_path / "absent.yaml"))
        assert [r.levelno for r in caplog.records] == [logging.WARNING]
