"""
Unit tests for configuration and structlog setup.

Settings are loaded from TWOTRACK_* environment variables; the conftest
fixture clears the cache around every test.
"""

from __future__ import annotations

import logging

import pytest
import structlog
from pydantic import ValidationError

from twotrack import configure_structlog, get_settings
from twotrack.config import BoundarySettings, FormatterSettings, boundary_settings, formatter_settings


class TestSettings:
    """Verify TwotrackSettings defaults, overrides and validation."""

    def test_defaults(self) -> None:
        """
        GIVEN no TWOTRACK_* variables
        WHEN settings are loaded
        THEN documented defaults apply.
        """
        settings = get_settings()
        assert settings.log_level == "INFO"
        assert settings.formatter.indent == 2
        assert settings.formatter.sort_keys is False
        assert settings.boundary.log_captured is True

    def test_nested_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWOTRACK_FORMATTER__INDENT", "4")
        monkeypatch.setenv("TWOTRACK_BOUNDARY__LOG_CAPTURED", "false")
        settings = get_settings()
        assert settings.formatter.indent == 4
        assert settings.boundary.log_captured is False

    def test_log_level_is_normalised(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWOTRACK_LOG_LEVEL", " debug ")
        assert get_settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWOTRACK_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError, match="log_level must be one of"):
            get_settings()

    def test_indent_out_of_range_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWOTRACK_FORMATTER__INDENT", "20")
        with pytest.raises(ValidationError):
            get_settings()

    def test_settings_are_cached(self) -> None:
        assert get_settings() is get_settings()


class TestSettingsFallback:
    """Verify the section accessors used by the formatter and boundary adapters."""

    def test_sections_follow_valid_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWOTRACK_FORMATTER__SORT_KEYS", "true")
        monkeypatch.setenv("TWOTRACK_BOUNDARY__LOG_CAPTURED", "false")
        assert formatter_settings().sort_keys is True
        assert boundary_settings().log_captured is False

    def test_invalid_environment_yields_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN an invalid TWOTRACK_LOG_LEVEL
        WHEN the formatter and boundary sections are requested
        THEN their defaults are returned instead of a ValidationError.
        """
        monkeypatch.setenv("TWOTRACK_LOG_LEVEL", "verbose")
        assert formatter_settings() == FormatterSettings()
        assert boundary_settings() == BoundarySettings()


class TestConfigureStructlog:
    """Verify structlog configuration function."""

    def test_sets_requested_level(self) -> None:
        """
        GIVEN log_level="WARNING"
        WHEN configure_structlog is called
        THEN the bound logger filters below WARNING.
        """
        configure_structlog("WARNING")
        assert structlog.is_configured()
        assert structlog.get_config()["wrapper_class"] is structlog.make_filtering_bound_logger(
            logging.WARNING
        )

    def test_level_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWOTRACK_LOG_LEVEL", "ERROR")
        configure_structlog()
        assert structlog.get_config()["wrapper_class"] is structlog.make_filtering_bound_logger(
            logging.ERROR
        )

    def test_invalid_level_falls_back_to_info(self) -> None:
        configure_structlog("NONEXISTENT")
        assert structlog.get_config()["wrapper_class"] is structlog.make_filtering_bound_logger(
            logging.INFO
        )
