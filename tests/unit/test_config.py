"""Tests for configuration module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from game_center.config import (
    BrowseConfig,
    LoggingConfig,
    Settings,
    ThemeConfig,
    get_settings,
)


class TestBrowseConfig:
    """Tests for browsing configuration."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = BrowseConfig()

        assert config.rail_limit == 4
        assert config.desktop_breakpoint_px == 1024
        assert config.default_tab == "featured"
        assert config.default_category == "all"

    def test_env_override(self) -> None:
        with patch.dict(
            os.environ,
            {"BROWSE_RAIL_LIMIT": "6", "BROWSE_DESKTOP_BREAKPOINT_PX": "900"},
        ):
            config = BrowseConfig()

        assert config.rail_limit == 6
        assert config.desktop_breakpoint_px == 900

    def test_rail_limit_bounds(self) -> None:
        """Test rail_limit validation bounds."""
        with patch.dict(os.environ, {"BROWSE_RAIL_LIMIT": "-1"}), pytest.raises(ValueError):
            BrowseConfig()

    def test_default_category_normalized(self) -> None:
        with patch.dict(os.environ, {"BROWSE_DEFAULT_CATEGORY": " Retro "}):
            config = BrowseConfig()

        assert config.default_category == "retro"

    def test_unknown_default_category(self) -> None:
        """Test that an unknown default category is rejected."""
        with (
            patch.dict(os.environ, {"BROWSE_DEFAULT_CATEGORY": "shooter"}),
            pytest.raises(ValueError, match="Unknown category"),
        ):
            BrowseConfig()

    def test_unknown_default_tab(self) -> None:
        with patch.dict(os.environ, {"BROWSE_DEFAULT_TAB": "popular"}), pytest.raises(ValueError):
            BrowseConfig()


class TestThemeConfig:
    """Tests for theme configuration."""

    def test_default_values(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = ThemeConfig()

        assert config.default == "dark"
        assert config.preference_file.name == "theme.json"

    def test_env_override(self, tmp_path) -> None:
        path = tmp_path / "t.json"
        with patch.dict(
            os.environ, {"THEME_DEFAULT": "light", "THEME_PREFERENCE_FILE": str(path)}
        ):
            config = ThemeConfig()

        assert config.default == "light"
        assert config.preference_file == Path(path)

    def test_invalid_theme(self) -> None:
        with patch.dict(os.environ, {"THEME_DEFAULT": "sepia"}), pytest.raises(ValueError):
            ThemeConfig()


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_valid_levels(self) -> None:
        """Test valid log levels."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            with patch.dict(os.environ, {"LOG_LEVEL": level}):
                config = LoggingConfig()
                assert config.level == level

    def test_valid_formats(self) -> None:
        """Test valid log formats."""
        for fmt in ["json", "console"]:
            with patch.dict(os.environ, {"LOG_FORMAT": fmt}):
                config = LoggingConfig()
                assert config.format == fmt

    def test_invalid_format(self) -> None:
        with patch.dict(os.environ, {"LOG_FORMAT": "xml"}), pytest.raises(ValueError):
            LoggingConfig()


class TestSettings:
    """Tests for the aggregated settings."""

    def test_sections_present(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.browse.rail_limit == 4
        assert settings.theme.default == "dark"
        assert settings.logging.level == "INFO"

    def test_get_settings_cached(self) -> None:
        assert get_settings() is get_settings()
