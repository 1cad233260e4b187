"""Shared fixtures for the catalog browser tests."""

import pytest
import structlog

from game_center.catalog.store import CatalogStore
from game_center.config import BrowseConfig, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_events():
    """Capture structlog events emitted during the test."""
    with structlog.testing.capture_logs() as logs:
        yield logs


@pytest.fixture
def catalog() -> CatalogStore:
    """The built-in six-game catalog."""
    return CatalogStore.sample()


@pytest.fixture
def browse_config() -> BrowseConfig:
    return BrowseConfig(
        rail_limit=4,
        desktop_breakpoint_px=1024,
        default_tab="featured",
        default_category="all",
    )
