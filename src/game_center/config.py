"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables with validation,
type coercion, and sensible defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BrowseConfig(BaseSettings):
    """Catalog browsing defaults."""

    model_config = SettingsConfigDict(env_prefix="BROWSE_")

    rail_limit: int = Field(
        default=4,
        ge=0,
        description="Maximum number of items shown in a rail",
    )
    desktop_breakpoint_px: int = Field(
        default=1024,
        ge=1,
        description="Viewport width at which the desktop layout starts",
    )
    default_tab: Literal["featured", "trending", "new"] = Field(
        default="featured",
        description="Rail tab selected when a session starts",
    )
    default_category: str = Field(
        default="all",
        description="Category filter selected when a session starts",
    )

    @field_validator("default_category")
    @classmethod
    def validate_category(cls, v: str) -> str:
        """Validate that the default category is a known key."""
        from game_center.catalog.models import category_key, parse_category

        return category_key(parse_category(v))


class ThemeConfig(BaseSettings):
    """Theme preference configuration."""

    model_config = SettingsConfigDict(env_prefix="THEME_")

    default: Literal["dark", "light"] = Field(
        default="dark",
        description="Theme used when no preference has been stored",
    )
    preference_file: Path = Field(
        default=Path.home() / ".game_center" / "theme.json",
        description="File the chosen theme is persisted to",
    )


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    include_timestamp: bool = Field(
        default=True,
        description="Include timestamp in log entries",
    )


class Settings(BaseSettings):
    """
    Main application settings.

    Aggregates all configuration sections and provides
    a single entry point for configuration access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )

    # Sub-configurations
    browse: BrowseConfig = Field(default_factory=BrowseConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once
    and reused across the application.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
