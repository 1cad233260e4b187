"""
Persisted light/dark theme preference.

Lives outside the browsing engine: nothing in ``game_center.browse``
reads it. The preference is loaded explicitly and written through to
disk on every change.
"""

import json
from pathlib import Path
from typing import Literal, cast

from game_center.config import ThemeConfig, get_settings
from game_center.exceptions import ThemeSaveError
from game_center.logger import get_logger

Theme = Literal["dark", "light"]
THEMES: tuple[Theme, ...] = ("dark", "light")


class ThemeStore:
    """
    Reads and writes the theme preference file.

    Example:
        >>> store = ThemeStore()
        >>> store.load()
        'dark'
        >>> store.toggle()
        'light'
    """

    def __init__(self, config: ThemeConfig | None = None) -> None:
        self._config = config or get_settings().theme
        self._theme: Theme = self._config.default
        self._logger = get_logger(__name__, component="theme")

    @property
    def path(self) -> Path:
        return self._config.preference_file

    @property
    def theme(self) -> Theme:
        return self._theme

    def load(self) -> Theme:
        """
        Read the persisted theme, falling back to the configured default.

        A missing, unreadable or invalid file is not an error.
        """
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            self._theme = self._config.default
            return self._theme
        except (OSError, ValueError) as e:
            self._logger.warning("Unreadable theme file", path=str(self.path), error=str(e))
            self._theme = self._config.default
            return self._theme

        stored = data.get("theme") if isinstance(data, dict) else None
        if stored in THEMES:
            self._theme = cast(Theme, stored)
        else:
            self._logger.warning("Ignoring invalid stored theme", value=stored)
            self._theme = self._config.default

        return self._theme

    def set(self, theme: str) -> Theme:
        """
        Change the theme and persist it.

        The in-memory theme only changes once the file has been written.

        Raises:
            ValueError: If theme is not "dark" or "light"
            ThemeSaveError: If the preference file cannot be written
        """
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme!r} (expected one of {', '.join(THEMES)})")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"theme": theme}), encoding="utf-8")
        except OSError as e:
            raise ThemeSaveError(
                f"Cannot save theme to {self.path}: {e}", value=str(self.path)
            ) from e

        self._theme = cast(Theme, theme)

        self._logger.info("Theme saved", theme=self._theme, path=str(self.path))
        return self._theme

    def toggle(self) -> Theme:
        """Switch between dark and light."""
        return self.set("light" if self._theme == "dark" else "dark")
