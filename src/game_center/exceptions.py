"""
Exception hierarchy for the catalog browser.

Every error here is raised at an input boundary (parsing a category,
a rail tab or a catalog file). The engine itself is total over
validated input and never raises.
"""


class GameCenterError(Exception):
    """Base exception for catalog browser errors."""

    def __init__(self, message: str, *, value: object | None = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidCategoryError(GameCenterError, ValueError):
    """Raised when a category filter is not a known category."""

    pass


class InvalidRailKindError(GameCenterError, ValueError):
    """Raised when a rail tab name is not a known rail."""

    pass


class CatalogLoadError(GameCenterError):
    """Raised when catalog records cannot be read or validated."""

    pass


class ThemeSaveError(GameCenterError):
    """Raised when the theme preference cannot be persisted."""

    pass
