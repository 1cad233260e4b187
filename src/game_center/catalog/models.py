"""
Game record model and category vocabulary.

Records are frozen Pydantic models: validated once when the catalog is
loaded and never mutated afterwards.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from game_center.exceptions import InvalidCategoryError


class Category(str, Enum):
    """Game categories known to the catalog."""

    ARCADE = "arcade"
    PUZZLE = "puzzle"
    STRATEGY = "strategy"
    RACING = "racing"
    SPORTS = "sports"
    RETRO = "retro"


class Difficulty(str, Enum):
    """Difficulty rating shown on a game card."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


ALL = "all"

# Either ALL or a Category; produced by parse_category()
CategoryFilter = Category | Literal["all"]


class GameRecord(BaseModel):
    """A single game in the catalog."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1, description="Unique record identifier")
    title: str = Field(..., description="Display title, the only searchable field")
    category: Category
    rating: float = Field(..., ge=0, le=5, description="Average rating out of 5")
    plays: int = Field(..., ge=0, description="Total number of plays")
    difficulty: Difficulty
    badges: tuple[str, ...] = Field(
        default_factory=tuple, description="Display tags, no effect on ranking"
    )
    description: str = Field(default="")


def parse_category(value: str | Category) -> CategoryFilter:
    """
    Validate a category filter coming from user input.

    Args:
        value: "all" or a category key (case-insensitive, surrounding
            whitespace ignored)

    Returns:
        ALL or the matching Category

    Raises:
        InvalidCategoryError: If the value is not a known category
    """
    if isinstance(value, Category):
        return value

    key = str(value).strip().lower()
    if key == ALL:
        return ALL
    try:
        return Category(key)
    except ValueError:
        raise InvalidCategoryError(f"Unknown category: {value!r}", value=value) from None


def category_key(value: CategoryFilter) -> str:
    """Plain string key for a category filter ("all", "retro", ...)."""
    return value.value if isinstance(value, Category) else value


def category_label(key: str | Category) -> str:
    """Human-readable label for a category key ("retro" -> "Retro")."""
    key = category_key(key)
    return key[:1].upper() + key[1:]


# Category strip, in display order
CATEGORIES: list[tuple[str, str]] = [(ALL, "All")] + [
    (c.value, category_label(c)) for c in Category
]
