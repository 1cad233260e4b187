"""
Game Catalog.

Record model, category vocabulary and the read-only catalog store.
"""

from game_center.catalog.models import (
    ALL,
    CATEGORIES,
    Category,
    CategoryFilter,
    Difficulty,
    GameRecord,
    category_key,
    category_label,
    parse_category,
)
from game_center.catalog.sample import SAMPLE_GAMES
from game_center.catalog.store import CatalogStore

__all__ = [
    "ALL",
    "CATEGORIES",
    "SAMPLE_GAMES",
    "CatalogStore",
    "Category",
    "CategoryFilter",
    "Difficulty",
    "GameRecord",
    "category_key",
    "category_label",
    "parse_category",
]
