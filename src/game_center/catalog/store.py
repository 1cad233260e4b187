"""
Catalog store.

Holds the ordered, read-only snapshot of game records a browsing
session filters and ranks.
"""

import json
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

import structlog
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from game_center.catalog.models import Category, GameRecord
from game_center.catalog.sample import SAMPLE_GAMES
from game_center.exceptions import CatalogLoadError

logger = structlog.get_logger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[GameRecord])


class CatalogStore:
    """
    Immutable, ordered collection of game records.

    Record order is significant (it drives the featured and new rails),
    so the store keeps the order it was given. Replacing the catalog
    produces a new store; existing snapshots never change.
    """

    def __init__(self, records: Iterable[GameRecord] = ()) -> None:
        self._records: tuple[GameRecord, ...] = tuple(records)
        self._by_id: dict[str, GameRecord] = {}

        for record in self._records:
            if record.id in self._by_id:
                raise CatalogLoadError(f"Duplicate game id: {record.id}", value=record.id)
            self._by_id[record.id] = record

    @classmethod
    def from_records(cls, raw_records: Iterable[Mapping[str, Any]]) -> "CatalogStore":
        """
        Validate raw records (e.g. parsed JSON) into a store.

        Raises:
            CatalogLoadError: If any record fails validation or ids repeat
        """
        try:
            records = _RECORDS_ADAPTER.validate_python(list(raw_records))
        except PydanticValidationError as e:
            raise CatalogLoadError(f"Invalid catalog records: {e}") from e

        store = cls(records)
        logger.debug("Catalog loaded", total=len(store))
        return store

    @classmethod
    def from_json_file(cls, path: Path) -> "CatalogStore":
        """Load a catalog from a JSON file holding a list of records."""
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CatalogLoadError(f"Cannot read catalog file {path}: {e}", value=str(path)) from e

        if not isinstance(raw, list):
            raise CatalogLoadError(f"Catalog file {path} must contain a list of records")

        return cls.from_records(raw)

    @classmethod
    def sample(cls) -> "CatalogStore":
        """The built-in six-game catalog."""
        return cls.from_records(SAMPLE_GAMES)

    @property
    def records(self) -> tuple[GameRecord, ...]:
        return self._records

    def get(self, game_id: str) -> GameRecord | None:
        """Look up a record by id."""
        return self._by_id.get(game_id)

    def replace(self, records: Iterable[GameRecord]) -> "CatalogStore":
        """Return a new store holding ``records``; this one is left untouched."""
        return CatalogStore(records)

    def __contains__(self, record: object) -> bool:
        if not isinstance(record, GameRecord):
            return False
        return self._by_id.get(record.id) is record

    def __iter__(self) -> Iterator[GameRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def get_catalog_stats(self) -> dict:
        """
        Get statistics about the catalog.

        Returns:
            Dict with total count, counts per category and total plays
        """
        stats = {
            "total": len(self._records),
            "by_category": {c.value: 0 for c in Category},
            "total_plays": 0,
        }

        for record in self._records:
            stats["by_category"][record.category.value] += 1
            stats["total_plays"] += record.plays

        return stats
