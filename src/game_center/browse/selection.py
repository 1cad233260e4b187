"""
Selection controller for the detail view.

Tracks the single game currently opened for detail viewing. All
transitions are synchronous and driven by user events.
"""

from dataclasses import dataclass

from game_center.catalog.models import GameRecord
from game_center.catalog.store import CatalogStore
from game_center.logger import get_logger


@dataclass(frozen=True)
class Selection:
    """Snapshot of the selection state."""

    active_item: GameRecord | None = None

    @property
    def is_open(self) -> bool:
        return self.active_item is not None


class SelectionController:
    """
    Closed / Open(item) state machine.

    ``open`` is allowed from either state and switches directly between
    items. ``close`` is idempotent. The open item always belongs to the
    catalog snapshot the controller was last synced with.

    Example:
        >>> controller = SelectionController(CatalogStore.sample())
        >>> controller.open(controller.catalog.get("g2"))
        >>> controller.close()
        >>> controller.is_open
        False
    """

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog
        self._active: GameRecord | None = None
        self._logger = get_logger(__name__, component="selection")

    @property
    def catalog(self) -> CatalogStore:
        return self._catalog

    @property
    def active_item(self) -> GameRecord | None:
        return self._active

    @property
    def is_open(self) -> bool:
        return self._active is not None

    @property
    def state(self) -> Selection:
        return Selection(active_item=self._active)

    def open(self, item: GameRecord) -> None:
        """
        Open ``item`` for detail viewing, replacing any open item.

        Raises:
            KeyError: If the item is not part of the current catalog
        """
        if item not in self._catalog:
            raise KeyError(f"Game {item.id!r} is not in the current catalog")

        previous = self._active
        self._active = item
        self._logger.debug(
            "Opened item",
            item_id=item.id,
            previous_id=previous.id if previous else None,
        )

    def close(self) -> None:
        """Close the detail view. No-op when nothing is open."""
        if self._active is None:
            return
        self._logger.debug("Closed item", item_id=self._active.id)
        self._active = None

    def sync_catalog(self, catalog: CatalogStore) -> Selection:
        """
        Switch to a new catalog snapshot.

        An open item whose id is still present is re-pointed at the new
        snapshot's record; otherwise the selection closes.

        Returns:
            The selection state after syncing
        """
        self._catalog = catalog

        if self._active is not None:
            replacement = catalog.get(self._active.id)
            if replacement is None:
                self._logger.warning(
                    "Closing stale selection",
                    item_id=self._active.id,
                    catalog_size=len(catalog),
                )
                self._active = None
            else:
                self._active = replacement

        return self.state
