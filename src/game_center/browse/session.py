"""
Catalog browsing session.

Owns the user-controlled state of one browser (search text, category,
rail tab, open game, viewport) and renders it into an immutable
CatalogView for the presentation layer. Every event handler applies a
single state transition; the latest event for a control always wins.
"""

from pydantic import BaseModel, ConfigDict, Field

from game_center.browse.filtering import filter_games, result_count_label
from game_center.browse.rails import RailKind, parse_rail_kind, select_rail
from game_center.browse.selection import SelectionController
from game_center.browse.viewport import (
    DetailPresentation,
    ViewportClassifier,
    ViewportMode,
)
from game_center.catalog.models import (
    CategoryFilter,
    GameRecord,
    category_key,
    category_label,
    parse_category,
)
from game_center.catalog.store import CatalogStore
from game_center.config import BrowseConfig, get_settings
from game_center.logger import get_logger

PLACEHOLDER_STATUS = (
    "Coming soon - this is a placeholder. Hook your game canvas or route here."
)


def format_plays(plays: int) -> str:
    """Thousands-separated play count ("12,840 plays")."""
    return f"{plays:,} plays"


class DetailView(BaseModel):
    """Rendered detail view for the active game."""

    model_config = ConfigDict(frozen=True)

    game: GameRecord
    presentation: DetailPresentation
    category_label: str
    plays_label: str
    status: str = Field(default=PLACEHOLDER_STATUS)


class CatalogView(BaseModel):
    """
    Everything the presentation layer needs for one render.

    ``rail`` holds the records for the active tab only; other tabs are
    computed when they become active.
    """

    model_config = ConfigDict(frozen=True)

    query: str
    category: CategoryFilter
    tab: RailKind
    viewport: ViewportMode
    results: list[GameRecord]
    result_count_label: str
    rail: list[GameRecord]
    detail: DetailView | None = None


class CatalogSession:
    """
    Event-driven façade over the filtering, rail, selection and
    viewport components.

    Example:
        >>> session = CatalogSession(CatalogStore.sample())
        >>> session.on_query_change("neon")
        >>> [g.id for g in session.render().results]
        ['g1']
    """

    def __init__(
        self,
        catalog: CatalogStore,
        *,
        config: BrowseConfig | None = None,
        width_px: int = 0,
    ) -> None:
        self._config = config or get_settings().browse
        self._catalog = catalog
        self._query = ""
        self._category: CategoryFilter = parse_category(self._config.default_category)
        self._tab = parse_rail_kind(self._config.default_tab)
        self._selection = SelectionController(catalog)
        self._viewport = ViewportClassifier(
            width_px, breakpoint_px=self._config.desktop_breakpoint_px
        )
        self._logger = get_logger(__name__, component="session")

    @property
    def catalog(self) -> CatalogStore:
        return self._catalog

    @property
    def selection(self) -> SelectionController:
        return self._selection

    @property
    def viewport(self) -> ViewportClassifier:
        return self._viewport

    @property
    def query(self) -> str:
        return self._query

    @property
    def category(self) -> CategoryFilter:
        return self._category

    @property
    def tab(self) -> RailKind:
        return self._tab

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------

    def on_query_change(self, text: str) -> None:
        self._query = text

    def on_category_change(self, category: str) -> None:
        """
        Raises:
            InvalidCategoryError: If category is unknown; state is unchanged
        """
        self._category = parse_category(category)
        self._logger.debug("Category changed", category=category_key(self._category))

    def on_rail_tab_change(self, kind: str | RailKind) -> None:
        """
        Raises:
            InvalidRailKindError: If the tab is unknown; state is unchanged
        """
        self._tab = parse_rail_kind(kind)

    def on_item_open(self, item: GameRecord) -> None:
        self._selection.open(item)

    def on_item_close(self) -> None:
        self._selection.close()

    def on_viewport_resize(self, width_px: int) -> ViewportMode:
        return self._viewport.resize(width_px)

    def replace_catalog(self, catalog: CatalogStore) -> None:
        """Swap in a new catalog snapshot, closing a selection it no longer holds."""
        self._catalog = catalog
        self._selection.sync_catalog(catalog)
        self._logger.info("Catalog replaced", total=len(catalog))

    # ------------------------------------------------------------------
    # Derived output
    # ------------------------------------------------------------------

    def filtered(self) -> list[GameRecord]:
        return filter_games(self._catalog, self._query, self._category)

    def rail(self, kind: RailKind | None = None) -> list[GameRecord]:
        """Records for ``kind`` (defaults to the active tab)."""
        return select_rail(self.filtered(), kind or self._tab, self._config.rail_limit)

    def detail(self) -> DetailView | None:
        item = self._selection.active_item
        if item is None:
            return None
        return DetailView(
            game=item,
            presentation=self._viewport.presentation,
            category_label=category_label(item.category),
            plays_label=format_plays(item.plays),
        )

    def render(self) -> CatalogView:
        """Build the view for the current state."""
        results = self.filtered()
        view = CatalogView(
            query=self._query,
            category=self._category,
            tab=self._tab,
            viewport=self._viewport.mode,
            results=results,
            result_count_label=result_count_label(len(results)),
            rail=select_rail(results, self._tab, self._config.rail_limit),
            detail=self.detail(),
        )

        self._logger.debug(
            "Rendered view",
            result_count=len(results),
            tab=self._tab.value,
            mode=view.viewport.value,
            active_id=view.detail.game.id if view.detail else None,
        )
        return view
