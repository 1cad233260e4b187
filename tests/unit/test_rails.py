"""Tests for rail selection."""

import pytest

from game_center.browse.filtering import filter_games
from game_center.browse.rails import (
    DEFAULT_RAIL_LIMIT,
    RailKind,
    parse_rail_kind,
    select_all_rails,
    select_rail,
)
from game_center.catalog.models import ALL, GameRecord
from game_center.catalog.store import CatalogStore
from game_center.exceptions import InvalidRailKindError


def _ids(records) -> list[str]:
    return [record.id for record in records]


def _game(game_id: str, plays: int) -> GameRecord:
    return GameRecord(
        id=game_id,
        title=f"Game {game_id}",
        category="arcade",
        rating=3.0,
        plays=plays,
        difficulty="Easy",
    )


class TestSelectRail:
    """Tests for select_rail."""

    def test_default_limit(self) -> None:
        assert DEFAULT_RAIL_LIMIT == 4

    def test_featured_takes_first_n(self, catalog: CatalogStore) -> None:
        assert _ids(select_rail(catalog.records, RailKind.FEATURED)) == ["g1", "g2", "g3", "g4"]

    def test_trending_by_plays(self, catalog: CatalogStore) -> None:
        """Test the top four by plays across the sample catalog."""
        rail = select_rail(filter_games(catalog, "", ALL), RailKind.TRENDING, 4)

        assert _ids(rail) == ["g3", "g1", "g6", "g2"]

    def test_trending_ties_keep_filtered_order(self) -> None:
        games = [_game("a", 10), _game("b", 50), _game("c", 10), _game("d", 50)]

        assert _ids(select_rail(games, RailKind.TRENDING, 4)) == ["b", "d", "a", "c"]

    def test_new_reverses_order(self, catalog: CatalogStore) -> None:
        assert _ids(select_rail(catalog.records, RailKind.NEW)) == ["g6", "g5", "g4", "g3"]

    @pytest.mark.parametrize("kind", list(RailKind))
    @pytest.mark.parametrize("limit", [0, 1, 4, 6, 10])
    def test_rail_bound(self, catalog: CatalogStore, kind: RailKind, limit: int) -> None:
        """Test that a rail holds min(len(filtered), limit) records."""
        rail = select_rail(catalog.records, kind, limit)

        assert len(rail) == min(len(catalog), limit)

    @pytest.mark.parametrize("limit", [1, 3, 6])
    def test_trending_is_non_increasing(self, catalog: CatalogStore, limit: int) -> None:
        rail = select_rail(catalog.records, RailKind.TRENDING, limit)

        assert all(a.plays >= b.plays for a, b in zip(rail, rail[1:]))

    @pytest.mark.parametrize("kind", list(RailKind))
    def test_empty_input(self, kind: RailKind) -> None:
        assert select_rail([], kind) == []

    @pytest.mark.parametrize("kind", list(RailKind))
    def test_input_not_mutated(self, catalog: CatalogStore, kind: RailKind) -> None:
        filtered = list(catalog.records)
        select_rail(filtered, kind, 6)

        assert filtered == list(catalog.records)

    def test_returns_same_objects(self, catalog: CatalogStore) -> None:
        rail = select_rail(catalog.records, RailKind.TRENDING, 1)

        assert rail[0] is catalog.get("g3")

    def test_negative_limit_rejected(self, catalog: CatalogStore) -> None:
        with pytest.raises(ValueError, match="Rail limit"):
            select_rail(catalog.records, RailKind.FEATURED, -1)

    def test_select_all_rails(self, catalog: CatalogStore) -> None:
        rails = select_all_rails(catalog.records, 2)

        assert set(rails) == set(RailKind)
        assert _ids(rails[RailKind.FEATURED]) == ["g1", "g2"]
        assert _ids(rails[RailKind.TRENDING]) == ["g3", "g1"]
        assert _ids(rails[RailKind.NEW]) == ["g6", "g5"]


class TestParseRailKind:
    """Tests for rail tab parsing."""

    def test_known_tabs(self) -> None:
        assert parse_rail_kind("featured") is RailKind.FEATURED
        assert parse_rail_kind(" Trending ") is RailKind.TRENDING
        assert parse_rail_kind(RailKind.NEW) is RailKind.NEW

    def test_unknown_tab(self) -> None:
        with pytest.raises(InvalidRailKindError, match="Unknown rail"):
            parse_rail_kind("popular")
