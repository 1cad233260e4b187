"""
Ranked presentation rails.

A rail is a bounded, ordered slice of the filtered catalog shown under
one of the featured / trending / new tabs. Rails never filter; they only
choose and order.
"""

from collections.abc import Sequence
from enum import Enum

from game_center.catalog.models import GameRecord
from game_center.exceptions import InvalidRailKindError

DEFAULT_RAIL_LIMIT = 4


class RailKind(str, Enum):
    """Rail tabs and their ordering policy."""

    FEATURED = "featured"  # First N in catalog order
    TRENDING = "trending"  # Most played first
    NEW = "new"  # Reverse catalog order (recency proxy)


def parse_rail_kind(value: str | RailKind) -> RailKind:
    """
    Validate a rail tab name coming from user input.

    Raises:
        InvalidRailKindError: If the name is not a known rail
    """
    if isinstance(value, RailKind):
        return value
    try:
        return RailKind(str(value).strip().lower())
    except ValueError:
        raise InvalidRailKindError(f"Unknown rail: {value!r}", value=value) from None


def select_rail(
    filtered: Sequence[GameRecord],
    kind: RailKind,
    limit: int = DEFAULT_RAIL_LIMIT,
) -> list[GameRecord]:
    """
    Pick the records shown in a rail.

    - FEATURED: the first ``limit`` records in filtered order.
    - TRENDING: records by plays, highest first. The sort is stable, so
      equal play counts keep their filtered order.
    - NEW: the filtered list reversed. There is no release timestamp on
      GameRecord, so later catalog position stands in for recency.

    Args:
        filtered: Output of filter_games(); never modified
        kind: Rail to compute
        limit: Maximum number of records to return

    Returns:
        At most ``limit`` records; all of them if fewer are available

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"Rail limit must be >= 0, got {limit}")

    if kind == RailKind.FEATURED:
        ordered = list(filtered)
    elif kind == RailKind.TRENDING:
        ordered = sorted(filtered, key=lambda record: record.plays, reverse=True)
    elif kind == RailKind.NEW:
        ordered = list(reversed(filtered))
    else:
        raise InvalidRailKindError(f"Unknown rail: {kind!r}", value=kind)

    return ordered[:limit]


def select_all_rails(
    filtered: Sequence[GameRecord],
    limit: int = DEFAULT_RAIL_LIMIT,
) -> dict[RailKind, list[GameRecord]]:
    """Compute every rail for the same filtered list."""
    return {kind: select_rail(filtered, kind, limit) for kind in RailKind}
