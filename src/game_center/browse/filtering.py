"""
Catalog filtering by title search and category.
"""

from collections.abc import Iterable

from game_center.catalog.models import ALL, CategoryFilter, GameRecord


def normalize_query(query: str) -> str:
    """Trim and lowercase a search query; whitespace-only becomes empty."""
    return query.strip().lower()


def matches(record: GameRecord, query: str, category: CategoryFilter) -> bool:
    """
    Check whether a record passes the filter.

    Args:
        record: Game record to test
        query: Query already passed through normalize_query()
        category: Validated category filter

    Returns:
        True if the record belongs in the filtered list
    """
    if category != ALL and record.category != category:
        return False
    return not query or query in record.title.lower()


def filter_games(
    catalog: Iterable[GameRecord],
    query: str,
    category: CategoryFilter,
) -> list[GameRecord]:
    """
    Filter the catalog by title substring and category.

    The result keeps catalog order and returns the same record objects,
    not copies. Matching is case-insensitive against the title only.

    Args:
        catalog: Ordered game records
        query: Free-text search (trimmed before matching)
        category: ALL or a Category, validated by parse_category()

    Returns:
        Records that pass both conditions, in catalog order
    """
    q = normalize_query(query)
    return [record for record in catalog if matches(record, q, category)]


def result_count_label(count: int) -> str:
    """Label for the results header ("1 result", "6 results")."""
    return f"{count} result" if count == 1 else f"{count} results"
