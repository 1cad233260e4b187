"""
Catalog browsing engine.

Filtering, rail ranking, selection and viewport classification, plus
the session façade that ties them to user events.
"""

from game_center.browse.filtering import filter_games, result_count_label
from game_center.browse.rails import (
    DEFAULT_RAIL_LIMIT,
    RailKind,
    parse_rail_kind,
    select_all_rails,
    select_rail,
)
from game_center.browse.selection import Selection, SelectionController
from game_center.browse.session import CatalogSession, CatalogView, DetailView
from game_center.browse.viewport import (
    DetailPresentation,
    ViewportClassifier,
    ViewportMode,
    classify,
    presentation_for,
)

__all__ = [
    "DEFAULT_RAIL_LIMIT",
    "CatalogSession",
    "CatalogView",
    "DetailPresentation",
    "DetailView",
    "RailKind",
    "Selection",
    "SelectionController",
    "ViewportClassifier",
    "ViewportMode",
    "classify",
    "filter_games",
    "parse_rail_kind",
    "presentation_for",
    "result_count_label",
    "select_all_rails",
    "select_rail",
]
