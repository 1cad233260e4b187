"""
Game Center Catalog Browser.

Filtering, ranking and responsive-presentation engine for a
client-side game catalog.
"""

from game_center.config import Settings, get_settings
from game_center.logger import get_logger, setup_logging

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "get_logger",
    "setup_logging",
    "__version__",
]
