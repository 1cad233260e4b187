"""
Command-line interface for the Game Center catalog browser.

Renders catalog views as JSON so the engine can be driven and inspected
without a presentation layer.
"""

import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from game_center.browse.session import CatalogSession
from game_center.catalog.models import CATEGORIES
from game_center.catalog.store import CatalogStore
from game_center.config import get_settings
from game_center.exceptions import GameCenterError
from game_center.logger import get_logger, setup_logging
from game_center.theme import ThemeStore

# Initialize logging
setup_logging()
logger = get_logger(__name__, component="cli")


class CLIOutput(BaseModel):
    """Structured output for CLI commands."""

    success: bool
    command: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: dict[str, Any] | list[Any] | None = None
    error: str | None = None


def print_json(output: CLIOutput) -> None:
    """Print output as formatted JSON."""
    print(json.dumps(output.model_dump(mode="json"), indent=2, default=str))


BROWSE_OPTIONS = ("--query", "--category", "--tab", "--width", "--open", "--catalog")


def parse_options(args: list[str], allowed: tuple[str, ...]) -> dict[str, str]:
    """
    Parse ``--flag value`` pairs.

    Raises:
        GameCenterError: On an unknown flag, a missing value, or a value
            that is itself a flag
    """
    options: dict[str, str] = {}
    idx = 0
    while idx < len(args):
        name = args[idx]
        if name not in allowed:
            raise GameCenterError(f"Unknown option: {name}", value=name)
        if idx + 1 >= len(args) or args[idx + 1].startswith("--"):
            raise GameCenterError(f"{name} requires a value", value=name)
        options[name] = args[idx + 1]
        idx += 2
    return options


def _load_catalog(path: str | None) -> CatalogStore:
    return CatalogStore.from_json_file(Path(path)) if path else CatalogStore.sample()


def cmd_browse(args: list[str]) -> None:
    """Apply the given inputs to a fresh session and print the view."""
    options = parse_options(args, BROWSE_OPTIONS)
    catalog = _load_catalog(options.get("--catalog"))

    width = options.get("--width")
    session = CatalogSession(catalog, width_px=int(width) if width else 0)

    query = options.get("--query")
    if query is not None:
        session.on_query_change(query)

    category = options.get("--category")
    if category is not None:
        session.on_category_change(category)

    tab = options.get("--tab")
    if tab is not None:
        session.on_rail_tab_change(tab)

    open_id = options.get("--open")
    if open_id is not None:
        item = catalog.get(open_id)
        if item is None:
            raise GameCenterError(f"No game with id {open_id!r}", value=open_id)
        session.on_item_open(item)

    view = session.render()
    logger.info("Rendered catalog view", results=len(view.results), tab=view.tab.value)

    print_json(CLIOutput(success=True, command="browse", data=view.model_dump(mode="json")))


def cmd_stats(args: list[str]) -> None:
    """Print per-category counts and total plays for a catalog."""
    options = parse_options(args, ("--catalog",))
    catalog = _load_catalog(options.get("--catalog"))

    print_json(CLIOutput(success=True, command="stats", data=catalog.get_catalog_stats()))


def cmd_categories() -> None:
    """List category keys and labels."""
    print_json(
        CLIOutput(
            success=True,
            command="categories",
            data=[{"key": key, "label": label} for key, label in CATEGORIES],
        )
    )


def cmd_theme(action: str | None) -> None:
    """Show, set or toggle the persisted theme."""
    store = ThemeStore()
    store.load()

    if action == "toggle":
        store.toggle()
    elif action is not None:
        store.set(action)

    print_json(
        CLIOutput(
            success=True,
            command="theme",
            data={"theme": store.theme, "preference_file": str(store.path)},
        )
    )


def cmd_test_config() -> None:
    """Test configuration loading."""
    settings = get_settings()

    print_json(
        CLIOutput(
            success=True,
            command="test-config",
            data={
                "environment": settings.environment,
                "rail_limit": settings.browse.rail_limit,
                "desktop_breakpoint_px": settings.browse.desktop_breakpoint_px,
                "default_tab": settings.browse.default_tab,
                "default_category": settings.browse.default_category,
                "theme_default": settings.theme.default,
                "log_level": settings.logging.level,
            },
        )
    )


def print_usage() -> None:
    """Print CLI usage information."""
    usage = """
Game Center CLI
===============

Usage: game-center <command> [arguments]

Commands:
  browse                      Render the catalog view as JSON
  categories                  List category keys and labels
  stats                       Catalog size, games per category, total plays
  theme [dark|light|toggle]   Show or change the saved theme
  test-config                 Test configuration loading

Browse options:
  --query <text>              Title search
  --category <key>            all, arcade, puzzle, strategy, racing, sports, retro
  --tab <rail>                featured, trending or new
  --width <px>                Viewport width (desktop from 1024)
  --open <id>                 Open a game in the detail view
  --catalog <file>            JSON catalog instead of the built-in one

Examples:
  game-center browse --query neon
  game-center browse --tab trending --open g3 --width 1280
"""
    print(usage)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print_usage()
        sys.exit(1)

    command = args[0]

    try:
        if command == "browse":
            cmd_browse(args[1:])

        elif command == "stats":
            cmd_stats(args[1:])

        elif command == "categories":
            cmd_categories()

        elif command == "theme":
            cmd_theme(args[1] if len(args) > 1 else None)

        elif command == "test-config":
            cmd_test_config()

        elif command in ("help", "--help", "-h"):
            print_usage()

        else:
            print(f"Unknown command: {command}")
            print_usage()
            sys.exit(1)

    except (GameCenterError, ValueError) as e:
        logger.error("CLI error", command=command, error=str(e))
        print_json(CLIOutput(success=False, command=command, error=str(e)))
        sys.exit(1)


if __name__ == "__main__":
    main()
