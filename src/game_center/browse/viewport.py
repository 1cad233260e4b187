"""
Viewport classification for the detail view.

Maps the host's viewport width to a layout mode, and the mode to how
the active game is presented: a centered modal on desktop, a bottom
sheet on mobile. Classification never touches selection state.
"""

from collections.abc import Callable
from enum import Enum

from game_center.logger import get_logger

DESKTOP_BREAKPOINT_PX = 1024


class ViewportMode(str, Enum):
    """Layout mode derived from viewport width."""

    DESKTOP = "desktop"
    MOBILE = "mobile"


class DetailPresentation(str, Enum):
    """How the detail view for the active game is rendered."""

    MODAL = "modal"
    SHEET = "sheet"


def classify(width_px: int, breakpoint_px: int = DESKTOP_BREAKPOINT_PX) -> ViewportMode:
    """
    Classify a viewport width.

    Args:
        width_px: Current viewport width in pixels
        breakpoint_px: First width treated as desktop

    Returns:
        DESKTOP if width_px >= breakpoint_px, else MOBILE

    Raises:
        ValueError: If width_px is negative
    """
    if width_px < 0:
        raise ValueError(f"Viewport width must be >= 0, got {width_px}")
    return ViewportMode.DESKTOP if width_px >= breakpoint_px else ViewportMode.MOBILE


def presentation_for(mode: ViewportMode) -> DetailPresentation:
    """Detail view style for a viewport mode."""
    return DetailPresentation.MODAL if mode == ViewportMode.DESKTOP else DetailPresentation.SHEET


ModeListener = Callable[[ViewportMode], None]


class ViewportClassifier:
    """
    Tracks the current viewport mode across resize notifications.

    The host calls ``resize`` on mount and on every size change; the mode
    is recomputed each time. Listeners registered with ``subscribe`` are
    called only when the mode actually flips.
    """

    def __init__(
        self,
        width_px: int = 0,
        *,
        breakpoint_px: int = DESKTOP_BREAKPOINT_PX,
    ) -> None:
        self._breakpoint_px = breakpoint_px
        self._width_px = width_px
        self._mode = classify(width_px, breakpoint_px)
        self._listeners: list[ModeListener] = []
        self._logger = get_logger(__name__, component="viewport")

    @property
    def width_px(self) -> int:
        return self._width_px

    @property
    def mode(self) -> ViewportMode:
        return self._mode

    @property
    def presentation(self) -> DetailPresentation:
        return presentation_for(self._mode)

    def resize(self, width_px: int) -> ViewportMode:
        """
        Handle a viewport size change.

        The new width and mode are stored before listeners run. Listeners
        are called in registration order; an exception from one propagates
        to the caller and the listeners after it are not called for this
        change.

        Returns:
            The mode for the new width
        """
        mode = classify(width_px, self._breakpoint_px)
        self._width_px = width_px

        if mode != self._mode:
            self._mode = mode
            self._logger.debug("Viewport mode changed", mode=mode.value, width_px=width_px)
            for listener in list(self._listeners):
                listener(mode)

        return mode

    def subscribe(self, listener: ModeListener) -> Callable[[], None]:
        """
        Register a mode-change listener.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
