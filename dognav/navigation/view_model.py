"""Navigation view model for the two-screen app.

Navigation is handled by hand.  The back stack is always ``[Home]`` or
``[Home, destination]``; deeper stacks are not supported.  Create one
instance at the scope responsible for navigation and call it from a single
thread.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .saved_state import MutableState, SavedStateHandle
from .screen import (
    HOME,
    SCREEN_TYPES,
    Home,
    Screen,
    bundle_to_screen,
    screen_to_bundle,
)

logger = logging.getLogger(__name__)

# Saved-state key holding the encoded current screen.
SIS_SCREEN = "sis_screen"


class NavigationViewModel:
    """Holds the current screen and survives restarts through saved state."""

    def __init__(self, saved_state: Optional[SavedStateHandle] = None) -> None:
        self.saved_state = saved_state if saved_state is not None else SavedStateHandle()
        self._current: MutableState[Screen] = self.saved_state.get_mutable_state_of(
            SIS_SCREEN,
            default=HOME,
            save=screen_to_bundle,
            restore=bundle_to_screen,
        )

    @property
    def current_screen(self) -> Screen:
        """The screen being shown, restored from saved state on first read."""
        return self._current.value

    def subscribe(self, observer: Callable[[Screen], None]) -> Callable[[], None]:
        """Call ``observer`` with the new screen after every navigation."""
        return self._current.subscribe(observer)

    def on_back(self) -> bool:
        """Go back (always to Home).

        Returns True if this call caused user-visible navigation, which is
        never the case when the current screen is already Home.
        """
        was_handled = not isinstance(self.current_screen, Home)
        self._current.value = HOME
        logger.debug("Back pressed, handled=%s", was_handled)
        return was_handled

    def navigate_to(self, screen: Screen) -> None:
        """Show ``screen``.

        Any screen other than Home ends up one level above Home in the back
        stack.
        """
        if not isinstance(screen, SCREEN_TYPES):
            raise TypeError(f"Not a screen: {screen!r}")
        logger.debug("Navigating to %s", screen.id.name)
        self._current.value = screen


__all__ = ["NavigationViewModel", "SIS_SCREEN"]
