from dognav.errors import MalformedStateError

from .saved_state import MutableState, SavedStateHandle
from .screen import (
    HOME,
    Detail,
    Home,
    Screen,
    ScreenName,
    bundle_to_screen,
    screen_to_bundle,
)
from .view_model import NavigationViewModel, SIS_SCREEN

__all__ = [
    "MalformedStateError",
    "MutableState",
    "SavedStateHandle",
    "HOME",
    "Detail",
    "Home",
    "Screen",
    "ScreenName",
    "bundle_to_screen",
    "screen_to_bundle",
    "NavigationViewModel",
    "SIS_SCREEN",
]
