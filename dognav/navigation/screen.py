"""Screens of the app and their saved-state encoding.

There are exactly two destinations: the dog list (:data:`HOME`) and the
detail page for one dog (:class:`Detail`).  :func:`screen_to_bundle` and
:func:`bundle_to_screen` convert between a screen and the flat
:class:`~dognav.utils.bundle.Bundle` stored across process death.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Union

from dognav.data.dog import Dog
from dognav.errors import MalformedStateError
from dognav.utils.bundle import Bundle, bundle_of

logger = logging.getLogger(__name__)

# Keys of the persisted record.  Renaming them breaks restoring old state.
SIS_NAME = "screen_name"
SIS_POST = "post"


class ScreenName(Enum):
    """Serialization tag of each screen, persisted by member name."""

    HOME = "HOME"
    DETAIL = "DETAIL"


@dataclass(frozen=True)
class Home:
    """The dog list."""

    id: ClassVar[ScreenName] = ScreenName.HOME


@dataclass(frozen=True)
class Detail:
    """Details of a single dog."""

    dog: Dog

    id: ClassVar[ScreenName] = ScreenName.DETAIL


Screen = Union[Home, Detail]
SCREEN_TYPES = (Home, Detail)

HOME = Home()


def screen_to_bundle(screen: Screen) -> Bundle:
    """Convert ``screen`` into a bundle suitable for saved state."""

    bundle = bundle_of((SIS_NAME, screen.id.name))
    # add extra keys for payload-carrying screens here
    if isinstance(screen, Detail):
        bundle.put_parcelable(SIS_POST, screen.dog)
    return bundle


def _screen_name(bundle: Bundle) -> ScreenName:
    raw = bundle.get_string_or_throw(SIS_NAME)
    try:
        return ScreenName[raw]
    except KeyError as exc:
        raise MalformedStateError(f"Unknown screen name {raw!r} in {bundle!r}") from exc


def bundle_to_screen(bundle: Union[Bundle, Dict[str, Any]]) -> Screen:
    """Read a bundle written by :func:`screen_to_bundle`.

    The checkpoint form from :meth:`Bundle.to_dict` is accepted too.  Raises
    :class:`MalformedStateError` when the input is not a bundle, when the
    screen name is missing or unknown, or when a detail screen has no
    readable dog.
    """

    try:
        if isinstance(bundle, dict):
            bundle = Bundle.from_dict(bundle)
        elif not isinstance(bundle, Bundle):
            raise MalformedStateError(
                f"Expected a bundle for screen state, got {type(bundle).__name__}"
            )
        screen_name = _screen_name(bundle)
        if screen_name is ScreenName.HOME:
            return HOME
        try:
            dog = bundle.get_parcelable_or_throw(SIS_POST, Dog)
        except MalformedStateError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise MalformedStateError(
                f"Could not read '{SIS_POST}' from {bundle!r}: {exc!r}"
            ) from exc
        return Detail(dog)
    except MalformedStateError as exc:
        logger.warning("Unreadable screen state: %s", exc)
        raise


# Short names for the codec.
encode = screen_to_bundle
decode = bundle_to_screen

__all__ = [
    "ScreenName",
    "Screen",
    "Home",
    "Detail",
    "HOME",
    "SCREEN_TYPES",
    "SIS_NAME",
    "SIS_POST",
    "screen_to_bundle",
    "bundle_to_screen",
    "encode",
    "decode",
]
