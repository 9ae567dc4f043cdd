"""Observable state cells backed by host-provided saved state.

:class:`SavedStateHandle` plays the role of ``context.user_data``: a plain
mapping owned by the host that survives restarts.  Values restored from a
previous run are read from it, and values to persist are collected from
registered providers when the host asks for a checkpoint via
:meth:`SavedStateHandle.save_state`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from dognav.errors import MalformedStateError
from dognav.utils.bundle import Bundle

logger = logging.getLogger(__name__)

T = TypeVar("T")

Observer = Callable[[T], None]
SavedStateProvider = Callable[[], Any]

_UNSET: Any = object()


class MutableState(Generic[T]):
    """A value cell that notifies subscribers on every write.

    Writes are not deduplicated: assigning a value equal to the current one
    still notifies.  ``initializer`` is called on the first read if nothing
    has been written by then.
    """

    def __init__(
        self,
        value: T = _UNSET,
        *,
        initializer: Optional[Callable[[], T]] = None,
    ) -> None:
        if value is _UNSET and initializer is None:
            raise TypeError("MutableState needs a value or an initializer")
        self._value = value
        self._initializer = initializer
        self._observers: List[Observer[T]] = []

    @property
    def value(self) -> T:
        if self._value is _UNSET:
            assert self._initializer is not None
            self._value = self._initializer()
            self._initializer = None
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self._value = new_value
        self._initializer = None
        for observer in list(self._observers):
            observer(new_value)

    @property
    def is_initialized(self) -> bool:
        """False while the first read is still pending."""
        return self._value is not _UNSET

    def subscribe(self, observer: Observer[T]) -> Callable[[], None]:
        """Register ``observer`` and return a function that removes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe


class SavedStateHandle:
    """Key-value saved state handed to a view model by its host."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(initial or {})
        self._providers: Dict[str, SavedStateProvider] = {}

    # ------------------------------------------------------------------
    # Plain access
    def get(self, key: str) -> Any:
        return self._values.get(key)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def remove(self, key: str) -> Any:
        return self._values.pop(key, None)

    def contains(self, key: str) -> bool:
        return key in self._values

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def keys(self) -> List[str]:
        return list(self._values)

    def get_bundle(self, key: str) -> Optional[Bundle]:
        """Return the value at ``key`` as a :class:`Bundle`.

        Checkpoint dictionaries are converted on the way out.  A value of
        any other kind raises :class:`MalformedStateError`.
        """
        raw = self._values.get(key)
        if raw is None or isinstance(raw, Bundle):
            return raw
        if isinstance(raw, dict):
            return Bundle.from_dict(raw)
        raise MalformedStateError(
            f"Saved state for '{key}' is not a bundle: {type(raw).__name__}"
        )

    # ------------------------------------------------------------------
    # Checkpointing
    def set_saved_state_provider(self, key: str, provider: SavedStateProvider) -> None:
        self._providers[key] = provider

    def clear_saved_state_provider(self, key: str) -> None:
        self._providers.pop(key, None)

    def save_state(self) -> Dict[str, Any]:
        """Return everything to persist, in JSON-safe form."""
        state: Dict[str, Any] = {}
        for key, value in self._values.items():
            state[key] = value.to_dict() if isinstance(value, Bundle) else value
        for key, provider in self._providers.items():
            value = provider()
            state[key] = value.to_dict() if isinstance(value, Bundle) else value
        logger.debug("Saved state keys: %s", sorted(state))
        return state

    # ------------------------------------------------------------------
    def get_mutable_state_of(
        self,
        key: str,
        default: T,
        save: Callable[[T], Bundle],
        restore: Callable[[Bundle], T],
    ) -> MutableState[T]:
        """Return a :class:`MutableState` persisted under ``key``.

        The initial value is ``restore(saved_bundle)`` if ``key`` was saved
        before and ``default`` otherwise.  Restoring happens on first read;
        errors raised by ``restore`` reach whoever reads the value.  A
        checkpoint taken before the first read saves the previous entry
        unchanged.
        """

        def initial() -> T:
            bundle = self.get_bundle(key)
            if bundle is None:
                return default
            logger.debug("Restoring '%s' from saved state", key)
            return restore(bundle)

        state: MutableState[T] = MutableState(initializer=initial)

        def provide() -> Any:
            if not state.is_initialized and self._values.get(key) is not None:
                return self._values[key]
            return save(state.value)

        self.set_saved_state_provider(key, provide)
        return state


__all__ = ["MutableState", "SavedStateHandle"]
