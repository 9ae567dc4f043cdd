"""Flat key-value container used to persist navigation state.

A :class:`Bundle` maps string keys to a small set of values: strings,
numbers, booleans, ``None`` and nested bundles.  Nested bundles are the slot
for opaque payloads; any object implementing the parcelable protocol
(``to_bundle()`` and a ``from_bundle()`` classmethod) can be stored there.

Lookups come in two flavours.  ``get_*`` returns ``None`` for a missing key
while ``get_*_or_throw`` raises :class:`MalformedStateError` so corrupted
state is reported instead of being replaced by a default.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional, Protocol, Tuple, Type, TypeVar

from dognav.errors import MalformedStateError

_SCALARS = (str, int, float, bool, type(None))

P = TypeVar("P", bound="Parcelable")


class Parcelable(Protocol):
    """Objects that can be written to and read from a :class:`Bundle`."""

    def to_bundle(self) -> "Bundle": ...

    @classmethod
    def from_bundle(cls: Type[P], bundle: "Bundle") -> P: ...


class Bundle:
    """Ordered mapping from string keys to bundle-safe values."""

    def __init__(self, **items: Any) -> None:
        self._items: Dict[str, Any] = {}
        for key, value in items.items():
            self._put(key, value)

    # ------------------------------------------------------------------
    # Internal helpers
    def _put(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"Bundle keys must be str, got {type(key).__name__}")
        if not isinstance(value, _SCALARS + (Bundle,)):
            raise TypeError(
                f"Unsupported value for key '{key}': {type(value).__name__}"
            )
        self._items[key] = value

    # ------------------------------------------------------------------
    # Writers
    def put_string(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"put_string expects str for key '{key}'")
        self._put(key, value)

    def put_int(self, key: str, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"put_int expects int for key '{key}'")
        self._put(key, value)

    def put_bool(self, key: str, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError(f"put_bool expects bool for key '{key}'")
        self._put(key, value)

    def put_bundle(self, key: str, value: "Bundle") -> None:
        if not isinstance(value, Bundle):
            raise TypeError(f"put_bundle expects Bundle for key '{key}'")
        self._put(key, value)

    def put_parcelable(self, key: str, value: Parcelable) -> None:
        """Store ``value`` under ``key`` using its own serializer."""
        self.put_bundle(key, value.to_bundle())

    # ------------------------------------------------------------------
    # Readers
    def get_string(self, key: str) -> Optional[str]:
        value = self._items.get(key)
        return value if isinstance(value, str) else None

    def get_int(self, key: str) -> Optional[int]:
        value = self._items.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    def get_bool(self, key: str) -> Optional[bool]:
        value = self._items.get(key)
        return value if isinstance(value, bool) else None

    def get_bundle(self, key: str) -> Optional["Bundle"]:
        value = self._items.get(key)
        return value if isinstance(value, Bundle) else None

    def get_parcelable(self, key: str, cls: Type[P]) -> Optional[P]:
        """Return ``cls`` rebuilt from the nested bundle at ``key``.

        ``None`` is returned when nothing is stored there.  Errors raised by
        ``cls.from_bundle`` are left to the caller.
        """
        nested = self.get_bundle(key)
        if nested is None:
            return None
        return cls.from_bundle(nested)

    def get_string_or_throw(self, key: str) -> str:
        """Like :meth:`get_string` but raise if ``key`` holds no string."""
        value = self.get_string(key)
        if value is None:
            raise MalformedStateError(f"Missing key '{key}' in {self!r}")
        return value

    def get_parcelable_or_throw(self, key: str, cls: Type[P]) -> P:
        """Like :meth:`get_parcelable` but raise if ``key`` holds no bundle."""
        value = self.get_parcelable(key, cls)
        if value is None:
            raise MalformedStateError(f"Missing key '{key}' in {self!r}")
        return value

    # ------------------------------------------------------------------
    # Mapping protocol
    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __getitem__(self, key: str) -> Any:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bundle):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._items.items())
        return f"Bundle[{inner}]"

    def keys(self):
        return self._items.keys()

    def items(self):
        return self._items.items()

    def remove(self, key: str) -> None:
        self._items.pop(key, None)

    # ------------------------------------------------------------------
    # Checkpoint form
    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-safe ``dict`` copy, nested bundles included."""
        return {
            key: value.to_dict() if isinstance(value, Bundle) else value
            for key, value in self._items.items()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bundle":
        """Rebuild a bundle from :meth:`to_dict` output.

        Anything that :meth:`to_dict` could not have produced is rejected
        with :class:`MalformedStateError`.
        """
        if not isinstance(data, dict):
            raise MalformedStateError(
                f"Expected a mapping for bundle data, got {type(data).__name__}"
            )
        bundle = cls()
        for key, value in data.items():
            if not isinstance(key, str):
                raise MalformedStateError(f"Non-string bundle key: {key!r}")
            if isinstance(value, dict):
                bundle._items[key] = cls.from_dict(value)
            elif isinstance(value, _SCALARS):
                bundle._items[key] = value
            else:
                raise MalformedStateError(
                    f"Unsupported value for key '{key}': {type(value).__name__}"
                )
        return bundle


def bundle_of(*pairs: Tuple[str, Any]) -> Bundle:
    """Build a :class:`Bundle` from ``(key, value)`` pairs, in order."""

    bundle = Bundle()
    for key, value in pairs:
        bundle._put(key, value)
    return bundle


__all__ = ["Bundle", "Parcelable", "bundle_of"]
