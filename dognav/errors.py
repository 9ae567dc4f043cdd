"""Errors raised while restoring navigation state."""
from __future__ import annotations


class MalformedStateError(ValueError):
    """Persisted navigation state could not be turned back into a screen."""


__all__ = ["MalformedStateError"]
