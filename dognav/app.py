"""Wiring used by a host when it starts or restarts the app.

The host owns the lifecycle: it passes whatever :meth:`SavedStateHandle.save_state`
returned at its last checkpoint (or nothing on a cold start) and keeps the
returned view model for as long as navigation lives.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from dognav.config import config
from dognav.navigation import NavigationViewModel, SavedStateHandle
from dognav.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_navigation(saved: Optional[Dict[str, Any]] = None) -> NavigationViewModel:
    """Configure logging and build the navigation view model."""

    setup_logging()
    logger.info(
        "Starting dognav %s (%s start)", config.VERSION, "warm" if saved else "cold"
    )
    return NavigationViewModel(SavedStateHandle(saved))


__all__ = ["create_navigation"]
