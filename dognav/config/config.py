# dognav/config/config.py
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from .constants import ENV_FILE, LOG_LEVELS

@dataclass(frozen=True)
class Config:
    LOG_LEVEL: str
    VERSION: str

    @staticmethod
    def _to_level(key: str, default: str) -> str:
        val = os.getenv(key, "").strip().upper()
        if not val:
            return default
        if val not in LOG_LEVELS:
            raise RuntimeError(
                f"{key} must be one of {', '.join(LOG_LEVELS)}, got: {val!r}"
            )
        return val

    @classmethod
    def from_env(cls) -> "Config":
        # load .env once
        load_dotenv(ENV_FILE)

        return cls(
            LOG_LEVEL=cls._to_level("DOGNAV_LOG_LEVEL", "INFO"),
            VERSION=os.getenv("COMMIT_SHA", "dev"),
        )
