"""Configuration facade: provides `config` object and back-compat globals."""

from .config import Config
from .constants import ENV_FILE  # re-export if someone needs it

# Build a singleton config instance
config = Config.from_env()

LOG_LEVEL = config.LOG_LEVEL
VERSION = config.VERSION

__all__ = [
    "config",
    "Config",
    "ENV_FILE",
    "LOG_LEVEL",
    "VERSION",
]
