"""Navigation state for the dog adoption app."""

__version__ = "0.1.0"
