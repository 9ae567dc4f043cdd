import logging

from dognav.config import config


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=level or config.LOG_LEVEL,
    )

__all__ = ["setup_logging"]
