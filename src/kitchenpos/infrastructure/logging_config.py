"""Logging setup for the CLI process."""

from __future__ import annotations

import logging
import sys

from kitchenpos.infrastructure.config import settings


def setup_logging(level: str | None = None) -> None:
    """Attach a single stderr handler to the ``kitchenpos`` logger.

    Safe to call more than once; later calls only adjust the level.
    """
    logger = logging.getLogger("kitchenpos")
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(fmt=settings.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.propagate = False
