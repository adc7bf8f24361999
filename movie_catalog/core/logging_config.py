"""Utilities to configure logging from environment settings."""

from __future__ import annotations

import logging

from movie_catalog.core.config import get_settings


def configure_logging() -> None:
    """Apply the configured log level to the root logger."""

    settings = get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(level))
