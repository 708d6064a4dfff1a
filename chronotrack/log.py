"""Logging setup for ChronoTrack."""

from __future__ import annotations

import logging
import sys

from .settings import Settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def level_for(settings: Settings) -> int:
    if settings.log_level:
        level = logging.getLevelName(settings.log_level.upper())
        if isinstance(level, int):
            return level
    if settings.is_production:
        return logging.WARNING
    if settings.is_test:
        return logging.ERROR
    return logging.DEBUG


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a single stream handler to the ``chronotrack`` logger."""
    root = logging.getLogger("chronotrack")
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level_for(settings))
    root.propagate = False
    return root
