"""Application settings with JSON persistence and environment overrides.

Settings are stored at:
    ~/Library/Application Support/ChronoTrack/settings.json

Environment variables (``CHRONOTRACK_HOST``, ``CHRONOTRACK_PORT``,
``CHRONOTRACK_DB_PATH``, ``CHRONOTRACK_CORS_ORIGIN``,
``CHRONOTRACK_LOG_LEVEL``, ``CHRONOTRACK_ENV``) win over the file.

Usage::

    settings = load_settings()
    settings.last_timer_id = timer.id
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path

logger = logging.getLogger(__name__)

# Reuse the app-support directory from db.py
APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "ChronoTrack"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"

ENV_PREFIX = "CHRONOTRACK_"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── server ────────────────────────────────────────────────────────
    host: str = "127.0.0.1"
    port: int = 3000
    cors_origin: str = "http://localhost:5173"
    environment: str = "development"       # development | production | test

    # ── storage ───────────────────────────────────────────────────────
    db_path: str | None = None             # None → app-support chronotrack.db

    # ── logging ───────────────────────────────────────────────────────
    log_level: str | None = None           # None → derived from environment

    # ── desktop client ────────────────────────────────────────────────
    sync_interval_ms: int = 1000
    last_timer_id: str | None = None

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"


_ENV_FIELDS: dict[str, str] = {
    "HOST": "host",
    "CORS_ORIGIN": "cors_origin",
    "ENV": "environment",
    "DB_PATH": "db_path",
    "LOG_LEVEL": "log_level",
}


def _apply_env(settings: Settings, environ: dict[str, str]) -> Settings:
    for suffix, name in _ENV_FIELDS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value:
            setattr(settings, name, value)

    port = environ.get(ENV_PREFIX + "PORT")
    if port:
        try:
            settings.port = int(port)
        except ValueError:
            logger.warning("Ignoring invalid %sPORT=%r", ENV_PREFIX, port)
    return settings


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Load settings from disk, falling back to defaults, then apply env."""
    settings = Settings()
    try:
        if SETTINGS_PATH.exists():
            data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            settings = Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Could not read %s, using defaults: %s", SETTINGS_PATH, exc)
    return _apply_env(settings, os.environ if environ is None else environ)


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
