"""Database package."""

from .db import configure_engine, configure_path, get_session, init_db
from .models import TimerRecord
from .store import SqlTimerStore

__all__ = [
    "configure_engine",
    "configure_path",
    "get_session",
    "init_db",
    "TimerRecord",
    "SqlTimerStore",
]
