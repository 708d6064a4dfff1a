"""Timer package."""

from .clock import ManualClock, SystemClock, new_timer_id
from .engine import MAX_WRITE_ATTEMPTS, TimerLifecycleEngine
from .errors import (
    InvalidState,
    StaleWrite,
    StorageFailure,
    TimerError,
    TimerNotFound,
)
from .model import Timer, TimerStatus
from .store import InMemoryTimerStore, TimerStore

__all__ = [
    "TimerLifecycleEngine",
    "Timer",
    "TimerStatus",
    "TimerStore",
    "InMemoryTimerStore",
    "SystemClock",
    "ManualClock",
    "new_timer_id",
    "TimerError",
    "TimerNotFound",
    "StorageFailure",
    "InvalidState",
    "StaleWrite",
    "MAX_WRITE_ATTEMPTS",
]
