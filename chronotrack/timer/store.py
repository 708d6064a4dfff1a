"""Storage contract for timer records, plus an in-process implementation.

Every store offers per-record compare-and-set: ``put`` with an
``expected_version`` only lands if nobody else committed in between.
That is the only concurrency guarantee the engine relies on.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Protocol

from .errors import StaleWrite, StorageFailure
from .model import Timer


class TimerStore(Protocol):
    def get(self, timer_id: str) -> Timer | None: ...

    def put(self, timer: Timer, expected_version: int | None = None) -> Timer: ...

    def delete(self, timer_id: str) -> bool: ...


class InMemoryTimerStore:
    """Dict-backed store.  Thread-safe; nothing survives the process."""

    def __init__(self) -> None:
        self._records: dict[str, Timer] = {}
        self._lock = threading.Lock()

    def get(self, timer_id: str) -> Timer | None:
        with self._lock:
            return self._records.get(timer_id)

    def put(self, timer: Timer, expected_version: int | None = None) -> Timer:
        """Insert (``expected_version=None``) or compare-and-set update."""
        with self._lock:
            current = self._records.get(timer.id)
            if expected_version is None:
                if current is not None:
                    raise StorageFailure(f"Timer {timer.id} already exists")
                stored = replace(timer, version=0)
            else:
                if current is None or current.version != expected_version:
                    raise StaleWrite(timer.id, expected_version)
                stored = replace(timer, version=expected_version + 1)
            self._records[timer.id] = stored
            return stored

    def delete(self, timer_id: str) -> bool:
        with self._lock:
            return self._records.pop(timer_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
