"""Timer snapshot model and elapsed-time arithmetic.

A ``Timer`` is an immutable snapshot of one stored record.  The engine
never mutates a snapshot; each transition builds a new one with
``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum

from .errors import InvalidState


ONE_SECOND = timedelta(seconds=1)


class TimerStatus(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


@dataclass(frozen=True)
class Timer:
    """One stopwatch.

    ``elapsed_seconds`` only covers *completed* running intervals.  While
    the timer runs, the open interval is added on the fly by
    :meth:`live_elapsed` and is folded in for good by a stop.
    """

    id: str
    status: TimerStatus = TimerStatus.STOPPED
    start_time: datetime | None = None
    elapsed_seconds: int = 0
    version: int = 0

    @property
    def is_running(self) -> bool:
        return self.status == TimerStatus.RUNNING

    def running_seconds(self, now: datetime) -> int:
        """Whole seconds in the open interval, never negative."""
        if not self.is_running or self.start_time is None:
            return 0
        return max(0, (now - self.start_time) // ONE_SECOND)

    def live_elapsed(self, now: datetime) -> int:
        return self.elapsed_seconds + self.running_seconds(now)

    def view(self, now: datetime) -> Timer:
        """Snapshot with ``elapsed_seconds`` recomputed for *now*.

        The view is for reporting only and must never be written back.
        """
        if not self.is_running:
            return self
        return replace(self, elapsed_seconds=self.live_elapsed(now))

    def check(self) -> Timer:
        """Raise :class:`InvalidState` if the record is corrupt."""
        if self.is_running and self.start_time is None:
            raise InvalidState(self.id, "running without a start time")
        if not self.is_running and self.start_time is not None:
            raise InvalidState(self.id, "stopped with a start time")
        if self.elapsed_seconds < 0:
            raise InvalidState(
                self.id, f"negative elapsed_seconds ({self.elapsed_seconds})"
            )
        return self

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "status": self.status.value,
            "elapsed_seconds": self.elapsed_seconds,
            "start_time": (
                self.start_time.isoformat() if self.start_time else None
            ),
        }
