"""Timer lifecycle engine.

States
------
STOPPED   Initial state.  ``start_time`` is None.
RUNNING   Counting.  ``start_time`` marks the start of the open interval.

Transitions
-----------
STOPPED → RUNNING     (start)
RUNNING → STOPPED     (stop; open interval folded into elapsed_seconds)
RUNNING → RUNNING     (start again: no-op, start_time kept)
STOPPED → STOPPED     (stop again: no-op)

There is no terminal state.  A timer cycles until it is deleted.

Elapsed time is counted in whole seconds: ``floor((now - start) / 1s)``,
clamped at zero when the clock reads earlier than ``start_time``.

The engine holds no locks.  Writes go through the store's
compare-and-set; when one loses a race the engine re-reads the record and
re-applies the same guard, so a racing second start (or stop) turns into
the no-op it would have been had the calls run one after the other.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Protocol

from .clock import SystemClock, new_timer_id
from .errors import StaleWrite, StorageFailure, TimerNotFound
from .model import Timer, TimerStatus
from .store import TimerStore

logger = logging.getLogger(__name__)

MAX_WRITE_ATTEMPTS = 3


class Clock(Protocol):
    def now(self) -> datetime: ...


# A transition takes the current record and the current instant and
# returns the record to write, or None when there is nothing to change.
Transition = Callable[[Timer, datetime], "Timer | None"]


class TimerLifecycleEngine:
    """Create, start, stop and query timers against a :class:`TimerStore`."""

    def __init__(
        self,
        store: TimerStore,
        clock: Clock | None = None,
        new_id: Callable[[], str] = new_timer_id,
    ) -> None:
        self._store = store
        self._clock: Clock = clock or SystemClock()
        self._new_id = new_id

    @property
    def store(self) -> TimerStore:
        return self._store

    @property
    def clock(self) -> Clock:
        return self._clock

    # ══════════════════════════════════════════════════════════════════
    #  OPERATIONS
    # ══════════════════════════════════════════════════════════════════

    def create(self) -> Timer:
        """Persist a new stopped timer with zero elapsed time."""
        timer = Timer(id=self._new_id())
        logger.info("Creating timer %s", timer.id)
        return self._store.put(timer)

    def get(self, timer_id: str) -> Timer:
        """Current snapshot, with live elapsed time if running.  No writes."""
        timer = self._load(timer_id)
        return timer.view(self._clock.now())

    def start(self, timer_id: str) -> Timer:
        return self._transition(timer_id, self._apply_start)

    def stop(self, timer_id: str) -> Timer:
        return self._transition(timer_id, self._apply_stop)

    def delete(self, timer_id: str) -> None:
        if not self._store.delete(timer_id):
            raise TimerNotFound(timer_id)
        logger.info("Deleted timer %s", timer_id)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _load(self, timer_id: str) -> Timer:
        timer = self._store.get(timer_id)
        if timer is None:
            raise TimerNotFound(timer_id)
        return timer.check()

    @staticmethod
    def _apply_start(timer: Timer, now: datetime) -> Timer | None:
        if timer.is_running:
            logger.debug("Timer %s already running", timer.id)
            return None
        logger.info("Starting timer %s", timer.id)
        return replace(timer, status=TimerStatus.RUNNING, start_time=now)

    @staticmethod
    def _apply_stop(timer: Timer, now: datetime) -> Timer | None:
        if not timer.is_running:
            logger.debug("Timer %s already stopped", timer.id)
            return None
        elapsed = timer.live_elapsed(now)
        logger.info("Stopping timer %s, elapsed: %d", timer.id, elapsed)
        return replace(
            timer,
            status=TimerStatus.STOPPED,
            start_time=None,
            elapsed_seconds=elapsed,
        )

    def _transition(self, timer_id: str, apply: Transition) -> Timer:
        for _ in range(MAX_WRITE_ATTEMPTS):
            current = self._load(timer_id)
            now = self._clock.now()
            updated = apply(current, now)
            if updated is None:
                return current.view(now)
            try:
                return self._store.put(updated, expected_version=current.version)
            except StaleWrite:
                logger.debug(
                    "Timer %s changed under us at version %d, re-reading",
                    timer_id, current.version,
                )
        raise StorageFailure(
            f"Timer {timer_id} kept changing; gave up after "
            f"{MAX_WRITE_ATTEMPTS} attempts"
        )
