"""Typed failures raised by the timer engine and its stores."""

from __future__ import annotations


class TimerError(Exception):
    """Base class for every timer failure surfaced to callers."""


class TimerNotFound(TimerError):
    """No stored record exists for the requested identifier."""

    def __init__(self, timer_id: str) -> None:
        super().__init__(f"Timer not found: {timer_id}")
        self.timer_id = timer_id


class StorageFailure(TimerError):
    """The persistence layer could not complete a read or write."""


class InvalidState(TimerError):
    """A stored record violates the status/start_time invariant.

    This means the data is corrupt.  It is reported, never repaired.
    """

    def __init__(self, timer_id: str, detail: str) -> None:
        super().__init__(f"Timer {timer_id} is in an invalid state: {detail}")
        self.timer_id = timer_id
        self.detail = detail


class StaleWrite(TimerError):
    """A compare-and-set write lost the race against another writer."""

    def __init__(self, timer_id: str, expected_version: int) -> None:
        super().__init__(
            f"Timer {timer_id} changed since version {expected_version}"
        )
        self.timer_id = timer_id
        self.expected_version = expected_version
