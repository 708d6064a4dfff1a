"""SQLAlchemy-backed :class:`~chronotrack.timer.store.TimerStore`."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from ..timer.errors import InvalidState, StaleWrite, StorageFailure
from ..timer.model import Timer, TimerStatus
from .db import get_session
from .models import TimerRecord


def _to_db_time(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _from_db_time(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _to_timer(record: TimerRecord) -> Timer:
    try:
        status = TimerStatus(record.status)
    except ValueError:
        raise InvalidState(record.id, f"unknown status {record.status!r}") from None
    return Timer(
        id=record.id,
        status=status,
        start_time=_from_db_time(record.start_time),
        elapsed_seconds=record.elapsed_seconds,
        version=record.version,
    )


class SqlTimerStore:
    """Stores timers in the ``timers`` table.

    Each call runs in its own session from :func:`get_session`.  Updates
    are a single ``UPDATE ... WHERE id = ? AND version = ?`` so the
    compare-and-set is atomic inside the database.
    """

    def get(self, timer_id: str) -> Timer | None:
        try:
            with get_session() as db:
                record = db.get(TimerRecord, timer_id)
                return _to_timer(record) if record else None
        except SQLAlchemyError as exc:
            raise StorageFailure(f"Could not read timer {timer_id}") from exc

    def put(self, timer: Timer, expected_version: int | None = None) -> Timer:
        if expected_version is None:
            return self._insert(timer)
        return self._update(timer, expected_version)

    def delete(self, timer_id: str) -> bool:
        try:
            with get_session() as db:
                deleted = (
                    db.query(TimerRecord)
                    .filter(TimerRecord.id == timer_id)
                    .delete(synchronize_session=False)
                )
                return deleted > 0
        except SQLAlchemyError as exc:
            raise StorageFailure(f"Could not delete timer {timer_id}") from exc

    # ── internal ──────────────────────────────────────────────────────

    def _insert(self, timer: Timer) -> Timer:
        try:
            with get_session() as db:
                record = TimerRecord(
                    id=timer.id,
                    status=timer.status.value,
                    start_time=_to_db_time(timer.start_time),
                    elapsed_seconds=timer.elapsed_seconds,
                    version=0,
                )
                db.add(record)
                db.flush()
                return _to_timer(record)
        except SQLAlchemyError as exc:
            raise StorageFailure(f"Could not create timer {timer.id}") from exc

    def _update(self, timer: Timer, expected_version: int) -> Timer:
        try:
            with get_session() as db:
                changed = (
                    db.query(TimerRecord)
                    .filter(
                        TimerRecord.id == timer.id,
                        TimerRecord.version == expected_version,
                    )
                    .update(
                        {
                            TimerRecord.status: timer.status.value,
                            TimerRecord.start_time: _to_db_time(timer.start_time),
                            TimerRecord.elapsed_seconds: timer.elapsed_seconds,
                            TimerRecord.version: expected_version + 1,
                            TimerRecord.updated_at: datetime.utcnow(),
                        },
                        synchronize_session=False,
                    )
                )
        except SQLAlchemyError as exc:
            raise StorageFailure(f"Could not update timer {timer.id}") from exc
        if changed == 0:
            raise StaleWrite(timer.id, expected_version)
        return replace(timer, version=expected_version + 1)
