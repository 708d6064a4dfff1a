"""SQLAlchemy ORM models for ChronoTrack."""

from datetime import datetime
from sqlalchemy import (
    CheckConstraint, Column, DateTime, Index, Integer, String
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class TimerRecord(Base):
    """One stopwatch.  ``start_time`` is stored as naive UTC."""

    __tablename__ = "timers"
    __table_args__ = (
        CheckConstraint(
            "status IN ('stopped', 'running')", name="ck_timers_status"
        ),
        Index("idx_timers_status", "status"),
        Index("idx_timers_created_at", "created_at"),
    )

    id = Column(String(36), primary_key=True)
    status = Column(String(10), nullable=False, default="stopped")  # stopped | running
    start_time = Column(DateTime, nullable=True)
    elapsed_seconds = Column(Integer, nullable=False, default=0)
    version = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return (
            f"<TimerRecord id={self.id} status={self.status} "
            f"elapsed={self.elapsed_seconds} v={self.version}>"
        )
