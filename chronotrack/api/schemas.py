"""Response bodies for the timer HTTP API."""

from typing import Literal, Optional

from pydantic import BaseModel

from ..timer.model import Timer


class TimerOut(BaseModel):
    """A timer as seen by API clients."""
    id: str
    status: Literal["stopped", "running"]
    elapsed_seconds: int
    start_time: Optional[str] = None  # ISO-8601, null while stopped

    @classmethod
    def from_timer(cls, timer: Timer) -> "TimerOut":
        return cls(**timer.to_dict())


class HealthOut(BaseModel):
    status: str = "ok"
    timestamp: int  # epoch milliseconds


class ErrorOut(BaseModel):
    error: str
    message: str
