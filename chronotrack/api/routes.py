"""Timer and health endpoints."""

import time
import uuid

from fastapi import APIRouter, Depends, Request, Response

from .errors import InvalidTimerId
from .schemas import ErrorOut, HealthOut, TimerOut
from ..timer.engine import TimerLifecycleEngine

router = APIRouter(prefix="/timers", tags=["timers"])
health_router = APIRouter(tags=["health"])

_ERROR_RESPONSES = {
    400: {"model": ErrorOut},
    404: {"model": ErrorOut},
    503: {"model": ErrorOut},
}


def get_engine(request: Request) -> TimerLifecycleEngine:
    return request.app.state.engine


def valid_timer_id(timer_id: str) -> str:
    """Reject ids that are not UUIDs before they reach the engine."""
    try:
        uuid.UUID(timer_id)
    except ValueError:
        raise InvalidTimerId(timer_id) from None
    return timer_id


@router.post("", status_code=201, response_model=TimerOut, responses={503: {"model": ErrorOut}})
def create_timer(engine: TimerLifecycleEngine = Depends(get_engine)):
    """Create a new timer in the stopped state."""
    return TimerOut.from_timer(engine.create())


@router.get("/{timer_id}", response_model=TimerOut, responses=_ERROR_RESPONSES)
def get_timer(
    timer_id: str = Depends(valid_timer_id),
    engine: TimerLifecycleEngine = Depends(get_engine),
):
    """Current timer state; elapsed time is live while running."""
    return TimerOut.from_timer(engine.get(timer_id))


@router.post("/{timer_id}/start", response_model=TimerOut, responses=_ERROR_RESPONSES)
def start_timer(
    timer_id: str = Depends(valid_timer_id),
    engine: TimerLifecycleEngine = Depends(get_engine),
):
    """Start a timer.  Starting a running timer changes nothing."""
    return TimerOut.from_timer(engine.start(timer_id))


@router.post("/{timer_id}/stop", response_model=TimerOut, responses=_ERROR_RESPONSES)
def stop_timer(
    timer_id: str = Depends(valid_timer_id),
    engine: TimerLifecycleEngine = Depends(get_engine),
):
    """Stop a timer.  Stopping a stopped timer changes nothing."""
    return TimerOut.from_timer(engine.stop(timer_id))


@router.delete("/{timer_id}", status_code=204, responses=_ERROR_RESPONSES)
def delete_timer(
    timer_id: str = Depends(valid_timer_id),
    engine: TimerLifecycleEngine = Depends(get_engine),
):
    engine.delete(timer_id)
    return Response(status_code=204)


@health_router.get("/health", response_model=HealthOut)
def health():
    """Health check endpoint."""
    return HealthOut(timestamp=int(time.time() * 1000))
