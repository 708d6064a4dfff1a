"""Map timer failures onto JSON error responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..timer.errors import (
    InvalidState,
    StorageFailure,
    TimerNotFound,
)

logger = logging.getLogger(__name__)


class InvalidTimerId(Exception):
    """Path parameter is not a UUID."""

    def __init__(self, timer_id: str):
        super().__init__(timer_id)
        self.timer_id = timer_id


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message},
    )


async def _invalid_id(request: Request, exc: InvalidTimerId):
    return _error(
        400,
        "Bad Request",
        f"Invalid timer ID format: {exc.timer_id or '(missing)'}. "
        "Must be a valid UUID v4.",
    )


async def _not_found(request: Request, exc: TimerNotFound):
    return _error(404, "Timer not found", f"No timer exists with id {exc.timer_id}")


async def _storage_failure(request: Request, exc: StorageFailure):
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return _error(503, "Service Unavailable", str(exc))


async def _invalid_state(request: Request, exc: InvalidState):
    logger.error("Corrupt timer record: %s", exc)
    return _error(500, "Internal Server Error", str(exc))


async def _unhandled(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal Server Error", "An unexpected error occurred")


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidTimerId, _invalid_id)
    app.add_exception_handler(TimerNotFound, _not_found)
    app.add_exception_handler(StorageFailure, _storage_failure)
    app.add_exception_handler(InvalidState, _invalid_state)
    app.add_exception_handler(Exception, _unhandled)
