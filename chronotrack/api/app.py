"""FastAPI application factory."""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from . import routes
from .errors import install_error_handlers
from ..settings import Settings
from ..timer.engine import TimerLifecycleEngine

http_logger = logging.getLogger("chronotrack.http")


def create_app(engine: TimerLifecycleEngine, settings: Settings | None = None) -> FastAPI:
    """Build the API around an already-wired timer engine."""
    settings = settings or Settings()

    app = FastAPI(
        title="ChronoTrack API",
        version=__version__,
        description="Create, start, stop and read stopwatch timers",
    )
    app.state.engine = engine
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One access line per request, skipped under test
    if not settings.is_test:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            http_logger.info(
                "%s %s %d %.1f ms",
                request.method, request.url.path, response.status_code, elapsed_ms,
            )
            return response

    install_error_handlers(app)

    # Include routers
    app.include_router(routes.router, prefix="/api")
    app.include_router(routes.health_router, prefix="/api")

    return app
