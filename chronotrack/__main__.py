"""Allow running ChronoTrack as a module: python -m chronotrack.

    python -m chronotrack serve [--host H] [--port P]
    python -m chronotrack gui
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from .database.db import configure_path, init_db
from .database.store import SqlTimerStore
from .log import configure_logging
from .settings import Settings, load_settings
from .timer.engine import TimerLifecycleEngine

logger = logging.getLogger("chronotrack")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chronotrack", description="Durable stopwatch timers")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the HTTP API (default)")
    serve.add_argument("--host", default=None, help="Bind address")
    serve.add_argument("--port", type=int, default=None, help="Bind port")

    sub.add_parser("gui", help="Open the desktop stopwatch")

    parser.set_defaults(command="serve", host=None, port=None)
    return parser.parse_args(argv)


def build_engine(settings: Settings) -> TimerLifecycleEngine:
    """Point the database at the configured file and wire the engine."""
    if settings.db_path:
        configure_path(settings.db_path)
    init_db()
    logger.info("Database initialized")
    return TimerLifecycleEngine(SqlTimerStore())


def _serve(engine: TimerLifecycleEngine, settings: Settings, args: argparse.Namespace) -> int:
    import uvicorn

    from .api.app import create_app

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("Timer API listening on %s:%d [%s]", host, port, settings.environment)
    uvicorn.run(create_app(engine, settings), host=host, port=port, log_level="info")
    logger.info("Server closed")
    return 0


def _gui(engine: TimerLifecycleEngine, settings: Settings) -> int:
    from PyQt6.QtWidgets import QApplication

    from .ui.app import ChronoTrackApp

    app = QApplication(sys.argv)
    app.setApplicationName("ChronoTrack")
    app.setOrganizationName("ChronoTrack")

    window = ChronoTrackApp(engine, settings)
    window.show()
    return app.exec()


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    settings = load_settings()
    configure_logging(settings)

    try:
        engine = build_engine(settings)
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Failed to initialize database: %s", exc)
        sys.exit(1)

    if args.command == "gui":
        sys.exit(_gui(engine, settings))
    sys.exit(_serve(engine, settings, args))


if __name__ == "__main__":
    main()
