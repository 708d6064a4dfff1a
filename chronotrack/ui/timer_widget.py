"""Main stopwatch widget.

Layout (top → bottom):
    - Elapsed time (``MM:SS``)
    - Status indicator (Running / Stopped)
    - Start/Stop toggle button
    - Error line (hidden until something fails)
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from ..timer.engine import TimerLifecycleEngine
from ..timer.errors import TimerError, TimerNotFound
from ..timer.model import Timer, TimerStatus
from .styles import STATUS_COLORS, STATUS_LABELS, format_elapsed

logger = logging.getLogger(__name__)


class TimerWidget(QWidget):
    """Drives one timer through the engine and shows its live state.

    Signals
    -------
    timer_created(timer_id: str)
        Emitted after the first Start creates a timer.
    timer_forgotten()
        Emitted when the remembered timer no longer exists.
    """

    timer_created = pyqtSignal(str)
    timer_forgotten = pyqtSignal()

    def __init__(
        self,
        engine: TimerLifecycleEngine,
        timer_id: str | None = None,
        parent: QWidget | None = None,
        *,
        sync_interval_ms: int = 1000,
        sync_now: bool = True,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._timer_id = timer_id
        self._timer: Timer | None = None

        self._build_ui()

        self._sync_timer = QTimer(self)
        self._sync_timer.setInterval(sync_interval_ms)
        self._sync_timer.timeout.connect(self.sync)

        self._toggle_btn.clicked.connect(self.toggle)

        # Callers that connect timer_forgotten first pass sync_now=False
        if sync_now:
            self.sync()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._time_label = QLabel(format_elapsed(0), self)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        self._status_label = QLabel(self)
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._status_label)

        self._toggle_btn = QPushButton("Start", self)
        self._toggle_btn.setObjectName("toggleButton")
        layout.addWidget(self._toggle_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self._error_label = QLabel(self)
        self._error_label.setObjectName("errorLabel")
        self._error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._error_label.setVisible(False)
        layout.addWidget(self._error_label)

        self._show_status(TimerStatus.STOPPED)

    # ── public ────────────────────────────────────────────────────────────

    @property
    def timer_id(self) -> str | None:
        return self._timer_id

    @property
    def timer(self) -> Timer | None:
        return self._timer

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    @property
    def button_text(self) -> str:
        return self._toggle_btn.text()

    @property
    def error_text(self) -> str:
        return self._error_label.text() if self._error_label.isVisibleTo(self) else ""

    def toggle(self) -> None:
        """Start when stopped (creating the timer first if needed), else stop."""
        self._toggle_btn.setEnabled(False)
        try:
            if self._timer is not None and self._timer.is_running:
                timer = self._engine.stop(self._timer.id)
            else:
                if self._timer_id is None:
                    created = self._engine.create()
                    self._timer_id = created.id
                    self.timer_created.emit(created.id)
                timer = self._engine.start(self._timer_id)
        except TimerNotFound as exc:
            self._forget()
            self._show_error(f"{exc}. Press Start for a new timer.")
        except TimerError as exc:
            self._show_error(str(exc))
        else:
            self._apply(timer)
        finally:
            self._toggle_btn.setEnabled(True)

    def sync(self) -> None:
        """Re-read the timer.  Reads never write, so this is safe to poll."""
        if self._timer_id is None:
            self._apply(None)
            return
        try:
            timer = self._engine.get(self._timer_id)
        except TimerNotFound:
            self._forget()
        except TimerError as exc:
            self._show_error(f"Sync failed: {exc}")
        else:
            self._apply(timer)

    # ── internal ──────────────────────────────────────────────────────────

    def _forget(self) -> None:
        logger.info("Remembered timer %s is gone", self._timer_id)
        self._timer_id = None
        self._apply(None)
        self.timer_forgotten.emit()

    def _apply(self, timer: Timer | None) -> None:
        self._timer = timer
        self._error_label.setVisible(False)
        self._error_label.clear()

        elapsed = timer.elapsed_seconds if timer else 0
        self._time_label.setText(format_elapsed(elapsed))

        status = timer.status if timer else TimerStatus.STOPPED
        self._show_status(status)
        self._toggle_btn.setText("Stop" if status == TimerStatus.RUNNING else "Start")

        # Poll only while something is changing
        if status == TimerStatus.RUNNING:
            if not self._sync_timer.isActive():
                self._sync_timer.start()
        else:
            self._sync_timer.stop()

    def _show_status(self, status: TimerStatus) -> None:
        self._status_label.setText(STATUS_LABELS[status])
        self._status_label.setStyleSheet(
            f"font-size: 14px; font-weight: 500; color: {STATUS_COLORS[status]};"
        )

    def _show_error(self, message: str) -> None:
        logger.warning("Timer action failed: %s", message)
        self._error_label.setText(message)
        self._error_label.setVisible(True)
