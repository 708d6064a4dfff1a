"""Main application window."""

from __future__ import annotations

from PyQt6.QtWidgets import QMainWindow

from ..settings import Settings, save_settings
from ..timer.engine import TimerLifecycleEngine
from .styles import build_stylesheet
from .timer_widget import TimerWidget


class ChronoTrackApp(QMainWindow):
    """Single-window stopwatch.  Remembers its timer across launches."""

    def __init__(
        self,
        engine: TimerLifecycleEngine,
        settings: Settings,
        *,
        persist_settings: bool = True,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._persist = persist_settings

        self.setWindowTitle("ChronoTrack")
        self.setMinimumSize(360, 280)
        self.setStyleSheet(build_stylesheet())

        self._timer_widget = TimerWidget(
            engine,
            settings.last_timer_id,
            self,
            sync_interval_ms=settings.sync_interval_ms,
            sync_now=False,
        )
        self._timer_widget.timer_created.connect(self._remember_timer)
        self._timer_widget.timer_forgotten.connect(lambda: self._remember_timer(None))
        self._timer_widget.sync()
        self.setCentralWidget(self._timer_widget)

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    def _remember_timer(self, timer_id: str | None) -> None:
        self._settings.last_timer_id = timer_id
        if self._persist:
            save_settings(self._settings)
