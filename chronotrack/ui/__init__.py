"""UI package."""

from .app import ChronoTrackApp
from .timer_widget import TimerWidget

__all__ = ["ChronoTrackApp", "TimerWidget"]
