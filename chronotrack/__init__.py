"""ChronoTrack: durable stopwatch timers."""

__version__ = "0.1.0"
