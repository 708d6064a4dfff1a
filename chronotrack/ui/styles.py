"""QSS stylesheet and status colors for ChronoTrack."""

from __future__ import annotations

from ..timer.model import TimerStatus

# ── status colors ────────────────────────────────────────────────────────

STATUS_COLORS: dict[TimerStatus, str] = {
    TimerStatus.RUNNING: "#10B981",   # green
    TimerStatus.STOPPED: "#6B7280",   # gray
}

STATUS_LABELS: dict[TimerStatus, str] = {
    TimerStatus.RUNNING: "Running",
    TimerStatus.STOPPED: "Stopped",
}

_PALETTE: dict[str, str] = {
    "bg":      "#1A1A2E",
    "surface": "#2A2A4A",
    "text":    "#E2E2F0",
    "accent":  "#CBA6F7",
    "danger":  "#F38BA8",
}


def format_elapsed(seconds: int) -> str:
    """``MM:SS``; minutes keep counting past 59."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or _PALETTE
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
    }}
    QLabel#timeLabel {{
        font-size: 64px;
        font-weight: 600;
    }}
    QLabel#errorLabel {{
        color: {p['danger']};
    }}
    QPushButton#toggleButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border-radius: 8px;
        padding: 10px 32px;
        font-size: 18px;
    }}
    QPushButton#toggleButton:disabled {{
        background-color: {p['surface']};
    }}
    """
