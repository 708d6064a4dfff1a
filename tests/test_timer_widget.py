"""Tests for the desktop stopwatch widget and main window."""

from __future__ import annotations

import uuid

import pytest

from chronotrack.settings import Settings
from chronotrack.timer import StorageFailure, TimerLifecycleEngine
from chronotrack.ui.app import ChronoTrackApp
from chronotrack.ui.styles import format_elapsed
from chronotrack.ui.timer_widget import TimerWidget

from helpers import BrokenStore, SignalCollector


class TestFormatElapsed:
    def test_zero(self):
        assert format_elapsed(0) == "00:00"

    def test_minutes_and_seconds(self):
        assert format_elapsed(125) == "02:05"

    def test_past_an_hour(self):
        assert format_elapsed(75 * 60) == "75:00"

    def test_negative_clamped(self):
        assert format_elapsed(-3) == "00:00"


@pytest.mark.usefixtures("qapp")
class TestTimerWidget:

    def test_initial_state(self, memory_engine):
        w = TimerWidget(memory_engine)
        assert w.timer_id is None
        assert w.time_text == "00:00"
        assert w.status_text == "Stopped"
        assert w.button_text == "Start"
        assert w.error_text == ""

    def test_first_start_creates_and_starts(self, memory_engine):
        w = TimerWidget(memory_engine)
        created = SignalCollector()
        w.timer_created.connect(created)

        w.toggle()

        assert len(created) == 1
        assert w.timer_id == created.last
        assert w.status_text == "Running"
        assert w.button_text == "Stop"

    def test_sync_shows_live_elapsed(self, memory_engine, clock):
        w = TimerWidget(memory_engine)
        w.toggle()
        clock.advance(65)
        w.sync()
        assert w.time_text == "01:05"

    def test_stop_then_restart_reuses_timer(self, memory_engine, memory_store, clock):
        w = TimerWidget(memory_engine)
        w.toggle()
        first_id = w.timer_id
        clock.advance(3)
        w.toggle()
        assert w.status_text == "Stopped"
        assert w.time_text == "00:03"

        w.toggle()
        assert w.timer_id == first_id
        assert len(memory_store) == 1

    def test_resumes_remembered_timer(self, memory_engine, clock):
        timer = memory_engine.create()
        memory_engine.start(timer.id)
        clock.advance(42)
        w = TimerWidget(memory_engine, timer.id)
        assert w.time_text == "00:42"
        assert w.status_text == "Running"

    def test_forgets_deleted_timer(self, memory_engine):
        timer = memory_engine.create()
        w = TimerWidget(memory_engine, timer.id)
        forgotten = SignalCollector()
        w.timer_forgotten.connect(forgotten)

        memory_engine.delete(timer.id)
        w.sync()

        assert w.timer_id is None
        assert len(forgotten) == 1
        assert w.time_text == "00:00"

    def test_start_on_deleted_timer_forgets_it(self, memory_engine, memory_store):
        timer = memory_engine.create()
        w = TimerWidget(memory_engine, timer.id)
        forgotten = SignalCollector()
        w.timer_forgotten.connect(forgotten)

        memory_engine.delete(timer.id)
        w.toggle()

        assert w.timer_id is None
        assert len(forgotten) == 1
        assert "Timer not found" in w.error_text

        w.toggle()
        assert w.timer_id is not None
        assert w.timer_id != timer.id
        assert w.status_text == "Running"
        assert w.error_text == ""
        assert len(memory_store) == 1

    def test_stop_on_deleted_running_timer_forgets_it(self, memory_engine):
        w = TimerWidget(memory_engine)
        w.toggle()
        memory_engine.delete(w.timer_id)

        w.toggle()

        assert w.timer_id is None
        assert w.status_text == "Stopped"
        assert w.button_text == "Start"

    def test_errors_are_shown_not_raised(self, clock):
        engine = TimerLifecycleEngine(BrokenStore(StorageFailure("db down")), clock)
        w = TimerWidget(engine)
        w.toggle()
        assert "db down" in w.error_text
        assert w.timer_id is None

    def test_successful_action_clears_error(self, memory_engine, clock):
        w = TimerWidget(memory_engine)
        w._show_error("earlier failure")
        w.toggle()
        assert w.error_text == ""


@pytest.mark.usefixtures("qapp")
class TestChronoTrackApp:

    def test_remembers_created_timer(self, memory_engine):
        settings = Settings()
        window = ChronoTrackApp(memory_engine, settings, persist_settings=False)
        window.timer_widget.toggle()
        assert settings.last_timer_id == window.timer_widget.timer_id

    def test_persists_to_disk(self, memory_engine, tmp_path, monkeypatch):
        monkeypatch.setattr("chronotrack.settings.SETTINGS_PATH", tmp_path / "s.json")
        monkeypatch.setattr("chronotrack.settings.APP_SUPPORT_DIR", tmp_path)
        from chronotrack.settings import load_settings

        window = ChronoTrackApp(memory_engine, Settings())
        window.timer_widget.toggle()
        assert load_settings(environ={}).last_timer_id == window.timer_widget.timer_id

    def test_clears_forgotten_timer(self, memory_engine):
        timer = memory_engine.create()
        settings = Settings(last_timer_id=timer.id)
        window = ChronoTrackApp(memory_engine, settings, persist_settings=False)
        memory_engine.delete(timer.id)
        window.timer_widget.sync()
        assert settings.last_timer_id is None

    def test_forgets_stale_timer_remembered_at_launch(self, memory_engine, tmp_path, monkeypatch):
        monkeypatch.setattr("chronotrack.settings.SETTINGS_PATH", tmp_path / "s.json")
        monkeypatch.setattr("chronotrack.settings.APP_SUPPORT_DIR", tmp_path)
        from chronotrack.settings import load_settings

        settings = Settings(last_timer_id=str(uuid.uuid4()))
        window = ChronoTrackApp(memory_engine, settings)

        assert window.timer_widget.timer_id is None
        assert settings.last_timer_id is None
        assert load_settings(environ={}).last_timer_id is None
