"""Shared pytest fixtures for ChronoTrack tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from chronotrack.database.db import configure_engine, init_db
from chronotrack.database.store import SqlTimerStore
from chronotrack.timer import InMemoryTimerStore, ManualClock, TimerLifecycleEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def clock():
    """Manual clock starting at 2024-01-01T00:00:00Z."""
    return ManualClock()


@pytest.fixture
def memory_store():
    return InMemoryTimerStore()


@pytest.fixture
def sql_store():
    return SqlTimerStore()


@pytest.fixture(params=["memory", "sql"])
def store(request, memory_store, sql_store):
    """Each store-agnostic test runs once per backend."""
    return memory_store if request.param == "memory" else sql_store


@pytest.fixture
def engine(store, clock):
    """Engine over both backends with a manual clock."""
    return TimerLifecycleEngine(store, clock)


@pytest.fixture
def memory_engine(memory_store, clock):
    return TimerLifecycleEngine(memory_store, clock)
