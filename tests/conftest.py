"""Shared pytest fixtures for FocusRounds tests."""

import os
import sys

import pytest

# No display in CI; must be set before the QApplication exists.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from focusrounds.timer.config import TimerConfig
from focusrounds.timer.engine import PhaseEngine

from helpers import FakeClock, RecordingNotifier, RecordingWindow


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def settings_path(tmp_path, monkeypatch):
    """Point every test at a throwaway settings file."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr("focusrounds.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr("focusrounds.settings.SETTINGS_PATH", path)
    return path


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def window():
    return RecordingWindow()


@pytest.fixture
def config():
    return TimerConfig()


@pytest.fixture
def engine(qapp, config, notifier, window, clock):
    """Fresh PhaseEngine on a fake clock with default config (25/5 x4)."""
    eng = PhaseEngine(config, notifier=notifier, window=window, clock=clock)
    yield eng
    eng._qt_timer.stop()


@pytest.fixture
def engine_two_rounds(qapp, notifier, window, clock):
    """25/5 with two rounds, the shape used by most scenario tests."""
    eng = PhaseEngine(
        TimerConfig(focus_minutes=25, break_minutes=5, rounds=2),
        notifier=notifier, window=window, clock=clock,
    )
    yield eng
    eng._qt_timer.stop()
