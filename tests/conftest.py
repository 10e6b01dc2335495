"""Shared pytest fixtures for BrewGuide tests."""

import os
import sys

import pytest

# Headless CI: no display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from brewguide.timer.engine import BrewTimer  # noqa: E402
from brewguide.timer.schedule import Preset  # noqa: E402

from helpers import FakeWakeLock  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def wake_lock():
    return FakeWakeLock()


@pytest.fixture
def timer(qapp, wake_lock):
    """Fresh BrewTimer on the 20g preset with a fake wake lock."""
    t = BrewTimer(parent=None, preset=Preset.BEANS_20G, wake_lock=wake_lock)
    yield t
    t.shutdown()


@pytest.fixture
def timer_15g(qapp, wake_lock):
    t = BrewTimer(parent=None, preset=Preset.BEANS_15G, wake_lock=wake_lock)
    yield t
    t.shutdown()
