"""Shared pytest fixtures for MyFitness tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from myfitness.bmr.calculator import BMRCalculator  # noqa: E402
from myfitness.settings import Settings  # noqa: E402
from myfitness.timer.engine import TimerEngine  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    monkeypatch.setattr("myfitness.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr("myfitness.settings.SETTINGS_PATH", tmp_path / "settings.json")
    yield tmp_path


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine in IDLE."""
    return TimerEngine("Test Timer", parent=None)


@pytest.fixture
def calculator(qapp):
    return BMRCalculator(parent=None)


@pytest.fixture
def quiet_settings():
    """Settings with audio off so no QSoundEffect is created."""
    return Settings(sound_enabled=False)
