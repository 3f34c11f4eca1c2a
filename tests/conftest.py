"""Pytest fixtures shared across the suite."""
import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path so 'elapsed' resolves without an install
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from elapsed.clock import SequenceClock  # noqa: E402
from elapsed.config import TIMING_SETTINGS  # noqa: E402
from elapsed.timer import Timer  # noqa: E402


@pytest.fixture()
def reports():
    """Collects every value handed to a reporter."""
    return []


@pytest.fixture()
def timer_factory():
    """Build a Timer driven by a fixed sequence of clock readings."""
    def _make(*readings: int) -> Timer:
        return Timer(SequenceClock(readings))
    return _make


@pytest.fixture(autouse=True)
def _restore_timing_settings():
    snapshot = dict(TIMING_SETTINGS)
    yield
    TIMING_SETTINGS.clear()
    TIMING_SETTINGS.update(snapshot)
