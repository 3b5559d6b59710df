# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable events and grids for all tests.
"""

import pytest
from datetime import datetime, date
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from agenda_layout.models import Event, EventKind, GridGeometry


DAY = date(2026, 3, 2)


def at(hour: int, minute: int = 0) -> datetime:
    """Naive local datetime on the test day."""
    if hour == 24:
        return datetime(DAY.year, DAY.month, DAY.day + 1, 0, minute)
    return datetime(DAY.year, DAY.month, DAY.day, hour, minute)


def appt(event_id: str, start: str, end: str) -> Event:
    """Appointment from "HH:MM" strings."""
    return Event(event_id, _clock(start), _clock(end), EventKind.APPOINTMENT)


def block(event_id: str, start: str, end: str) -> Event:
    """Block from "HH:MM" strings."""
    return Event(event_id, _clock(start), _clock(end), EventKind.BLOCK)


def _clock(value: str) -> datetime:
    hour, minute = value.split(':')
    return at(int(hour), int(minute))


# ==================== Event Fixtures ====================

@pytest.fixture
def scenario_events():
    """Three staggered appointments all active around 09:45-10:00."""
    return [
        appt("A", "09:00", "10:00"),
        appt("B", "09:30", "10:30"),
        appt("C", "09:45", "10:15"),
    ]


@pytest.fixture
def nested_events():
    """B nested inside A."""
    return [
        appt("A", "09:00", "12:00"),
        appt("B", "10:00", "11:00"),
    ]


@pytest.fixture
def back_to_back_events():
    """Five 30-minute appointments with no gaps between them."""
    return [
        appt(f"E{i}", f"{9 + (i * 30) // 60:02d}:{(i * 30) % 60:02d}",
             f"{9 + ((i + 1) * 30) // 60:02d}:{((i + 1) * 30) % 60:02d}")
        for i in range(5)
    ]


@pytest.fixture
def identical_events():
    """Five appointments sharing [10:00, 11:00)."""
    return [appt(f"S{i}", "10:00", "11:00") for i in range(5)]


@pytest.fixture
def clinic_day():
    """A realistic day: appointments, a lunch block and an admin block."""
    return [
        appt("consult-1", "08:00", "09:00"),
        appt("botox", "10:00", "11:30"),
        appt("cleaning", "10:30", "11:00"),
        appt("review", "14:00", "15:00"),
        appt("peeling", "14:00", "15:30"),
        appt("evaluation", "14:15", "14:45"),
        block("lunch", "12:00", "13:30"),
        block("admin", "09:00", "17:00"),
    ]


# ==================== Grid Fixtures ====================

@pytest.fixture
def day_grid():
    """Default day grid (07:00-24:00, 60px/hour)."""
    return GridGeometry.day()


@pytest.fixture
def week_grid():
    """Default week grid (2.5px/minute)."""
    return GridGeometry.week()
