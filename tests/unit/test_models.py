# File: tests/unit/test_models.py
"""
Unit tests for data models.
Tests all dataclasses and their methods.
"""

import pytest
from datetime import datetime, timedelta
from agenda_layout.models.enums import EventKind
from agenda_layout.models.event import Event, overlaps, event_from_dict
from agenda_layout.models.layout import PositionedEvent, BlockSegment, DayLayout
from agenda_layout.models.grid import GridGeometry
from agenda_layout.models.common import parse_clock_time, format_minutes, parse_iso_datetime

from conftest import at, appt


# ==================== Event Tests ====================

class TestEvent:
    """Tests for Event dataclass."""

    def test_event_creation(self):
        """Test basic event creation."""
        event = Event(id="1", start=at(9), end=at(10), title="Consulta")

        assert event.id == "1"
        assert event.kind == EventKind.APPOINTMENT
        assert event.duration_minutes() == 60
        assert event.is_valid is True

    def test_string_kind_converted(self):
        """Test string kind is converted to the enum."""
        assert Event("1", at(9), at(10), kind="block").kind == EventKind.BLOCK
        assert Event("1", at(9), at(10), kind="BLOCK").is_block is True

    def test_unknown_kind_falls_back(self):
        """Test unknown kind defaults to appointment."""
        assert Event("1", at(9), at(10), kind="meeting").kind == EventKind.APPOINTMENT

    def test_degenerate_event_is_constructible(self):
        """Test zero-length events are flagged, not rejected."""
        event = Event("1", at(9), at(9))
        assert event.is_valid is False

    def test_overlap_half_open(self):
        """Test back-to-back events do not overlap."""
        a = appt("A", "09:00", "10:00")
        b = appt("B", "10:00", "11:00")
        c = appt("C", "09:59", "10:01")

        assert overlaps(a, b) is False
        assert overlaps(b, a) is False
        assert a.overlaps_with(c) is True
        assert c.overlaps_with(b) is True

    def test_overlap_nested(self):
        """Test a nested event overlaps its container."""
        outer = appt("A", "09:00", "12:00")
        inner = appt("B", "10:00", "11:00")

        assert overlaps(outer, inner) and overlaps(inner, outer)

    def test_event_from_dict(self):
        """Test creating event from dictionary with ISO strings."""
        event = event_from_dict({
            'id': 42,
            'start': '2026-03-02T09:00:00Z',
            'end': '2026-03-02T10:30:00Z',
            'kind': 'block',
        })

        assert event.id == "42"
        assert event.kind == EventKind.BLOCK
        assert event.duration_minutes() == 90
        assert event.start.tzinfo is not None

    def test_event_from_dict_missing_kind(self):
        """Test missing kind defaults to appointment."""
        event = event_from_dict({'id': '1', 'start': at(9), 'end': at(10), 'kind': None})
        assert event.kind == EventKind.APPOINTMENT

    def test_event_from_dict_invalid_time_raises_error(self):
        """Test unparseable times raise ValueError."""
        with pytest.raises(ValueError, match="invalid start or end"):
            event_from_dict({'id': '1', 'start': 'tomorrow', 'end': '2026-03-02T10:00:00'})


# ==================== Positioned Event Tests ====================

class TestPositionedEvent:
    """Tests for PositionedEvent dataclass."""

    def test_id_delegates_to_event(self):
        """Test id comes from the wrapped event."""
        positioned = PositionedEvent(appt("A", "09:00", "10:00"), 0, 1)
        assert positioned.id == "A"

    @pytest.mark.parametrize("column,total", [(1, 1), (-1, 2), (0, 0)])
    def test_column_out_of_range_raises_error(self, column, total):
        """Test column bounds are enforced."""
        with pytest.raises(ValueError, match="out of range"):
            PositionedEvent(appt("A", "09:00", "10:00"), column, total)


# ==================== Block Segment Tests ====================

class TestBlockSegment:
    """Tests for BlockSegment dataclass."""

    def test_segment_properties(self):
        """Test derived properties."""
        segment = BlockSegment("lunch", 12 * 60, 13 * 60 + 30)

        assert segment.id == "lunch-720-810"
        assert segment.duration_minutes == 90
        assert segment.start_time_formatted == "12:00"
        assert segment.end_time_formatted == "13:30"

    def test_full_segment_id(self):
        """Test a segment covering the whole block has a stable id."""
        assert BlockSegment("lunch", 720, 810, is_full=True).id == "lunch-full"

    def test_empty_segment_raises_error(self):
        """Test start >= end is rejected."""
        with pytest.raises(ValueError, match="start must be before end"):
            BlockSegment("lunch", 720, 720)


# ==================== Day Layout Tests ====================

class TestDayLayout:
    """Tests for DayLayout container."""

    def test_empty_layout(self):
        """Test an empty day has nothing to draw."""
        layout = DayLayout()

        assert layout.max_columns == 0
        assert layout.get("A") is None
        assert layout.all_segments() == []

    def test_lookup_and_flatten(self):
        """Test lookup by id and flattened segments."""
        layout = DayLayout(
            positioned=[PositionedEvent(appt("A", "09:00", "10:00"), 1, 3)],
            segments={
                "b2": [BlockSegment("b2", 600, 660)],
                "b1": [BlockSegment("b1", 540, 570), BlockSegment("b1", 700, 720)],
            },
        )

        assert layout.get("A").column == 1
        assert layout.max_columns == 3
        assert [s.id for s in layout.all_segments()] == ["b1-540-570", "b2-600-660", "b1-700-720"]


# ==================== Grid Tests ====================

class TestGridGeometry:
    """Tests for GridGeometry dataclass."""

    def test_day_defaults(self):
        """Test day grid constants."""
        grid = GridGeometry.day()

        assert grid.start_hour == 7
        assert grid.total_hours == 17
        assert grid.total_minutes == 1020
        assert grid.total_height == 1020
        assert grid.min_height == 15

    def test_week_scale(self):
        """Test week grid is minute based."""
        grid = GridGeometry.week()

        assert grid.pixels_per_hour == 150
        assert grid.pixels_per_minute == 2.5
        assert grid.min_height == 20
        assert grid.total_height == 2550
        assert grid.segment_min_height == 37.5

    def test_day_segment_floor_follows_min_height(self):
        """Test day-view segments share the event minimum height."""
        assert GridGeometry.day().segment_min_height == 15

    @pytest.mark.parametrize("kwargs", [
        {'start_hour': 10, 'end_hour': 9},
        {'end_hour': 25},
        {'pixels_per_hour': 0},
        {'min_height': -1},
        {'padding': -4},
        {'segment_min_minutes': -15},
    ])
    def test_invalid_grid_raises_error(self, kwargs):
        """Test invalid geometry is rejected."""
        with pytest.raises(ValueError):
            GridGeometry(**kwargs)


# ==================== Helper Tests ====================

class TestCommonHelpers:
    """Tests for parsing and formatting helpers."""

    @pytest.mark.parametrize("value,expected", [
        ("09:00", 540),
        ("12:30:00", 750),
        ("00:00:59", 0),
        ("24:00", 1440),
    ])
    def test_parse_clock_time(self, value, expected):
        """Test wall-clock strings become minutes."""
        assert parse_clock_time(value) == expected

    @pytest.mark.parametrize("value", ["9", "ab:cd", "25:00", "10:75", "24:30"])
    def test_parse_clock_time_invalid(self, value):
        """Test malformed clock strings raise ValueError."""
        with pytest.raises(ValueError):
            parse_clock_time(value)

    def test_format_minutes(self):
        """Test minutes are formatted as HH:MM."""
        assert format_minutes(545) == "09:05"
        assert format_minutes(1440) == "24:00"

    def test_parse_iso_datetime(self):
        """Test ISO parsing with Z suffix and bad input."""
        assert parse_iso_datetime("2026-03-02T09:00:00Z").utcoffset() == timedelta(0)
        assert parse_iso_datetime("not a date") is None
        assert parse_iso_datetime(None) is None
