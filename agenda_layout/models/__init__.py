from .enums import EventKind
from .common import parse_iso_datetime, parse_clock_time, format_minutes
from .event import Event, overlaps, event_from_dict
from .layout import PositionedEvent, BlockSegment, Rect, DayLayout
from .grid import GridGeometry

__all__ = [
    "EventKind",
    "parse_iso_datetime",
    "parse_clock_time",
    "format_minutes",
    "Event",
    "overlaps",
    "event_from_dict",
    "PositionedEvent",
    "BlockSegment",
    "Rect",
    "DayLayout",
    "GridGeometry"
]
