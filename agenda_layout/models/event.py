# File: agenda_layout/models/event.py

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Any, Dict
from .enums import EventKind
from .common import parse_iso_datetime

@dataclass
class Event:
    """
    A single schedulable item on one day of the agenda.

    Intervals are half-open: [start, end). An event ending exactly when
    another begins does not overlap it.

    Degenerate events (start >= end) can be constructed; the layout engine
    filters them out before clustering instead of failing.
    """
    id: str
    start: datetime
    end: datetime
    kind: EventKind = EventKind.APPOINTMENT
    title: Optional[str] = None

    def __post_init__(self):
        """Auto-convert string kind to Enum."""
        if isinstance(self.kind, str):
            try:
                self.kind = EventKind(self.kind.lower())
            except ValueError:
                self.kind = EventKind.APPOINTMENT

    @property
    def is_valid(self) -> bool:
        """True when the interval has a positive length."""
        return self.start < self.end

    @property
    def is_block(self) -> bool:
        return self.kind == EventKind.BLOCK

    def duration_minutes(self) -> int:
        """Calculate event duration in minutes."""
        return int((self.end - self.start).total_seconds() / 60)

    def overlaps_with(self, other: 'Event') -> bool:
        """Check if this event overlaps with another."""
        return overlaps(self, other)


def overlaps(a: Event, b: Event) -> bool:
    """Half-open interval overlap: a.start < b.end and b.start < a.end."""
    return a.start < b.end and b.start < a.end


def event_from_dict(data: Dict[str, Any]) -> Event:
    """
    Create an Event from a dictionary.

    'start' and 'end' may be datetimes or ISO-8601 strings. An unknown
    'kind' falls back to APPOINTMENT.

    Raises:
        ValueError: If start or end is missing or cannot be parsed.
    """
    start = data.get('start')
    end = data.get('end')
    if isinstance(start, str):
        start = parse_iso_datetime(start)
    if isinstance(end, str):
        end = parse_iso_datetime(end)

    if not isinstance(start, datetime) or not isinstance(end, datetime):
        raise ValueError(f"Event {data.get('id', '?')!r} has an invalid start or end time")

    return Event(
        id=str(data.get('id', '')),
        start=start,
        end=end,
        kind=data.get('kind') or EventKind.APPOINTMENT,
        title=data.get('title'),
    )
