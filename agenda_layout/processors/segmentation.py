# File: agenda_layout/processors/segmentation.py
"""
Block segmentation module.
Subtracts the time booked by appointments from a block, leaving the
visible sub-intervals. Shared by the day and week views.
"""

import datetime
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from agenda_layout.models import Event, EventKind, BlockSegment, parse_clock_time
from agenda_layout.utils.logger import setup_logger

logger = setup_logger(__name__)

MinuteRange = Tuple[int, int]


def minutes_since_midnight(
    instant: datetime.datetime,
    day: datetime.date,
    tz: Optional[datetime.tzinfo] = None,
) -> int:
    """
    Minutes between local midnight of `day` and `instant`.

    Aware instants are converted to `tz` first; naive instants are taken as
    local already. An instant on the following midnight maps to 1440.
    """
    if tz is not None and instant.tzinfo is not None:
        instant = instant.astimezone(tz)
    local = instant.replace(tzinfo=None)
    midnight = datetime.datetime.combine(day, datetime.time())
    return math.floor((local - midnight).total_seconds() / 60)


def occupied_ranges(
    block_start: int,
    block_end: int,
    ranges: Iterable[MinuteRange],
) -> List[MinuteRange]:
    """Parts of [block_start, block_end) covered by each overlapping range."""
    occupied: List[MinuteRange] = []
    for start, end in ranges:
        if start < block_end and end > block_start:
            occupied.append((max(start, block_start), min(end, block_end)))
    return occupied


def segment_block(
    block_start: int,
    block_end: int,
    appointment_ranges: Iterable[MinuteRange],
    block_id: str = "",
) -> List[BlockSegment]:
    """
    Compute the visible segments of a block.

    Args:
        block_start: Block start, minutes since midnight
        block_end: Block end, minutes since midnight
        appointment_ranges: (start, end) minute ranges of the day's appointments
        block_id: Identifier carried into every segment

    Returns:
        Non-overlapping segments sorted by start. A block with no intruding
        appointment yields one full segment; a fully booked block yields none.
    """
    if block_start >= block_end:
        logger.warning(f"Block '{block_id}' has no duration ({block_start}-{block_end}), nothing to segment")
        return []

    occupied = occupied_ranges(block_start, block_end, appointment_ranges)
    if not occupied:
        return [BlockSegment(block_id, block_start, block_end, is_full=True)]

    segments: List[BlockSegment] = []
    current_start = block_start

    for start, end in sorted(occupied):
        if current_start < start:
            segments.append(BlockSegment(block_id, current_start, start))
        current_start = max(current_start, end)

    if current_start < block_end:
        segments.append(BlockSegment(block_id, current_start, block_end))

    logger.debug(
        f"Block '{block_id}': {len(occupied)} intruding appointment(s), "
        f"{len(segments)} visible segment(s)"
    )
    return segments


def event_minute_range(
    event: Event,
    day: datetime.date,
    tz: Optional[datetime.tzinfo] = None,
) -> MinuteRange:
    """(start, end) of an event in minutes since midnight of `day`."""
    return (
        minutes_since_midnight(event.start, day, tz),
        minutes_since_midnight(event.end, day, tz),
    )


def local_day(instant: datetime.datetime, tz: Optional[datetime.tzinfo] = None) -> datetime.date:
    """Calendar date of an instant in the given timezone."""
    if tz is not None and instant.tzinfo is not None:
        instant = instant.astimezone(tz)
    return instant.date()


def segment_block_event(
    block: Event,
    events: Iterable[Event],
    tz: Optional[datetime.tzinfo] = None,
) -> List[BlockSegment]:
    """
    Segment a block event against the appointments of the same day.

    Events that are not appointments, and degenerate ones, are ignored.
    """
    day = local_day(block.start, tz)
    block_start, block_end = event_minute_range(block, day, tz)
    ranges = [
        event_minute_range(e, day, tz)
        for e in events
        if e.kind == EventKind.APPOINTMENT and e.is_valid
    ]
    return segment_block(block_start, block_end, ranges, block_id=block.id)


def occupied_minutes(block_start: int, block_end: int, ranges: Iterable[MinuteRange]) -> int:
    """Booked minutes inside the block, overlapping appointments counted once."""
    total = 0
    current_start = current_end = None
    for start, end in sorted(occupied_ranges(block_start, block_end, ranges)):
        if current_end is None or start > current_end:
            if current_end is not None:
                total += current_end - current_start
            current_start, current_end = start, end
        else:
            current_end = max(current_end, end)
    if current_end is not None:
        total += current_end - current_start
    return total


def blocked_minutes(segments: Sequence[BlockSegment]) -> int:
    """Total visible minutes of a block."""
    return sum(s.duration_minutes for s in segments)


def block_range_from_clock(start_time: str, end_time: str) -> MinuteRange:
    """Minute range of a block stored as "HH:MM:SS" wall-clock strings."""
    return parse_clock_time(start_time), parse_clock_time(end_time)


def is_time_blocked(block_ranges: Iterable[MinuteRange], hour: int) -> bool:
    """True when `hour` falls inside [start hour, end hour) of any block."""
    for start, end in block_ranges:
        if start // 60 <= hour < end // 60:
            return True
    return False
