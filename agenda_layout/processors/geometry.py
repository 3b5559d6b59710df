# File: agenda_layout/processors/geometry.py
"""
Geometry mapping module.
Translates times and columns into grid coordinates.
"""

import datetime
from typing import Optional, Tuple

from agenda_layout.models import PositionedEvent, BlockSegment, Rect, GridGeometry
from agenda_layout.processors.validation import validate_horizontal, validate_scale


def minutes_from_grid_start(
    instant: datetime.datetime,
    grid_start_hour: int,
    tz: Optional[datetime.tzinfo] = None,
) -> int:
    """Wall-clock minutes between the grid start hour and `instant`."""
    if tz is not None and instant.tzinfo is not None:
        instant = instant.astimezone(tz)
    return (instant.hour - grid_start_hour) * 60 + instant.minute


def vertical_position(
    instant: datetime.datetime,
    grid_start_hour: int,
    pixels_per_hour: float,
    tz: Optional[datetime.tzinfo] = None,
) -> float:
    """
    Y offset of an instant: hours since grid start times the scale.

    Negative when the instant precedes the grid start; clamping is up to the caller.
    """
    validate_scale(pixels_per_hour)
    return minutes_from_grid_start(instant, grid_start_hour, tz) / 60.0 * pixels_per_hour


def height(
    start: datetime.datetime,
    end: datetime.datetime,
    pixels_per_hour: float,
    min_height: float = 0.0,
) -> float:
    """Height of [start, end) on the grid, never below `min_height`."""
    validate_scale(pixels_per_hour)
    hours = (end - start).total_seconds() / 3600.0
    return max(hours * pixels_per_hour, min_height)


def horizontal_geometry(
    column: int,
    total_columns: int,
    available_width: float,
    padding: float = 4.0,
) -> Tuple[float, float]:
    """
    Width and x offset of a column.

    width = (available_width - padding) / total_columns
    x_offset = column * width + padding / 2

    Returns:
        (width, x_offset)
    """
    validate_horizontal(column, total_columns, available_width, padding)
    width = (available_width - padding) / total_columns
    return width, column * width + padding / 2


def event_rect(
    positioned: PositionedEvent,
    grid: GridGeometry,
    available_width: float,
    tz: Optional[datetime.tzinfo] = None,
) -> Rect:
    """Rectangle of a positioned event on the given grid."""
    width, x = horizontal_geometry(
        positioned.column, positioned.total_columns, available_width, grid.padding
    )
    event = positioned.event
    return Rect(
        x=x,
        y=vertical_position(event.start, grid.start_hour, grid.pixels_per_hour, tz),
        width=width,
        height=height(event.start, event.end, grid.pixels_per_hour, grid.min_height),
    )


def segment_rect(
    segment: BlockSegment,
    grid: GridGeometry,
    available_width: float,
    inset: float = 4.0,
) -> Rect:
    """
    Rectangle of a block segment. Segments span the column minus `inset`
    on each side and are clamped to the top of the grid.
    """
    if available_width < 0:
        raise ValueError(f"available_width cannot be negative: {available_width}")
    y = (segment.start_minutes - grid.start_hour * 60) * grid.pixels_per_minute
    return Rect(
        x=inset,
        y=max(0.0, y),
        width=max(0.0, available_width - inset * 2),
        height=max(segment.duration_minutes * grid.pixels_per_minute, grid.segment_min_height),
    )
