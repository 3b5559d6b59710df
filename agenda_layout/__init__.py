"""
Agenda Layout Engine

Positions a day's appointments and availability blocks on a calendar grid.

Modules:
- models: Event, PositionedEvent, BlockSegment, GridGeometry
- processors.clustering: Conflict clusters (sweep line)
- processors.columns: Greedy column assignment per cluster
- processors.segmentation: Visible parts of blocks around appointments
- processors.geometry: Time/column to pixel mapping
- core.layout_engine: Full layout pass for one day
- core.config_manager: Environment-driven settings
"""

from .models import (
    EventKind,
    Event,
    overlaps,
    event_from_dict,
    PositionedEvent,
    BlockSegment,
    Rect,
    DayLayout,
    GridGeometry,
    parse_clock_time,
)

from .processors.validation import filter_valid_events
from .processors.clustering import sort_events, build_conflict_clusters
from .processors.columns import assign_columns, max_simultaneous
from .processors.segmentation import (
    segment_block,
    segment_block_event,
    occupied_minutes,
    blocked_minutes,
    block_range_from_clock,
    is_time_blocked,
)
from .processors.geometry import (
    minutes_from_grid_start,
    vertical_position,
    height,
    horizontal_geometry,
    event_rect,
    segment_rect,
)
from .core.config_manager import Config
from .core.layout_engine import calculate_layout, LayoutEngine

__all__ = [
    "EventKind",
    "Event",
    "overlaps",
    "event_from_dict",
    "PositionedEvent",
    "BlockSegment",
    "Rect",
    "DayLayout",
    "GridGeometry",
    "parse_clock_time",
    "filter_valid_events",
    "sort_events",
    "build_conflict_clusters",
    "assign_columns",
    "max_simultaneous",
    "segment_block",
    "segment_block_event",
    "occupied_minutes",
    "blocked_minutes",
    "block_range_from_clock",
    "is_time_blocked",
    "minutes_from_grid_start",
    "vertical_position",
    "height",
    "horizontal_geometry",
    "event_rect",
    "segment_rect",
    "Config",
    "calculate_layout",
    "LayoutEngine",
]
