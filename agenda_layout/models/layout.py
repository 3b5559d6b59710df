# File: agenda_layout/models/layout.py
"""
Output records produced by a layout pass.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from .event import Event
from .common import format_minutes

@dataclass(frozen=True)
class PositionedEvent:
    """An event with its column inside its conflict cluster."""
    event: Event
    column: int         # 0-based column in the cluster
    total_columns: int  # Column count shared by the whole cluster

    def __post_init__(self):
        """Validate column bounds."""
        if not 0 <= self.column < self.total_columns:
            raise ValueError(
                f"Column {self.column} out of range for {self.total_columns} "
                f"column(s): {self.event.id}"
            )

    @property
    def id(self) -> str:
        return self.event.id


@dataclass(frozen=True)
class BlockSegment:
    """Visible part of a block, in minutes since the start of the day."""
    block_id: str
    start_minutes: int
    end_minutes: int
    is_full: bool = False  # True when nothing intrudes on the block

    def __post_init__(self):
        """Validate segment bounds."""
        if self.start_minutes >= self.end_minutes:
            raise ValueError(
                f"Segment start must be before end: "
                f"{self.block_id} [{self.start_minutes}, {self.end_minutes})"
            )

    @property
    def id(self) -> str:
        if self.is_full:
            return f"{self.block_id}-full"
        return f"{self.block_id}-{self.start_minutes}-{self.end_minutes}"

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    @property
    def start_time_formatted(self) -> str:
        return format_minutes(self.start_minutes)

    @property
    def end_time_formatted(self) -> str:
        return format_minutes(self.end_minutes)


@dataclass(frozen=True)
class Rect:
    """Renderable rectangle in grid coordinates."""
    x: float
    y: float
    width: float
    height: float


@dataclass
class DayLayout:
    """Result of laying out one day of the agenda."""
    positioned: List[PositionedEvent] = field(default_factory=list)
    segments: Dict[str, List[BlockSegment]] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)
    cluster_count: int = 0

    @property
    def max_columns(self) -> int:
        """Widest cluster of the day (0 when there is nothing to draw)."""
        return max((p.total_columns for p in self.positioned), default=0)

    def get(self, event_id: str) -> Optional[PositionedEvent]:
        """Look up the positioned record for an event id."""
        for positioned in self.positioned:
            if positioned.id == event_id:
                return positioned
        return None

    def all_segments(self) -> List[BlockSegment]:
        """Flatten the segments of every block, ordered by start."""
        flat = [s for segments in self.segments.values() for s in segments]
        return sorted(flat, key=lambda s: (s.start_minutes, s.block_id))
