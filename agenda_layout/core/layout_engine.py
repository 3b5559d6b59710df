# File: agenda_layout/core/layout_engine.py
"""
Overlap layout engine for the agenda grid.
Coordinates validation, clustering, column assignment, block segmentation
and geometry mapping for one day.

The engine keeps no state between calls.
"""

import dataclasses
import datetime
from typing import Dict, Iterable, List, Optional

from agenda_layout.core.config_manager import Config
from agenda_layout.utils.logger import LoggerMixin
from agenda_layout.models import (
    Event, EventKind, PositionedEvent, BlockSegment, DayLayout, GridGeometry, Rect
)
from agenda_layout.processors.validation import filter_valid_events
from agenda_layout.processors.clustering import build_conflict_clusters
from agenda_layout.processors.columns import assign_columns
from agenda_layout.processors.segmentation import segment_block_event
from agenda_layout.processors.geometry import event_rect, segment_rect


def calculate_layout(events: Iterable[Event]) -> List[PositionedEvent]:
    """
    Position every event of a day.

    Both appointments and blocks are treated as plain intervals. The input
    is expected to be valid (start < end); see filter_valid_events().

    Returns:
        PositionedEvent records, cluster by cluster in chronological order
    """
    result: List[PositionedEvent] = []
    for cluster in build_conflict_clusters(events):
        result.extend(assign_columns(cluster))
    return result


class LayoutEngine(LoggerMixin):
    """
    Lays out one day column of the agenda.

    Holds only its grid geometry and timezone; every call works on the
    events passed in.
    """

    def __init__(
        self,
        grid: Optional[GridGeometry] = None,
        timezone: Optional[datetime.tzinfo] = None,
        columns_for_blocks: bool = False,
    ):
        """
        Initialize the engine.

        Args:
            grid: Grid geometry (default: Config.day_geometry())
            timezone: Timezone for minutes-of-day math (default: Config.get_timezone())
            columns_for_blocks: Give blocks columns too, instead of drawing them
                only as segments behind the appointments
        """
        self.grid = grid or Config.day_geometry()
        self.timezone = timezone if timezone is not None else Config.get_timezone()
        self.columns_for_blocks = columns_for_blocks

    @classmethod
    def for_week_view(cls, **kwargs) -> 'LayoutEngine':
        """Engine using the week-view grid scale."""
        kwargs.setdefault('grid', Config.week_geometry())
        return cls(**kwargs)

    def layout_day(self, events: Iterable[Event]) -> DayLayout:
        """
        Run a full layout pass.

        Pipeline Steps:
            1. Drop degenerate events
            2. Move every instant into the engine timezone
            3. Cluster and assign columns (appointments, plus blocks if enabled)
            4. Segment every block against the day's appointments
        """
        valid, skipped = filter_valid_events(events)
        valid = [self._localize_event(e) for e in valid]

        appointments = [e for e in valid if e.kind == EventKind.APPOINTMENT]
        columned = valid if self.columns_for_blocks else appointments

        clusters = build_conflict_clusters(columned)
        positioned = [p for cluster in clusters for p in assign_columns(cluster)]

        segments: Dict[str, List[BlockSegment]] = {}
        for block in (e for e in valid if e.kind == EventKind.BLOCK):
            segments[block.id] = segment_block_event(block, appointments, self.timezone)

        day_layout = DayLayout(
            positioned=positioned,
            segments=segments,
            skipped=skipped,
            cluster_count=len(clusters),
        )
        self.logger.info(
            f"Laid out {len(positioned)} events in {day_layout.cluster_count} clusters "
            f"(max {day_layout.max_columns} columns), {len(segments)} blocks segmented, "
            f"{len(skipped)} skipped"
        )
        return day_layout

    def _localize(self, instant: datetime.datetime) -> datetime.datetime:
        """Aware instant in the engine timezone; naive ones are read as local wall-clock time."""
        if instant.tzinfo is not None:
            return instant.astimezone(self.timezone)
        if hasattr(self.timezone, 'localize'):
            return self.timezone.localize(instant)
        return instant.replace(tzinfo=self.timezone)

    def _localize_event(self, event: Event) -> Event:
        """Copy of an event with both bounds in the engine timezone."""
        return dataclasses.replace(
            event, start=self._localize(event.start), end=self._localize(event.end)
        )

    def event_rects(self, day_layout: DayLayout, available_width: float) -> Dict[str, Rect]:
        """Rectangles of the positioned events, keyed by event id."""
        return {
            p.id: event_rect(p, self.grid, available_width, self.timezone)
            for p in day_layout.positioned
        }

    def segment_rects(
        self,
        day_layout: DayLayout,
        available_width: float,
        inset: Optional[float] = None,
    ) -> Dict[str, Rect]:
        """Rectangles of the block segments, keyed by segment id."""
        inset = self.grid.padding if inset is None else inset
        return {
            s.id: segment_rect(s, self.grid, available_width, inset)
            for s in day_layout.all_segments()
        }
