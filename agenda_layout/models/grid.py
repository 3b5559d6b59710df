# File: agenda_layout/models/grid.py
"""
Data models for the agenda time grid.
"""

from dataclasses import dataclass
from typing import Optional

# Defaults of the clinic agenda: 07:00-24:00 grid
DEFAULT_START_HOUR = 7
DEFAULT_END_HOUR = 24
DAY_PIXELS_PER_HOUR = 60.0
WEEK_PIXELS_PER_MINUTE = 2.5  # 15min = 37.5 | 60min = 150
DAY_MIN_HEIGHT = 15.0
WEEK_MIN_HEIGHT = 20.0
DEFAULT_PADDING = 4.0
WEEK_SEGMENT_MIN_MINUTES = 15  # Block segments in the week view: 15min = 37.5


@dataclass(frozen=True)
class GridGeometry:
    """Vertical scale and spacing of a day column."""
    start_hour: int = DEFAULT_START_HOUR
    end_hour: int = DEFAULT_END_HOUR
    pixels_per_hour: float = DAY_PIXELS_PER_HOUR
    min_height: float = DAY_MIN_HEIGHT
    padding: float = DEFAULT_PADDING
    segment_min_minutes: Optional[float] = None  # None: segments floor at min_height

    def __post_init__(self):
        """Validate grid bounds and scale."""
        if not 0 <= self.start_hour < self.end_hour <= 24:
            raise ValueError(
                f"Invalid grid hours: {self.start_hour}-{self.end_hour}"
            )
        if self.pixels_per_hour <= 0:
            raise ValueError(f"pixels_per_hour must be positive: {self.pixels_per_hour}")
        if self.min_height < 0:
            raise ValueError(f"min_height cannot be negative: {self.min_height}")
        if self.padding < 0:
            raise ValueError(f"padding cannot be negative: {self.padding}")
        if self.segment_min_minutes is not None and self.segment_min_minutes < 0:
            raise ValueError(f"segment_min_minutes cannot be negative: {self.segment_min_minutes}")

    @classmethod
    def day(cls, **overrides) -> 'GridGeometry':
        """Compact scale used by the single-day view."""
        return cls(**overrides)

    @classmethod
    def week(cls, pixels_per_minute: float = WEEK_PIXELS_PER_MINUTE, **overrides) -> 'GridGeometry':
        """Minute-based scale used by the week view."""
        overrides.setdefault('min_height', WEEK_MIN_HEIGHT)
        overrides.setdefault('segment_min_minutes', WEEK_SEGMENT_MIN_MINUTES)
        return cls(pixels_per_hour=pixels_per_minute * 60, **overrides)

    @property
    def segment_min_height(self) -> float:
        """Smallest height a block segment is drawn with."""
        if self.segment_min_minutes is None:
            return self.min_height
        return self.segment_min_minutes * self.pixels_per_minute

    @property
    def pixels_per_minute(self) -> float:
        return self.pixels_per_hour / 60.0

    @property
    def total_hours(self) -> int:
        return self.end_hour - self.start_hour

    @property
    def total_minutes(self) -> int:
        return self.total_hours * 60

    @property
    def total_height(self) -> float:
        return self.total_hours * self.pixels_per_hour
