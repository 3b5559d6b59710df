# File: agenda_layout/models/common.py

from datetime import datetime
from typing import Optional

def parse_iso_datetime(date_str: Optional[str]) -> Optional[datetime]:
    """Robustly parse ISO date strings with 'Z' or offsets."""
    if not date_str:
        return None
    try:
        # fromisoformat() only understands 'Z' from Python 3.11 on
        clean_str = date_str.replace('Z', '+00:00')
        return datetime.fromisoformat(clean_str)
    except ValueError:
        return None


def parse_clock_time(time_str: str) -> int:
    """
    Convert a wall-clock string ("HH:MM" or "HH:MM:SS") into minutes since midnight.

    Seconds are ignored. "24:00" is accepted and maps to 1440 so a block can
    run until the end of the day.

    Raises:
        ValueError: If the string is not a valid clock time.
    """
    parts = str(time_str).strip().split(':')
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid clock time: {time_str!r}")
    try:
        hour, minute = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Invalid clock time: {time_str!r}") from None

    if not (0 <= minute < 60) or not (0 <= hour <= 24) or (hour == 24 and minute):
        raise ValueError(f"Clock time out of range: {time_str!r}")
    return hour * 60 + minute


def format_minutes(minutes: int) -> str:
    """Format minutes since midnight as "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
