# File: agenda_layout/processors/validation.py
"""
Boundary validation for layout input.
Degenerate events are dropped before clustering; bad geometry is rejected.
"""

import datetime
from typing import Iterable, List, Tuple

from agenda_layout.models import Event
from agenda_layout.utils.logger import setup_logger

logger = setup_logger(__name__)


def filter_valid_events(events: Iterable[Event]) -> Tuple[List[Event], List[str]]:
    """
    Split events into usable ones and error messages for the rest.

    An event is dropped when its start or end is not a datetime, or when
    start >= end. Input order is preserved for the kept events.

    Returns:
        (valid_events, errors)
    """
    valid: List[Event] = []
    errors: List[str] = []

    for i, event in enumerate(events):
        event_id = getattr(event, 'id', f'Event {i+1}')
        try:
            start, end = event.start, event.end
            if not isinstance(start, datetime.datetime) or not isinstance(end, datetime.datetime):
                raise TypeError("start or end is not a datetime")
            if start >= end:
                raise ValueError(
                    f"start {start.strftime('%H:%M')} is not before end {end.strftime('%H:%M')}"
                )
            valid.append(event)
        except (AttributeError, TypeError, ValueError) as e:
            error_msg = f"Skipping invalid event '{event_id}': {e}"
            errors.append(error_msg)
            logger.warning(error_msg)

    if errors:
        logger.info(f"Validation complete: {len(valid)} valid events ({len(errors)} skipped)")
    return valid, errors


def validate_horizontal(column: int, total_columns: int, available_width: float, padding: float) -> None:
    """
    Guard the horizontal geometry inputs.

    Raises:
        ValueError: On negative width/padding or an out-of-range column.
    """
    if total_columns < 1:
        raise ValueError(f"total_columns must be at least 1: {total_columns}")
    if not 0 <= column < total_columns:
        raise ValueError(f"column {column} out of range for {total_columns} column(s)")
    if available_width < 0:
        raise ValueError(f"available_width cannot be negative: {available_width}")
    if padding < 0:
        raise ValueError(f"padding cannot be negative: {padding}")


def validate_scale(pixels_per_hour: float) -> None:
    """Raise ValueError unless the time-to-pixel scale is positive."""
    if pixels_per_hour <= 0:
        raise ValueError(f"pixels_per_hour must be positive: {pixels_per_hour}")
