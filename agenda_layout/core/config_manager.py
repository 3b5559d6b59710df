# File: agenda_layout/core/config_manager.py
"""
Centralized configuration management for the agenda layout engine.
Loads grid and logging settings from environment variables (.env supported).
"""

import logging
import os
from typing import List

import pytz
from dotenv import load_dotenv

from agenda_layout.models.grid import (
    GridGeometry,
    DEFAULT_START_HOUR,
    DEFAULT_END_HOUR,
    DAY_PIXELS_PER_HOUR,
    WEEK_PIXELS_PER_MINUTE,
    DAY_MIN_HEIGHT,
    WEEK_MIN_HEIGHT,
    DEFAULT_PADDING,
)

# Load environment variables
load_dotenv()


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    return int(value) if value not in (None, "") else default


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    return float(value) if value not in (None, "") else default


class Config:
    """Application configuration singleton."""

    # Logging
    LOG_LEVEL = os.getenv("AGENDA_LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("AGENDA_LOG_DIR") or None

    # Local timezone used to turn instants into minutes of the day
    TIMEZONE = os.getenv("AGENDA_TIMEZONE", "America/Sao_Paulo")

    # Grid bounds (07:00 - 24:00)
    GRID_START_HOUR = _env_int("AGENDA_GRID_START_HOUR", DEFAULT_START_HOUR)
    GRID_END_HOUR = _env_int("AGENDA_GRID_END_HOUR", DEFAULT_END_HOUR)

    # Day view: 60px per hour, week view: 2.5px per minute
    DAY_PIXELS_PER_HOUR = _env_float("AGENDA_DAY_PIXELS_PER_HOUR", DAY_PIXELS_PER_HOUR)
    WEEK_PIXELS_PER_MINUTE = _env_float("AGENDA_WEEK_PIXELS_PER_MINUTE", WEEK_PIXELS_PER_MINUTE)

    # Short events keep a tappable minimum height
    DAY_MIN_HEIGHT = _env_float("AGENDA_DAY_MIN_HEIGHT", DAY_MIN_HEIGHT)
    WEEK_MIN_HEIGHT = _env_float("AGENDA_WEEK_MIN_HEIGHT", WEEK_MIN_HEIGHT)

    EVENT_PADDING = _env_float("AGENDA_EVENT_PADDING", DEFAULT_PADDING)

    @classmethod
    def get_log_level(cls) -> int:
        """Resolve LOG_LEVEL to a logging constant (INFO when unknown)."""
        level = logging.getLevelName(str(cls.LOG_LEVEL).upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def get_timezone(cls):
        """Return the configured pytz timezone."""
        return pytz.timezone(cls.TIMEZONE)

    @classmethod
    def day_geometry(cls) -> GridGeometry:
        """Grid geometry for the single-day view."""
        return GridGeometry.day(
            start_hour=cls.GRID_START_HOUR,
            end_hour=cls.GRID_END_HOUR,
            pixels_per_hour=cls.DAY_PIXELS_PER_HOUR,
            min_height=cls.DAY_MIN_HEIGHT,
            padding=cls.EVENT_PADDING,
        )

    @classmethod
    def week_geometry(cls) -> GridGeometry:
        """Grid geometry for the week view."""
        return GridGeometry.week(
            pixels_per_minute=cls.WEEK_PIXELS_PER_MINUTE,
            start_hour=cls.GRID_START_HOUR,
            end_hour=cls.GRID_END_HOUR,
            min_height=cls.WEEK_MIN_HEIGHT,
            padding=cls.EVENT_PADDING,
        )

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configured settings are usable."""
        from agenda_layout.utils.logger import setup_logger

        logger = setup_logger(__name__)
        errors: List[str] = []

        if cls.TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown timezone: {cls.TIMEZONE}")

        for name, builder in (("day", cls.day_geometry), ("week", cls.week_geometry)):
            try:
                builder()
            except ValueError as e:
                errors.append(f"Invalid {name} grid: {e}")

        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False

        return True
