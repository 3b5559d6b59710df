# File: agenda_layout/models/enums.py

from enum import Enum


class EventKind(Enum):
    """Kinds of schedulable items shown on the agenda grid."""
    APPOINTMENT = "appointment"  # Bookable patient or personal appointment
    BLOCK = "block"              # Recurring availability block (lunch, admin...)
