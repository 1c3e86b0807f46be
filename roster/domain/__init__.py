"""Domain models for the weekly roster."""

from .models import FIELD_ALIASES, PhoneDuty, ScheduleEntry

__all__ = [
    "FIELD_ALIASES",
    "PhoneDuty",
    "ScheduleEntry",
]
