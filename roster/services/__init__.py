"""Services for roster logic."""

from .constraints import can_take_phone_duty, is_day_off, is_on_site, is_training, is_working_entry
from .scoring import UNBOUNDED_RATIO, PhoneDutyLedger, calculate_phone_percentage
from .timeplan import calculate_shift_hours, parse_date, week_dates

__all__ = [
    "can_take_phone_duty",
    "is_day_off",
    "is_on_site",
    "is_training",
    "is_working_entry",
    "UNBOUNDED_RATIO",
    "PhoneDutyLedger",
    "calculate_phone_percentage",
    "calculate_shift_hours",
    "parse_date",
    "week_dates",
]
