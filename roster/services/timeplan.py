"""Date and time helpers for DD/MM/YYYY dates and HH:mm clock times."""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import List, Optional

from roster.config import WEEKDAYS


_DATE_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_date(date_str: str | None) -> Optional[date]:
    """Parse a DD/MM/YYYY string. Returns None for anything that is not a real date."""
    if not date_str:
        return None
    match = _DATE_RE.match(date_str.strip())
    if not match:
        return None
    day, month, year = (int(x) for x in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_date(d: date) -> str:
    return d.strftime("%d/%m/%Y")


def iso_date(date_str: str) -> str:
    """DD/MM/YYYY -> YYYY-MM-DD; unparsable strings are returned as-is."""
    d = parse_date(date_str)
    return d.isoformat() if d is not None else date_str


def week_start(d: date) -> date:
    """Monday on or before ``d`` (a Sunday maps to the Monday six days earlier)."""
    return d - timedelta(days=d.weekday())


def week_dates(anchor: date) -> List[date]:
    monday = week_start(anchor)
    return [monday + timedelta(days=i) for i in range(7)]


def weekday_name(d: date) -> str:
    """English weekday name, e.g. 'Monday'."""
    return WEEKDAYS[d.weekday()]


def parse_hour(value: str | None) -> Optional[int]:
    """
    Leading integer of a clock string ("09:30" -> 9).

    Returns None when the string does not start with a number.
    """
    if not value:
        return None
    match = _LEADING_INT_RE.match(value)
    if not match:
        return None
    return int(match.group(1))


def calculate_shift_hours(start_hm: str | None, end_hm: str | None) -> float:
    """
    Shift duration in hours between two HH:mm strings.

    Malformed or missing values give 0.0 instead of raising. An end time
    earlier than the start gives a negative duration.
    """
    if not start_hm or not end_hm:
        return 0.0
    start = start_hm.split(":")
    end = end_hm.split(":")
    if len(start) < 2 or len(end) < 2:
        return 0.0

    parts = [parse_hour(start[0]), parse_hour(start[1]), parse_hour(end[0]), parse_hour(end[1])]
    if any(p is None for p in parts):
        return 0.0
    start_h, start_m, end_h, end_m = parts

    minutes = (end_h * 60 + end_m) - (start_h * 60 + start_m)
    return minutes / 60.0
