"""Padder - full person x 7-day grid, sorted by person then date."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Dict, List, Sequence

from roster.config import RosterConfig
from roster.domain.models import PhoneDuty, ScheduleEntry
from roster.services.constraints import is_working_entry
from roster.services.timeplan import format_date, parse_date, week_dates, weekday_name

from .base import BaseStage


def roster_sort_key(entry: ScheduleEntry):
    return (entry.person, parse_date(entry.date) or date.min)


def day_off_entry(person: str, day: date, percentage: float, cfg: RosterConfig) -> ScheduleEntry:
    """Placeholder row for a (person, day) pair missing from the input."""
    date_str = format_date(day)
    day_name = cfg.day_names.get(weekday_name(day), weekday_name(day))
    return ScheduleEntry(
        person=person,
        date=date_str,
        presence_status=cfg.day_off_marker,
        description=f"{day_name} {date_str} - {cfg.day_off_marker}",
        start_time=None,
        end_time=None,
        meal_break=cfg.padding_meal_placeholder,
        phone_duty=PhoneDuty.NONE,
        phone_percentage=percentage,
    )


class Padder(BaseStage):
    """
    Complete the Monday-to-Sunday week anchored on the first entry's date.

    Only entries inside that week survive. Missing days become day-off rows,
    and kept non-working rows without a meal break get the placeholder.
    If the first entry's date cannot be parsed, the input is returned
    unchanged.
    """

    name = "PAD"

    def run(self, entries: Sequence[ScheduleEntry], cfg: RosterConfig) -> List[ScheduleEntry]:
        if not entries:
            return []

        anchor = parse_date(entries[0].date)
        if anchor is None:
            return list(entries)

        people: List[str] = list(dict.fromkeys(e.person for e in entries))
        days = week_dates(anchor)

        # Last seen wins for duplicate keys
        by_key: Dict[str, ScheduleEntry] = {}
        percentages: Dict[str, float] = {}
        for entry in entries:
            by_key[entry.key] = entry
            percentages[entry.person] = entry.phone_percentage

        padded: List[ScheduleEntry] = []
        for person in people:
            for day in days:
                existing = by_key.get(f"{person}-{format_date(day)}")
                if existing is not None:
                    if existing.meal_break is None and not is_working_entry(existing, cfg):
                        existing = replace(existing, meal_break=cfg.padding_meal_placeholder)
                    padded.append(existing)
                else:
                    padded.append(day_off_entry(person, day, percentages.get(person, 0.0), cfg))

        padded.sort(key=roster_sort_key)
        return padded
