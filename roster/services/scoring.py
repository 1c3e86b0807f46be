"""Workload bookkeeping for phone-duty fairness."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable

from roster.config import RosterConfig
from roster.domain.models import PhoneDuty, ScheduleEntry
from roster.services.constraints import is_working_entry
from roster.services.timeplan import calculate_shift_hours


# Sort key for people with no worked hours: never ahead of anyone with history.
UNBOUNDED_RATIO = float("inf")


def calculate_work_hours(entries: Iterable[ScheduleEntry], cfg: RosterConfig) -> Dict[str, float]:
    """Sum of working-shift durations per person. Every person seen gets a key."""
    totals: Dict[str, float] = {}
    for entry in entries:
        totals.setdefault(entry.person, 0.0)
        if is_working_entry(entry, cfg):
            totals[entry.person] += calculate_shift_hours(entry.start_time, entry.end_time)
    return totals


def calculate_duty_hours(entries: Iterable[ScheduleEntry], cfg: RosterConfig) -> Dict[str, float]:
    """Duty credit per person: one credit for every entry holding a phone slot."""
    credit = cfg.phone_duty.duty_credit_hours
    totals: Dict[str, float] = {}
    for entry in entries:
        totals.setdefault(entry.person, 0.0)
        if entry.phone_duty != PhoneDuty.NONE:
            totals[entry.person] += credit
    return totals


def calculate_phone_percentage(duty_hours: float, work_hours: float) -> float:
    if work_hours > 0:
        return 100.0 * duty_hours / work_hours
    return 0.0


@dataclass
class PhoneDutyLedger:
    """
    Per-person running totals for one phone-duty assignment run.

    ``total_work_hours`` is fixed up front; ``phone_duty_hours`` grows as
    slots are credited day by day.
    """

    total_work_hours: Dict[str, float]
    credit_hours: float
    phone_duty_hours: Dict[str, float] = field(default_factory=lambda: defaultdict(float))

    @classmethod
    def from_entries(cls, entries: Iterable[ScheduleEntry], cfg: RosterConfig) -> "PhoneDutyLedger":
        return cls(
            total_work_hours=calculate_work_hours(entries, cfg),
            credit_hours=cfg.phone_duty.duty_credit_hours,
        )

    def ratio(self, person: str) -> float:
        total = self.total_work_hours.get(person, 0.0)
        if total <= 0:
            return UNBOUNDED_RATIO
        return self.phone_duty_hours[person] / total

    def credit(self, person: str) -> None:
        self.phone_duty_hours[person] += self.credit_hours
