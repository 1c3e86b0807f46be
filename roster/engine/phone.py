"""PhoneDutyAssigner - morning and afternoon phone coverage, balanced on workload ratio."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import List, Optional, Sequence, Set

from roster.config import RosterConfig
from roster.domain.models import PhoneDuty, ScheduleEntry
from roster.services.constraints import can_take_phone_duty, is_working_entry
from roster.services.scoring import PhoneDutyLedger
from roster.services.timeplan import parse_date, parse_hour, weekday_name

from .base import BaseStage, group_by_date


def _date_sort_key(date_str: str) -> date:
    # Unparsable dates are processed first
    return parse_date(date_str) or date.min


class PhoneDutyAssigner(BaseStage):
    """
    Assign up to ``slots_per_period`` people to each half-day, day by day.

    Candidates are ranked by duty hours over worked hours so far; the ledger
    carries those totals from one day to the next, which is why days must be
    visited in ascending order.
    """

    name = "PHONE"

    def run(self, entries: Sequence[ScheduleEntry], cfg: RosterConfig) -> List[ScheduleEntry]:
        pd_cfg = cfg.phone_duty
        result = [replace(e, phone_duty=PhoneDuty.NONE) for e in entries]
        ledger = PhoneDutyLedger.from_entries(result, cfg)

        groups = group_by_date(result)
        for date_str in sorted(groups.keys(), key=_date_sort_key):
            current: Optional[date] = parse_date(date_str)
            weekday = weekday_name(current) if current is not None else None
            if weekday == pd_cfg.excluded_weekday:
                continue

            pool = [
                idx for idx in groups[date_str]
                if is_working_entry(result[idx], cfg) and can_take_phone_duty(result[idx], weekday, cfg)
            ]
            if not pool:
                continue

            # Morning
            morning = [idx for idx in pool if self._starts_before(result[idx], pd_cfg.morning_start_before)]
            morning.sort(key=lambda idx: ledger.ratio(result[idx].person))
            morning_people: Set[str] = set()
            for idx in morning[: pd_cfg.slots_per_period]:
                result[idx] = replace(result[idx], phone_duty=PhoneDuty.MORNING)
                ledger.credit(result[idx].person)
                morning_people.add(result[idx].person)

            # Afternoon
            afternoon = [
                idx for idx in pool
                if self._ends_from(result[idx], pd_cfg.afternoon_end_from)
                and result[idx].person not in morning_people
            ]
            afternoon.sort(key=lambda idx: ledger.ratio(result[idx].person))
            for idx in afternoon[: pd_cfg.slots_per_period]:
                result[idx] = replace(result[idx], phone_duty=PhoneDuty.AFTERNOON)
                ledger.credit(result[idx].person)

        return result

    @staticmethod
    def _starts_before(entry: ScheduleEntry, hour: int) -> bool:
        start = parse_hour(entry.start_time)
        return start is not None and start < hour

    @staticmethod
    def _ends_from(entry: ScheduleEntry, hour: int) -> bool:
        end = parse_hour(entry.end_time)
        return end is not None and end >= hour
