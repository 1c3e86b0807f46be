"""PercentageCalculator - per-person share of worked time spent on phone duty."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Sequence

from roster.config import RosterConfig
from roster.domain.models import ScheduleEntry
from roster.services.scoring import calculate_duty_hours, calculate_phone_percentage, calculate_work_hours

from .base import BaseStage


def person_percentages(entries: Sequence[ScheduleEntry], cfg: RosterConfig) -> Dict[str, float]:
    work = calculate_work_hours(entries, cfg)
    duty = calculate_duty_hours(entries, cfg)
    return {person: calculate_phone_percentage(duty[person], work[person]) for person in work}


class PercentageCalculator(BaseStage):
    name = "PERCENTAGE"

    def run(self, entries: Sequence[ScheduleEntry], cfg: RosterConfig) -> List[ScheduleEntry]:
        percentages = person_percentages(entries, cfg)
        return [replace(e, phone_percentage=percentages[e.person]) for e in entries]
