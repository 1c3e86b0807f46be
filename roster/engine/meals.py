"""MealAssigner - one meal break per working entry, balanced over the lunch slots."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Sequence

from roster.config import RosterConfig
from roster.domain.models import ScheduleEntry
from roster.services.constraints import is_working_entry, matches_identity
from roster.services.timeplan import calculate_shift_hours

from .base import BaseStage, group_by_date


def least_filled_slot(slots: Dict[str, int], order: Sequence[str]) -> str:
    """Slot with the fewest occupants; ties go to the earlier declared slot."""
    return min(order, key=lambda s: slots[s])


class MealAssigner(BaseStage):
    """
    Assign meal breaks day by day.

    Short shifts get the no-break marker. Everyone else gets a slot: named
    preferences first, then the least-filled slot, one entry at a time.
    """

    name = "MEALS"

    def run(self, entries: Sequence[ScheduleEntry], cfg: RosterConfig) -> List[ScheduleEntry]:
        result = list(entries)

        for _, positions in group_by_date(result).items():
            working = [idx for idx in positions if is_working_entry(result[idx], cfg)]
            if not working:
                continue

            # 1. Short-shift exemption
            needing_meal: List[int] = []
            for idx in working:
                entry = result[idx]
                duration = calculate_shift_hours(entry.start_time, entry.end_time)
                if duration <= cfg.short_shift_hours:
                    result[idx] = replace(entry, meal_break=cfg.no_meal_marker)
                else:
                    needing_meal.append(idx)
            if not needing_meal:
                continue

            slots: Dict[str, int] = {slot: 0 for slot in cfg.meal_slots}

            # 2. Preferences
            unassigned: List[int] = []
            for idx in needing_meal:
                entry = result[idx]
                pref = matches_identity(entry.person, cfg.meal_preferences.keys())
                if pref is None:
                    unassigned.append(idx)
                    continue
                slot = cfg.meal_preferences[pref]
                result[idx] = replace(entry, meal_break=slot)
                slots[slot] = slots.get(slot, 0) + 1

            # 3. Balance the rest, recomputing after every placement
            for idx in unassigned:
                slot = least_filled_slot(slots, cfg.meal_slots)
                result[idx] = replace(result[idx], meal_break=slot)
                slots[slot] += 1

        return result
