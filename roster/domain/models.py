"""Schedule entry model shared by every pipeline stage."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class PhoneDuty(str, Enum):
    """Phone-duty slot held by an entry."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    NONE = "none"


# Raw record key -> canonical field. Covers the extraction service output
# (nom / presence / heureDebut / heureFin) and camelCase variants.
FIELD_ALIASES = {
    "person": "person",
    "nom": "person",
    "name": "person",
    "date": "date",
    "presence_status": "presence_status",
    "presencestatus": "presence_status",
    "presence": "presence_status",
    "description": "description",
    "start_time": "start_time",
    "starttime": "start_time",
    "heuredebut": "start_time",
    "end_time": "end_time",
    "endtime": "end_time",
    "heurefin": "end_time",
}


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class ScheduleEntry:
    """One person on one day, as it flows through the roster pipeline."""

    person: str
    date: str
    presence_status: str = ""
    description: str = ""
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    meal_break: Optional[str] = None
    phone_duty: PhoneDuty = PhoneDuty.NONE
    phone_percentage: float = 0.0

    @property
    def key(self) -> str:
        return f"{self.person}-{self.date}"

    @property
    def has_times(self) -> bool:
        return bool(self.start_time) and bool(self.end_time)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ScheduleEntry":
        """
        Build a fresh entry from a raw extracted record.

        Keys are matched case-insensitively against FIELD_ALIASES; unknown
        keys are ignored. Computed fields (meal break, phone duty, percentage)
        are never taken from the record.

        Args:
            record: Mapping with at least a person and a date

        Returns:
            ScheduleEntry with defaults for every computed field
        """
        values = {}
        for raw_key, value in record.items():
            field = FIELD_ALIASES.get(str(raw_key).strip().lower())
            if field is not None and field not in values:
                values[field] = _clean(value)

        start = values.get("start_time")
        end = values.get("end_time")
        if not (start and end):
            start = end = None

        return cls(
            person=values.get("person") or "",
            date=values.get("date") or "",
            presence_status=values.get("presence_status") or "",
            description=values.get("description") or "",
            start_time=start,
            end_time=end,
        )

    def to_record(self) -> dict:
        return {
            "person": self.person,
            "date": self.date,
            "presence_status": self.presence_status,
            "description": self.description,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "meal_break": self.meal_break,
            "phone_duty": self.phone_duty.value,
            "phone_percentage": self.phone_percentage,
        }
