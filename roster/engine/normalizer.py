"""Normalizer - canonical upper-case identities, excluded people removed."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Union

from roster.config import RosterConfig
from roster.domain.models import ScheduleEntry
from roster.services.constraints import is_excluded

from .base import BaseStage


RawEntry = Union[ScheduleEntry, Mapping[str, Any]]


def _fresh(raw: RawEntry) -> ScheduleEntry:
    if isinstance(raw, ScheduleEntry):
        # Drop anything computed by an earlier run
        return ScheduleEntry(
            person=raw.person,
            date=raw.date,
            presence_status=raw.presence_status,
            description=raw.description,
            start_time=raw.start_time,
            end_time=raw.end_time,
        )
    return ScheduleEntry.from_record(raw)


class Normalizer(BaseStage):
    name = "NORMALIZE"

    def run(self, entries: Iterable[RawEntry], cfg: RosterConfig) -> List[ScheduleEntry]:
        result: List[ScheduleEntry] = []
        for raw in entries:
            entry = _fresh(raw)
            entry = replace(entry, person=entry.person.strip().upper())
            if is_excluded(entry.person, cfg):
                continue
            result.append(entry)
        return result
