"""Base stage interface that every roster pipeline stage implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Dict, List, Sequence

from roster.config import RosterConfig
from roster.domain.models import ScheduleEntry


class BaseStage(ABC):
    """
    Abstract base class for pipeline stages.

    A stage receives the full output of the previous stage and returns a new
    list of entries. Stages never mutate their input and keep no state
    between calls.
    """

    name: str | None = None  # Override in subclasses (e.g., "MEALS", "PHONE")

    @abstractmethod
    def run(self, entries: Sequence[ScheduleEntry], cfg: RosterConfig) -> List[ScheduleEntry]:
        """
        Produce the next generation of entries.

        Args:
            entries: Output of the previous stage, in order
            cfg: RosterConfig with markers and rule tables

        Returns:
            New list of entries; an empty input gives an empty list
        """
        pass

    def get_stage_name(self) -> str:
        return self.name or "UNKNOWN"


def group_by_date(entries: Sequence[ScheduleEntry]) -> Dict[str, List[int]]:
    """Raw date string -> positions of its entries, in first-seen order."""
    groups: Dict[str, List[int]] = OrderedDict()
    for idx, entry in enumerate(entries):
        groups.setdefault(entry.date, []).append(idx)
    return groups
