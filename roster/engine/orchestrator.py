"""Orchestrator - runs the roster stages in order to build a complete week."""

from __future__ import annotations

from typing import Iterable, List

from roster.config import RosterConfig
from roster.domain.models import ScheduleEntry

from .base import BaseStage
from .meals import MealAssigner
from .normalizer import Normalizer, RawEntry
from .padding import Padder
from .percentage import PercentageCalculator
from .phone import PhoneDutyAssigner


DEFAULT_STAGE_ORDER = ["NORMALIZE", "MEALS", "PHONE", "PERCENTAGE", "PAD"]

STAGES = {
    "NORMALIZE": Normalizer,
    "MEALS": MealAssigner,
    "PHONE": PhoneDutyAssigner,
    "PERCENTAGE": PercentageCalculator,
    "PAD": Padder,
}


class Orchestrator:
    """
    Orchestrator chains the pipeline stages.

    Each stage consumes the full output of the one before it. An empty
    intermediate result ends the run with an empty roster.
    """

    def __init__(self, stage_order: List[str] | None = None):
        """
        Initialize orchestrator with stage execution order.

        Args:
            stage_order: Stage names to run (default: NORMALIZE, MEALS, PHONE, PERCENTAGE, PAD)
        """
        self.stage_order = stage_order or list(DEFAULT_STAGE_ORDER)

    def _stages(self) -> List[BaseStage]:
        stages: List[BaseStage] = []
        for name in self.stage_order:
            stage_cls = STAGES.get(name.upper())
            if stage_cls is None:
                print(f"[WARN] Unknown stage {name} in stage_order, skipping")
                continue
            stages.append(stage_cls())
        return stages

    def build_roster(self, raw_entries: Iterable[RawEntry], cfg: RosterConfig) -> List[ScheduleEntry]:
        """
        Build the weekly roster from raw extracted entries.

        Args:
            raw_entries: Raw records or entries, in extraction order
            cfg: RosterConfig

        Returns:
            Final list of entries
        """
        entries = list(raw_entries)
        print(f"[INFO] Orchestrator: Building roster from {len(entries)} raw entries")

        for stage in self._stages():
            entries = stage.run(entries, cfg)
            if not entries:
                print(f"[INFO] {stage.get_stage_name()} produced no entries, roster is empty")
                return []

        print(f"[OK] Orchestrator: Roster has {len(entries)} entries")
        return entries


def build_week_roster(
    raw_entries: Iterable[RawEntry],
    cfg: RosterConfig | None = None,
    stage_order: List[str] | None = None,
) -> List[ScheduleEntry]:
    """
    Convenience function to run the full pipeline with default stages.

    Args:
        raw_entries: Raw records or entries
        cfg: Optional RosterConfig (defaults when None)
        stage_order: Optional custom stage order

    Returns:
        Final roster entries
    """
    orchestrator = Orchestrator(stage_order)
    return orchestrator.build_roster(raw_entries, cfg or RosterConfig())
