"""Roster pipeline stages and orchestrator."""

from .base import BaseStage
from .meals import MealAssigner
from .normalizer import Normalizer
from .orchestrator import Orchestrator, build_week_roster
from .padding import Padder
from .percentage import PercentageCalculator
from .phone import PhoneDutyAssigner

__all__ = [
    "BaseStage",
    "Normalizer",
    "MealAssigner",
    "PhoneDutyAssigner",
    "PercentageCalculator",
    "Padder",
    "Orchestrator",
    "build_week_roster",
]
