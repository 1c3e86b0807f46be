"""Roster configuration: markers, thresholds and the per-person rule tables."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml


WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _default_meal_slots() -> List[str]:
    return ["12:00-13:00", "13:00-14:00", "14:00-15:00"]


def _default_meal_preferences() -> Dict[str, str]:
    return {
        "JULIEN": "12:00-13:00",
        "SEBASTIEN": "12:00-13:00",
        "FLORIAN": "13:00-14:00",
        "MATTHIEU": "13:00-14:00",
        "ANASSE": "14:00-15:00",
        "FREDERIC": "14:00-15:00",
        "RAYAN": "14:00-15:00",
    }


def _default_eligible() -> List[str]:
    return [
        "MATTHIEU", "HILAL", "RACHAD", "JULIEN", "SEBASTIEN",
        "FREDERIC", "FLORIAN", "CORINNE", "AUGUSTIN", "RAYAN", "ANASSE",
    ]


def _default_day_names() -> Dict[str, str]:
    return {
        "Monday": "lundi",
        "Tuesday": "mardi",
        "Wednesday": "mercredi",
        "Thursday": "jeudi",
        "Friday": "vendredi",
        "Saturday": "samedi",
        "Sunday": "dimanche",
    }


@dataclass
class PhoneDutyConfig:
    eligible: List[str] = field(default_factory=_default_eligible)
    # identity substring -> weekdays on which that person never takes phone duty
    weekday_exceptions: Dict[str, List[str]] = field(default_factory=lambda: {"FREDERIC": ["Monday"]})
    excluded_weekday: str = "Sunday"
    slots_per_period: int = 2
    duty_credit_hours: float = 4.0
    morning_start_before: int = 12
    afternoon_end_from: int = 14


@dataclass
class RosterConfig:
    excluded_identities: List[str] = field(default_factory=lambda: ["CHRISTOPHE"])
    day_off_marker: str = "Repos"
    training_marker: str = "CFO"
    on_site_marker: str = "FNAC"
    no_meal_marker: str = "pas de pause repas"
    padding_meal_placeholder: str = "-"
    short_shift_hours: float = 5.0
    meal_slots: List[str] = field(default_factory=_default_meal_slots)
    meal_preferences: Dict[str, str] = field(default_factory=_default_meal_preferences)
    phone_duty: PhoneDutyConfig = field(default_factory=PhoneDutyConfig)
    day_names: Dict[str, str] = field(default_factory=_default_day_names)


def _read_raw(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return data


def _upper_list(values: Any, name: str) -> List[str]:
    if not isinstance(values, list):
        raise ValueError(f"{name} must be a list")
    return [str(v).strip().upper() for v in values]


def _build_phone_duty(raw: Dict[str, Any]) -> PhoneDutyConfig:
    pd_cfg = PhoneDutyConfig()
    if "eligible" in raw:
        pd_cfg.eligible = _upper_list(raw["eligible"], "phone_duty.eligible")
    if "weekday_exceptions" in raw:
        exceptions = raw["weekday_exceptions"] or {}
        if not isinstance(exceptions, dict):
            raise ValueError("phone_duty.weekday_exceptions must be a mapping")
        pd_cfg.weekday_exceptions = {
            str(name).strip().upper(): [str(d) for d in (days if isinstance(days, list) else [days])]
            for name, days in exceptions.items()
        }
    if "excluded_weekday" in raw:
        pd_cfg.excluded_weekday = str(raw["excluded_weekday"])
    for key in ("slots_per_period", "morning_start_before", "afternoon_end_from"):
        if key in raw:
            setattr(pd_cfg, key, int(raw[key]))
    if "duty_credit_hours" in raw:
        pd_cfg.duty_credit_hours = float(raw["duty_credit_hours"])
    return pd_cfg


def validate_config(cfg: RosterConfig) -> None:
    """
    Check cross-field consistency of a configuration.

    Raises:
        ValueError: If a preference points at an undeclared slot, a weekday
            name is unknown, or a count/threshold is out of range
    """
    if not cfg.meal_slots:
        raise ValueError("meal_slots must declare at least one slot")
    for name, slot in cfg.meal_preferences.items():
        if slot not in cfg.meal_slots:
            raise ValueError(f"Meal preference for {name} uses undeclared slot {slot!r}")

    pd_cfg = cfg.phone_duty
    if pd_cfg.excluded_weekday not in WEEKDAYS:
        raise ValueError(f"Unknown excluded weekday {pd_cfg.excluded_weekday!r}")
    for name, days in pd_cfg.weekday_exceptions.items():
        for day in days:
            if day not in WEEKDAYS:
                raise ValueError(f"Unknown weekday {day!r} in exception for {name}")
    if pd_cfg.slots_per_period < 1:
        raise ValueError("phone_duty.slots_per_period must be at least 1")
    if pd_cfg.duty_credit_hours <= 0:
        raise ValueError("phone_duty.duty_credit_hours must be positive")
    if cfg.short_shift_hours < 0:
        raise ValueError("short_shift_hours must not be negative")

    missing = [d for d in WEEKDAYS if d not in cfg.day_names]
    if missing:
        raise ValueError(f"day_names is missing {', '.join(missing)}")


def load_config(path: str | Path | None = None) -> RosterConfig:
    """
    Load a RosterConfig from a YAML or JSON file.

    Keys absent from the file keep their defaults; unknown keys are ignored.
    Identity lists and mapping keys are upper-cased so they match normalized
    person names.

    Args:
        path: Path to a .yaml/.yml or .json file, or None for defaults

    Returns:
        Validated RosterConfig
    """
    cfg = RosterConfig()
    if path is None:
        return cfg

    path = Path(path)
    if not path.exists():
        raise ValueError(f"Config file not found: {path}")
    raw = _read_raw(path)

    if "excluded_identities" in raw:
        cfg.excluded_identities = _upper_list(raw["excluded_identities"] or [], "excluded_identities")
    for key in (
        "day_off_marker",
        "training_marker",
        "on_site_marker",
        "no_meal_marker",
        "padding_meal_placeholder",
    ):
        if key in raw:
            setattr(cfg, key, str(raw[key]))
    if "short_shift_hours" in raw:
        cfg.short_shift_hours = float(raw["short_shift_hours"])
    if "meal_slots" in raw:
        cfg.meal_slots = [str(s) for s in raw["meal_slots"]]
    if "meal_preferences" in raw:
        prefs = raw["meal_preferences"] or {}
        if not isinstance(prefs, dict):
            raise ValueError("meal_preferences must be a mapping")
        cfg.meal_preferences = {str(k).strip().upper(): str(v) for k, v in prefs.items()}
    if "phone_duty" in raw:
        cfg.phone_duty = _build_phone_duty(raw["phone_duty"] or {})
    if "day_names" in raw:
        names = dict(_default_day_names())
        names.update({str(k): str(v) for k, v in (raw["day_names"] or {}).items()})
        cfg.day_names = names

    validate_config(cfg)
    return cfg
