from dataclasses import replace

import pytest

from roster.domain.models import PhoneDuty
from roster.engine.orchestrator import build_week_roster
from roster.validator import summarize_roster, validate_roster


def _roster(cfg):
    raw = [
        {"nom": "JULIEN", "date": "03/11/2025", "presence": "FNAC", "heureDebut": "09:00", "heureFin": "19:00"},
        {"nom": "MATTHIEU", "date": "03/11/2025", "presence": "FNAC", "heureDebut": "13:00", "heureFin": "19:00"},
        {"nom": "JULIEN", "date": "09/11/2025", "presence": "FNAC", "heureDebut": "09:00", "heureFin": "19:00"},
    ]
    return build_week_roster(raw, cfg)


def test_pipeline_output_validates(cfg):
    validate_roster(_roster(cfg), cfg)


def test_duty_on_excluded_weekday_detected(cfg):
    roster = _roster(cfg)
    idx = next(i for i, e in enumerate(roster) if e.person == "JULIEN" and e.date == "09/11/2025")
    roster[idx] = replace(roster[idx], phone_duty=PhoneDuty.MORNING)
    with pytest.raises(ValueError, match="Sunday"):
        validate_roster(roster, cfg)


def test_duty_on_day_off_detected(cfg):
    roster = _roster(cfg)
    idx = next(i for i, e in enumerate(roster) if e.person == "MATTHIEU" and e.date == "05/11/2025")
    roster[idx] = replace(roster[idx], phone_duty=PhoneDuty.AFTERNOON)
    with pytest.raises(ValueError, match="non-working"):
        validate_roster(roster, cfg)


def test_inconsistent_percentage_detected(cfg):
    roster = _roster(cfg)
    roster[0] = replace(roster[0], phone_percentage=99.0)
    with pytest.raises(ValueError, match="percentage"):
        validate_roster(roster, cfg)


def test_missing_day_detected(cfg):
    roster = _roster(cfg)
    with pytest.raises(ValueError, match="Coverage"):
        validate_roster(roster[:-1], cfg)


def test_summary_lists_people(cfg):
    text = summarize_roster(_roster(cfg), cfg)
    assert "Phone duty per day:" in text
    assert "JULIEN" in text
    assert "MATTHIEU" in text
    assert summarize_roster([], cfg) == "No entries."
