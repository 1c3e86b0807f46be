"""Tests for MealAssigner."""

from roster.domain.models import ScheduleEntry
from roster.engine.meals import MealAssigner, least_filled_slot


def _entry(person, date="03/11/2025", start="09:00", end="18:00", presence="FNAC"):
    return ScheduleEntry(person=person, date=date, presence_status=presence, start_time=start, end_time=end)


def _meals(entries, cfg):
    return [e.meal_break for e in MealAssigner().run(entries, cfg)]


def test_short_shift_gets_no_break(cfg):
    entries = [_entry("ALICE", start="09:00", end="14:00"), _entry("BRUNO", start="09:00", end="14:30")]
    meals = _meals(entries, cfg)
    assert meals[0] == cfg.no_meal_marker
    assert meals[1] in cfg.meal_slots


def test_malformed_time_falls_into_exemption(cfg):
    meals = _meals([_entry("ALICE", start="9h00", end="18:00")], cfg)
    assert meals == [cfg.no_meal_marker]


def test_preferences_are_applied(cfg):
    entries = [_entry("JULIEN"), _entry("FLORIAN"), _entry("RAYAN B.")]
    assert _meals(entries, cfg) == ["12:00-13:00", "13:00-14:00", "14:00-15:00"]


def test_balancing_fills_least_filled_slot_in_order(cfg):
    entries = [_entry("ALICE"), _entry("BRUNO"), _entry("CLARA"), _entry("DAVID")]
    assert _meals(entries, cfg) == ["12:00-13:00", "13:00-14:00", "14:00-15:00", "12:00-13:00"]


def test_preferences_count_before_balancing(cfg):
    # JULIEN takes 12-13 first even though ALICE comes earlier in the input
    entries = [_entry("ALICE"), _entry("JULIEN"), _entry("BRUNO")]
    assert _meals(entries, cfg) == ["13:00-14:00", "12:00-13:00", "14:00-15:00"]


def test_days_are_balanced_independently(cfg):
    entries = [
        _entry("ALICE", date="03/11/2025"),
        _entry("BRUNO", date="04/11/2025"),
        _entry("CLARA", date="03/11/2025"),
    ]
    assert _meals(entries, cfg) == ["12:00-13:00", "12:00-13:00", "13:00-14:00"]


def test_non_working_entries_untouched(cfg):
    entries = [
        _entry("ALICE", presence="Repos", start=None, end=None),
        _entry("BRUNO", presence="cfo formation"),
        _entry("CLARA", presence="FNAC", start=None, end=None),
    ]
    assert _meals(entries, cfg) == [None, None, None]


def test_input_is_not_modified(cfg):
    entries = [_entry("ALICE")]
    result = MealAssigner().run(entries, cfg)
    assert entries[0].meal_break is None
    assert result[0] is not entries[0]


def test_empty_input(cfg):
    assert MealAssigner().run([], cfg) == []


def test_least_filled_slot_ties_go_to_first_declared():
    order = ["a", "b", "c"]
    assert least_filled_slot({"a": 1, "b": 0, "c": 0}, order) == "b"
    assert least_filled_slot({"a": 0, "b": 0, "c": 0}, order) == "a"


def test_unparsable_date_is_its_own_group(cfg):
    entries = [
        _entry("ALICE", date="xx"),
        _entry("BRUNO", date="03/11/2025"),
        _entry("CLARA", date="xx"),
    ]
    assert _meals(entries, cfg) == ["12:00-13:00", "12:00-13:00", "13:00-14:00"]
