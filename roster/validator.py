from __future__ import annotations

from typing import Sequence

import pandas as pd

from .config import RosterConfig
from .domain.models import PhoneDuty, ScheduleEntry
from .services.constraints import is_working_entry
from .services.timeplan import calculate_shift_hours, format_date, iso_date, parse_date, week_dates, weekday_name


def _entries_frame(entries: Sequence[ScheduleEntry], cfg: RosterConfig) -> pd.DataFrame:
    df = pd.DataFrame([e.to_record() for e in entries])
    df["working"] = [is_working_entry(e, cfg) for e in entries]
    df["hours"] = [calculate_shift_hours(e.start_time, e.end_time) for e in entries]
    df["weekday"] = [
        weekday_name(d) if d is not None else None for d in (parse_date(e.date) for e in entries)
    ]
    return df


def validate_roster(entries: Sequence[ScheduleEntry], cfg: RosterConfig) -> None:
    if not entries:
        return
    df = _entries_frame(entries, cfg)
    pd_cfg = cfg.phone_duty

    # Coverage: one row per person per day of the anchored week
    anchor = parse_date(entries[0].date)
    if anchor is not None:
        expected = {format_date(d) for d in week_dates(anchor)}
        counts = df.groupby(["person", "date"]).size()
        if (counts > 1).any():
            dup = counts[counts > 1].index[0]
            raise ValueError(f"Duplicate roster rows for {dup[0]} on {dup[1]}")
        for person, group in df.groupby("person"):
            got = set(group["date"])
            if got != expected:
                raise ValueError(
                    f"Coverage mismatch for {person}: missing {sorted(expected - got)}, extra {sorted(got - expected)}"
                )

    on_duty = df[df["phone_duty"] != PhoneDuty.NONE.value]

    # Phone duty only on working rows, never on the excluded weekday
    if (~on_duty["working"]).any():
        bad = on_duty[~on_duty["working"]].iloc[0]
        raise ValueError(f"Phone duty on a non-working entry: {bad['person']} {bad['date']}")
    if (on_duty["weekday"] == pd_cfg.excluded_weekday).any():
        raise ValueError(f"Phone duty assigned on {pd_cfg.excluded_weekday}")

    # Duty cap per day and period
    per_day = on_duty.groupby(["date", "phone_duty"]).size()
    if (per_day > pd_cfg.slots_per_period).any():
        date_str, period = per_day[per_day > pd_cfg.slots_per_period].index[0]
        raise ValueError(f"More than {pd_cfg.slots_per_period} {period} phone slots on {date_str}")
    periods = on_duty.groupby(["person", "date"])["phone_duty"].nunique()
    if (periods > 1).any():
        person, date_str = periods[periods > 1].index[0]
        raise ValueError(f"{person} holds both phone slots on {date_str}")

    # Meal breaks
    working = df[df["working"]]
    short = working[working["hours"] <= cfg.short_shift_hours]
    if (short["meal_break"] != cfg.no_meal_marker).any():
        bad = short[short["meal_break"] != cfg.no_meal_marker].iloc[0]
        raise ValueError(f"Short shift with a meal slot: {bad['person']} {bad['date']}")
    long_shifts = working[working["hours"] > cfg.short_shift_hours]
    if (~long_shifts["meal_break"].isin(cfg.meal_slots)).any():
        bad = long_shifts[~long_shifts["meal_break"].isin(cfg.meal_slots)].iloc[0]
        raise ValueError(f"Working entry without a meal slot: {bad['person']} {bad['date']}")

    # Percentage is a per-person figure
    spread = df.groupby("person")["phone_percentage"].nunique()
    if (spread > 1).any():
        raise ValueError(f"Inconsistent phone percentage for {spread[spread > 1].index[0]}")


def summarize_roster(entries: Sequence[ScheduleEntry], cfg: RosterConfig) -> str:
    if not entries:
        return "No entries."
    df = _entries_frame(entries, cfg)
    df["worked_hours"] = df["hours"].where(df["working"], 0.0)
    df["day"] = df["date"].map(iso_date)

    duty = df[df["phone_duty"] != PhoneDuty.NONE.value]
    duty_table = duty.groupby(["day", "phone_duty"]).size().unstack(fill_value=0)
    meals = df[df["meal_break"].isin(cfg.meal_slots)]
    meal_table = meals.groupby(["day", "meal_break"]).size().unstack(fill_value=0)
    people = df.groupby("person").agg(
        worked_hours=("worked_hours", "sum"),
        phone_slots=("phone_duty", lambda s: int((s != PhoneDuty.NONE.value).sum())),
        phone_percentage=("phone_percentage", "first"),
    )

    lines = ["Phone duty per day:"]
    lines.append(duty_table.to_string() if not duty_table.empty else "(none)")
    lines.append("")
    lines.append("Meal slots per day:")
    lines.append(meal_table.to_string() if not meal_table.empty else "(none)")
    lines.append("")
    lines.append("Per person:")
    lines.append(people.round(2).to_string())
    return "\n".join(lines)
