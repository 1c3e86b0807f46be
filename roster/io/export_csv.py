"""Roster export to CSV for spreadsheets and downstream sync."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd

from roster.config import RosterConfig
from roster.domain.models import PhoneDuty, ScheduleEntry
from roster.services.constraints import is_on_site
from roster.services.timeplan import iso_date


EXPORT_COLUMNS = [
    "person",
    "date",
    "on_site",
    "start_time",
    "end_time",
    "meal_break",
    "phone_duty",
    "phone_percentage",
    "description",
]


def roster_to_dataframe(entries: Sequence[ScheduleEntry], cfg: RosterConfig) -> pd.DataFrame:
    """
    One row per entry, formatted for export.

    Dates become YYYY-MM-DD when parsable, on_site is TRUE/FALSE, phone_duty
    is blank when no slot is held and the percentage has two decimals.
    """
    rows = [
        {
            "person": e.person,
            "date": iso_date(e.date),
            "on_site": "TRUE" if is_on_site(e, cfg) else "FALSE",
            "start_time": e.start_time or "",
            "end_time": e.end_time or "",
            "meal_break": e.meal_break or "",
            "phone_duty": "" if e.phone_duty == PhoneDuty.NONE else e.phone_duty.value,
            "phone_percentage": f"{e.phone_percentage:.2f}",
            "description": e.description,
        }
        for e in entries
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_roster_csv(entries: Sequence[ScheduleEntry], csv_path: str | Path, cfg: RosterConfig) -> int:
    """
    Write the roster to CSV (UTF-8 with BOM so spreadsheet tools pick up accents).

    Args:
        entries: Final roster entries
        csv_path: Output path
        cfg: RosterConfig (for the on-site marker)

    Returns:
        Number of rows written
    """
    df = roster_to_dataframe(entries, cfg)
    df.to_csv(csv_path, index=False, encoding="utf-8-sig")
    print(f"[INFO] Exported {len(df)} roster rows to {csv_path}")
    return len(df)
