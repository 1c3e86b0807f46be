"""Load raw extracted schedule entries from CSV or JSON."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from roster.domain.models import FIELD_ALIASES, ScheduleEntry


REQUIRED_COLUMNS = ["person", "date"]


def read_raw_entries(path: str | Path) -> List[ScheduleEntry]:
    """
    Read raw entries produced by the extraction step.

    Args:
        path: .json file (array of records) or CSV file

    Returns:
        Entries in file order, computed fields left at their defaults;
        an empty list for an empty extraction result

    Raises:
        ValueError: If the person or date column is missing
    """
    path = Path(path)
    if path.suffix.lower() == ".json":
        df = pd.read_json(path, orient="records", dtype=False, convert_dates=False, keep_default_dates=False)
    else:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)

    if df.empty and len(df.columns) == 0:
        print(f"[INFO] No raw entries in {path}")
        return []

    # Normalize column names
    df.columns = df.columns.astype(str).str.strip().str.lower()
    df = df.rename(columns=FIELD_ALIASES)
    df = df.loc[:, ~df.columns.duplicated()]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Entries file {path} is missing column(s): {', '.join(missing)}")

    df = df.astype(object).where(pd.notna(df), None)

    entries = [ScheduleEntry.from_record(row) for row in df.to_dict(orient="records")]
    print(f"[INFO] Read {len(entries)} raw entries from {path}")
    return entries
