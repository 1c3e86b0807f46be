"""I/O utilities for raw entry import and roster export."""

from .export_csv import export_roster_csv, roster_to_dataframe
from .import_entries import read_raw_entries

__all__ = [
    "read_raw_entries",
    "export_roster_csv",
    "roster_to_dataframe",
]
