import json

import pandas as pd
import pytest

from roster.cli import main


def _write_entries(path):
    records = [
        {"nom": "julien", "date": "03/11/2025", "presence": "FNAC", "heureDebut": "09:00", "heureFin": "19:00"},
        {"nom": "anasse", "date": "03/11/2025", "presence": "FNAC", "heureDebut": "14:00", "heureFin": "19:00"},
        {"nom": "christophe", "date": "03/11/2025", "presence": "FNAC", "heureDebut": "09:00", "heureFin": "19:00"},
    ]
    path.write_text(json.dumps(records), encoding="utf-8")


def test_generate_writes_full_week(tmp_path, capsys):
    entries = tmp_path / "entries.json"
    out = tmp_path / "roster.csv"
    _write_entries(entries)

    main(["generate", "--entries", str(entries), "--out", str(out)])

    df = pd.read_csv(out, encoding="utf-8-sig", dtype=str, keep_default_na=False)
    assert len(df) == 14
    assert set(df["person"]) == {"JULIEN", "ANASSE"}
    anasse = df[(df["person"] == "ANASSE") & (df["date"] == "2025-11-03")].iloc[0]
    assert anasse["meal_break"] == "pas de pause repas"
    assert anasse["phone_duty"] == "afternoon"
    assert "Per person:" in capsys.readouterr().out


def test_generate_fails_on_empty_roster(tmp_path):
    entries = tmp_path / "entries.json"
    entries.write_text(json.dumps([{"nom": "Christophe", "date": "03/11/2025", "presence": "FNAC"}]), encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["generate", "--entries", str(entries), "--out", str(tmp_path / "out.csv")])


def test_summarize_prints_tables(tmp_path, capsys):
    entries = tmp_path / "entries.json"
    _write_entries(entries)
    main(["summarize", "--entries", str(entries)])
    out = capsys.readouterr().out
    assert "Meal slots per day:" in out
    assert "JULIEN" in out


def test_generate_fails_on_empty_extraction(tmp_path):
    entries = tmp_path / "entries.json"
    entries.write_text("[]", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["generate", "--entries", str(entries), "--out", str(tmp_path / "out.csv")])
