from __future__ import annotations

import argparse

from .config import load_config
from .engine.orchestrator import build_week_roster
from .io.export_csv import export_roster_csv
from .io.import_entries import read_raw_entries
from .validator import summarize_roster, validate_roster


def _cmd_generate(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    raw = read_raw_entries(args.entries)
    roster = build_week_roster(raw, cfg)
    if not roster:
        raise SystemExit(f"No roster entries produced from {args.entries}")

    validate_roster(roster, cfg)
    export_roster_csv(roster, args.out, cfg)
    print("Roster written to", args.out)
    print(summarize_roster(roster, cfg))


def _cmd_summarize(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    roster = build_week_roster(read_raw_entries(args.entries), cfg)
    print(summarize_roster(roster, cfg))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="roster")
    sub = parser.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Build the weekly roster and export it to CSV")
    g.add_argument("--entries", required=True, help="Raw entries (.json or .csv)")
    g.add_argument("--config", help="Path to config YAML/JSON (defaults when omitted)")
    g.add_argument("--out", required=True)
    g.set_defaults(func=_cmd_generate)

    s = sub.add_parser("summarize", help="Build the weekly roster and print a summary")
    s.add_argument("--entries", required=True)
    s.add_argument("--config")
    s.set_defaults(func=_cmd_summarize)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
