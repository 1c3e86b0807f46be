"""Roster package: turns extracted per-person, per-day entries into a fair weekly roster.

Modules:
- config: load and validate configuration (JSON or YAML)
- domain: the ScheduleEntry model
- services: date/time helpers, entry classification, workload bookkeeping
- engine: pipeline stages (normalize, meals, phone duty, percentage, padding) and orchestrator
- io: raw entry import and CSV export
- validator: post-generation checks and text summary
- cli: command-line interface entrypoints
"""

__all__ = [
    "config",
    "domain",
    "services",
    "engine",
    "io",
    "validator",
    "cli",
]
