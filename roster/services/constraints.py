"""Entry classification and phone-duty eligibility predicates."""

from __future__ import annotations

from typing import Iterable, Optional

from roster.config import RosterConfig
from roster.domain.models import ScheduleEntry


def _contains(text: str, marker: str) -> bool:
    return bool(marker) and marker.upper() in (text or "").upper()


def matches_identity(person: str, identities: Iterable[str]) -> Optional[str]:
    """First identity (in declaration order) contained in the upper-cased person, or None."""
    person_upper = person.upper()
    for identity in identities:
        if identity and identity.upper() in person_upper:
            return identity
    return None


def is_day_off(entry: ScheduleEntry, cfg: RosterConfig) -> bool:
    return _contains(entry.presence_status, cfg.day_off_marker)


def is_training(entry: ScheduleEntry, cfg: RosterConfig) -> bool:
    return _contains(entry.presence_status, cfg.training_marker)


def is_on_site(entry: ScheduleEntry, cfg: RosterConfig) -> bool:
    return _contains(entry.presence_status, cfg.on_site_marker)


def is_excluded(person: str, cfg: RosterConfig) -> bool:
    return matches_identity(person, cfg.excluded_identities) is not None


def is_working_entry(entry: ScheduleEntry, cfg: RosterConfig) -> bool:
    """
    Working = neither day-off nor training, with both a start and an end time.
    """
    if is_day_off(entry, cfg) or is_training(entry, cfg):
        return False
    return entry.has_times


def can_take_phone_duty(entry: ScheduleEntry, weekday: str | None, cfg: RosterConfig) -> bool:
    """
    Check if a working entry may be given a phone-duty slot.

    Args:
        entry: Working entry to check
        weekday: English weekday name of the entry's date, None if unparsable
        cfg: RosterConfig with the allow-list and weekday exceptions

    Returns:
        True if the person is on the allow-list and not excepted that weekday
    """
    pd_cfg = cfg.phone_duty

    # 1. Allow-list
    if matches_identity(entry.person, pd_cfg.eligible) is None:
        return False

    # 2. Standing weekday exceptions
    if weekday is not None:
        for identity, days in pd_cfg.weekday_exceptions.items():
            if identity.upper() in entry.person.upper() and weekday in days:
                return False

    return True
