"""Lifecycle inference over a merged schedule.

Identifies the release lines that are in active LTS and the line that is
Current as of a given instant. When the schedule carries explicit LTS start
dates they are used directly. When no record has one (e.g. only the
endoflife.date feed was reachable) the Node.js release convention is
assumed instead: the highest supported major is Current and the remaining
even-numbered supported majors are LTS lines.
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Union

from node_lifecycle.dates import Instant, parse_date, utc_today
from node_lifecycle.models import ReleaseRecord, Schedule, as_record

CODENAMES: Dict[int, str] = {
    18: "Hydrogen",
    20: "Iron",
    22: "Jod",
    24: "Krypton",
}


def _records_by_major(schedule: Schedule) -> Dict[int, ReleaseRecord]:
    """Records keyed by int major; non-integer keys and non-record values are skipped."""
    records = {}
    for key, value in schedule.items():
        record = as_record(value)
        if record is None:
            continue
        try:
            records[int(key)] = record
        except (TypeError, ValueError):
            continue
    return records


def _has_lts_dates(records: Dict[int, ReleaseRecord]) -> bool:
    return any(record.lts for record in records.values())


def _supported_majors(records: Dict[int, ReleaseRecord], today: date) -> List[int]:
    """Majors whose end date is valid and after today."""
    supported = []
    for major, record in records.items():
        end = parse_date(record.end)
        if end is not None and end > today:
            supported.append(major)
    return supported


def active_lts_versions(schedule: Schedule, now: Optional[Instant] = None) -> List[int]:
    """
    Return every major currently in active LTS, highest first.

    Args:
        schedule: Merged schedule
        now: Reference instant (defaults to the current UTC time)

    Returns:
        Majors sorted descending; empty when nothing qualifies
    """
    today = utc_today(now)
    records = _records_by_major(schedule)
    if not records:
        return []

    if _has_lts_dates(records):
        active = []
        for major, record in records.items():
            lts_start = parse_date(record.lts)
            end = parse_date(record.end)
            if lts_start is not None and lts_start <= today and end is not None and end > today:
                active.append(major)
        return sorted(active, reverse=True)

    supported = _supported_majors(records, today)
    if not supported:
        return []

    highest = max(supported)  # assumed Current
    return sorted((m for m in supported if m != highest and m % 2 == 0), reverse=True)


def current_version(schedule: Schedule, now: Optional[Instant] = None) -> Optional[int]:
    """
    Return the latest Current release line: supported and not yet LTS.

    Without any LTS dates in the schedule this is the highest supported major.

    Returns:
        Major version or None
    """
    today = utc_today(now)
    records = _records_by_major(schedule)
    if not records:
        return None

    if _has_lts_dates(records):
        candidates = []
        for major in _supported_majors(records, today):
            lts_start = parse_date(records[major].lts)
            if lts_start is None or lts_start > today:
                candidates.append(major)
        return max(candidates) if candidates else None

    supported = _supported_majors(records, today)
    return max(supported) if supported else None


def codename_for(major: Union[int, float, None], schedule: Optional[Schedule] = None) -> str:
    """
    Codename of an LTS line, e.g. 22 -> "Jod".

    The codename published in the schedule wins over the built-in table.

    Returns:
        Codename, or "" when unknown
    """
    if major is None or (isinstance(major, float) and not math.isfinite(major)):
        return ""
    major = int(major)

    if schedule is not None:
        record = as_record(schedule.get(str(major)))
        if record is not None and record.codename:
            return record.codename

    return CODENAMES.get(major, "")


@dataclass(frozen=True)
class UpgradeTarget:
    """A release line worth upgrading to."""

    kind: str  # "LTS" or "Current"
    major: int
    codename: str = ""

    def __str__(self) -> str:
        suffix = f" (“{self.codename}”)" if self.codename else ""
        return f"{self.kind} v{self.major}{suffix}"


def recommend_upgrades(
    major: Union[int, float, None], schedule: Schedule, now: Optional[Instant] = None
) -> List[UpgradeTarget]:
    """
    Suggest supported release lines to move to from ``major``.

    The highest active LTS is suggested only if it is newer than ``major``;
    the Current line is suggested unless ``major`` already is Current.

    Returns:
        Zero, one or two UpgradeTarget entries, LTS first
    """
    known = major is not None and not (isinstance(major, float) and math.isnan(major))
    targets: List[UpgradeTarget] = []

    lts_versions = active_lts_versions(schedule, now)
    if lts_versions and known and lts_versions[0] > major:
        top_lts = lts_versions[0]
        targets.append(UpgradeTarget("LTS", top_lts, codename_for(top_lts, schedule)))

    current = current_version(schedule, now)
    if current is not None and current != major:
        targets.append(UpgradeTarget("Current", current, codename_for(current, schedule)))

    return targets
