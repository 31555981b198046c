"""Override-by-key merge of two partial release schedules."""

from typing import Dict, Mapping

from node_lifecycle.models import ReleaseRecord, Schedule, freeze_schedule


def merged_schedule(primary: Mapping[str, ReleaseRecord], secondary: Mapping[str, ReleaseRecord]) -> Schedule:
    """
    Merge two partial schedules into one canonical schedule.

    Every major present in either input is kept. Where both carry a major,
    the primary's record replaces the secondary's as a whole; fields are
    never combined across sources. Neither input is modified.

    Args:
        primary: Normalized records from the authoritative feed
        secondary: Normalized records from the fallback feed

    Returns:
        Read-only merged Schedule
    """
    merged: Dict[str, ReleaseRecord] = dict(secondary)
    merged.update(primary)
    return freeze_schedule(merged)
