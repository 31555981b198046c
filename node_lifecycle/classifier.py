"""Classification of a version against a release schedule."""

from typing import Optional

from node_lifecycle.dates import Instant, days_until, parse_date, utc_today
from node_lifecycle.logging_config import logger
from node_lifecycle.models import UNPARSABLE_MAJOR, Classification, Schedule, SupportStatus, as_record
from node_lifecycle.version import parse_major


def classify(version: str, schedule: Schedule, now: Optional[Instant] = None) -> Classification:
    """
    Determine the support status of a version as of ``now``.

    Phases are checked in a fixed order (end-of-life, then maintenance, then
    active LTS) so inconsistent dates in the schedule, such as a maintenance
    start after the end date, cannot produce a later phase than EOL.

    Args:
        version: Version string, e.g. "v22.5.0" or "20"
        schedule: Merged schedule
        now: Reference instant; defaults to the current UTC time

    Returns:
        Classification; unparsable versions, unknown majors and records
        without a valid end date all yield status "unknown"
    """
    major = parse_major(version)
    if major is None:
        logger.debug(f"Unparsable version: {version!r}")
        return Classification(major=UNPARSABLE_MAJOR, status=SupportStatus.UNKNOWN)

    record = as_record(schedule.get(str(major)))
    if record is None:
        logger.debug(f"No schedule data for major {major}")
        return Classification(major=major, status=SupportStatus.UNKNOWN)

    today = utc_today(now)
    days_to_eol = days_until(record.end, today)
    if days_to_eol is None:
        logger.debug(f"No valid end date for major {major}: {record.end!r}")
        return Classification(major=major, status=SupportStatus.UNKNOWN)

    maintenance_start = parse_date(record.maintenance)
    lts_start = parse_date(record.lts)

    if days_to_eol <= 0:
        status = SupportStatus.EOL
    elif maintenance_start is not None and maintenance_start <= today:
        status = SupportStatus.MAINTENANCE
    elif lts_start is not None and lts_start <= today:
        status = SupportStatus.ACTIVE_LTS
    else:
        status = SupportStatus.CURRENT

    return Classification(major=major, status=status, eol=record.end, days_to_eol=days_to_eol)
