"""Node.js Release working group schedule feed (primary source).

The working group publishes every release line with its full phase
dates, keyed "v20", "v22", ... Pre-1.0 lines ("v0.10", "v0.12") are not
major release lines and are dropped.
"""

from typing import Any, Dict

import requests

from node_lifecycle.logging_config import logger
from node_lifecycle.models import ReleaseRecord

from ..utils import fetch_json, has_valid_end, major_key

RELEASE_SCHEDULE_URL = "https://raw.githubusercontent.com/nodejs/Release/HEAD/schedule.json"
DEFAULT_TIMEOUT = 15  # seconds


def normalize_release_schedule(payload: Any) -> Dict[str, ReleaseRecord]:
    """
    Normalize the working group schedule document.

    Args:
        payload: Decoded schedule.json, an object keyed by "vN"

    Returns:
        Records keyed by major version; entries without a usable key or
        a parseable end date (e.g. "TBD") are dropped
    """
    if not isinstance(payload, dict):
        logger.debug(f"Unexpected release schedule payload type: {type(payload).__name__}")
        return {}

    records: Dict[str, ReleaseRecord] = {}
    for cycle, entry in payload.items():
        key = major_key(cycle)
        if key is None or not isinstance(entry, dict):
            logger.debug(f"Dropping release schedule entry: {cycle!r}")
            continue

        record = ReleaseRecord.from_dict(entry)
        if not has_valid_end(record):
            logger.debug(f"Dropping release schedule entry without a valid end date: {cycle!r}")
            continue

        records[key] = record
    return records


class ReleaseScheduleFeed:
    """
    Feed for the Node.js Release working group schedule.

    Carries start, LTS, maintenance and end dates plus LTS codenames, so it
    takes precedence over endoflife.date when schedules are merged.
    """

    def __init__(self, url: str = RELEASE_SCHEDULE_URL, timeout: int = DEFAULT_TIMEOUT) -> None:
        self._url = url
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "schedule.wg.json"

    def fetch(self, session: requests.Session) -> Dict[str, ReleaseRecord]:
        """Fetch and normalize the working group schedule."""
        return normalize_release_schedule(fetch_json(session, self._url, self._timeout))
