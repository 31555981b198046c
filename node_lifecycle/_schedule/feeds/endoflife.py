"""endoflife.date feed for Node.js (secondary source)."""

from typing import Any, Dict

import requests

from node_lifecycle.logging_config import logger
from node_lifecycle.models import ReleaseRecord

from ..utils import fetch_json, has_valid_end, major_key

ENDOFLIFE_URL = "https://endoflife.date/api/nodejs.json"
DEFAULT_TIMEOUT = 15  # seconds


def normalize_endoflife(payload: Any) -> Dict[str, ReleaseRecord]:
    """
    Normalize the endoflife.date cycle list.

    Only the end date (and release date, informational) is taken. The
    ``lts`` field of this API is a boolean or a date with different
    semantics, so it is never mapped; schedules built from this feed alone
    have no phase dates.

    Args:
        payload: Decoded API response, a list of cycle objects

    Returns:
        Records keyed by major version; cycles that are not integer majors
        or have no end date (``eol`` false/null) are dropped
    """
    if not isinstance(payload, list):
        logger.debug(f"Unexpected endoflife.date payload type: {type(payload).__name__}")
        return {}

    records: Dict[str, ReleaseRecord] = {}
    for entry in payload:
        if not isinstance(entry, dict):
            continue

        key = major_key(entry.get("cycle"))
        record = ReleaseRecord.from_dict({"start": entry.get("releaseDate"), "end": entry.get("eol")})
        if key is None or not has_valid_end(record):
            logger.debug(f"Dropping endoflife.date cycle: {entry.get('cycle')!r}")
            continue

        records[key] = record
    return records


class EndOfLifeFeed:
    """Feed for https://endoflife.date, used to fill lines the primary feed lacks."""

    def __init__(self, url: str = ENDOFLIFE_URL, timeout: int = DEFAULT_TIMEOUT) -> None:
        self._url = url
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "schedule.eol.json"

    def fetch(self, session: requests.Session) -> Dict[str, ReleaseRecord]:
        """Fetch and normalize the endoflife.date cycle list."""
        return normalize_endoflife(fetch_json(session, self._url, self._timeout))
