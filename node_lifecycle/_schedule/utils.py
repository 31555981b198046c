"""Shared helpers for feed normalization."""

import re
from typing import Any, Optional

import requests

from node_lifecycle.dates import parse_date
from node_lifecycle.exceptions import FeedError
from node_lifecycle.logging_config import logger
from node_lifecycle.models import ReleaseRecord

_INTEGER_MAJOR = re.compile(r"^[vV]?(\d+)$")


def major_key(value: Any) -> Optional[str]:
    """
    Normalize a cycle identifier into a major version key.

    Accepts ints and strings like "22" or "v22". Anything else ("v0.12",
    "lts", floats, booleans) is not a major release line.

    Returns:
        Decimal string key (e.g. "22") or None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value) if value >= 0 else None
    if isinstance(value, str):
        match = _INTEGER_MAJOR.match(value.strip())
        if match:
            return str(int(match.group(1)))
    return None


def has_valid_end(record: ReleaseRecord) -> bool:
    """Whether the record carries a parseable end-of-life date."""
    return parse_date(record.end) is not None


def fetch_json(session: requests.Session, url: str, timeout: int) -> Any:
    """
    GET a URL and decode its JSON body.

    Raises:
        FeedError: On transport errors, HTTP errors or invalid JSON
    """
    logger.debug(f"Fetching {url}")
    try:
        response = session.get(url, timeout=timeout)
    except requests.exceptions.Timeout:
        raise FeedError(f"Timeout fetching {url}")
    except requests.exceptions.RequestException as e:
        raise FeedError(f"Error fetching {url}: {e}")

    if response.status_code >= 400:
        raise FeedError(f"{url} -> HTTP {response.status_code}")

    try:
        return response.json()
    except ValueError as e:
        raise FeedError(f"Invalid JSON from {url}: {e}")
