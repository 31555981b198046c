"""FeedProvider protocol for release schedule sources."""

from typing import Dict, Protocol

import requests

from node_lifecycle.models import ReleaseRecord


class FeedProvider(Protocol):
    """
    Protocol defining the interface for release schedule feeds.

    Each feed fetches one upstream document and normalizes it into
    release records keyed by major version. Normalization is total: bad
    entries are dropped, never half-populated.

    Example:
        class ReleaseScheduleFeed:
            name = "schedule.wg.json"

            def fetch(self, session: requests.Session) -> Dict[str, ReleaseRecord]:
                response = session.get(URL, timeout=DEFAULT_TIMEOUT)
                return normalize_release_schedule(response.json())
    """

    @property
    def name(self) -> str:
        """
        Name of this feed.

        Doubles as the cache key, so it must be unique and filesystem-safe.
        """
        ...

    def fetch(self, session: requests.Session) -> Dict[str, ReleaseRecord]:
        """
        Fetch and normalize the feed.

        Args:
            session: requests.Session with configured headers (User-Agent, etc.)

        Returns:
            Normalized records keyed by major version string

        Raises:
            FeedError: If the feed is unreachable or undecodable
        """
        ...
