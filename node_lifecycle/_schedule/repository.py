"""Schedule repository: fetch both feeds, cache them, merge them."""

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Optional, Sequence, Tuple

import requests

from node_lifecycle.exceptions import FeedError
from node_lifecycle.http_client import create_session
from node_lifecycle.logging_config import logger
from node_lifecycle.models import ReleaseRecord, Schedule

from .cache import ScheduleCache
from .config import ScheduleConfig
from .feeds import EndOfLifeFeed, ReleaseScheduleFeed
from .merge import merged_schedule
from .protocol import FeedProvider


def build_default_feeds() -> Tuple[FeedProvider, FeedProvider]:
    """Return the (primary, secondary) feeds for Node.js."""
    return ReleaseScheduleFeed(), EndOfLifeFeed()


class ScheduleRepository:
    """
    Supplies the merged release schedule.

    The primary feed's records override the secondary's per major version.
    A feed that fails is treated as empty, so the result is whatever the
    other feed provided, or an empty schedule if both fail.

    Example:
        with ScheduleRepository(ScheduleConfig()) as repository:
            schedule = repository.get_schedule()
    """

    def __init__(
        self,
        config: Optional[ScheduleConfig] = None,
        feeds: Optional[Sequence[FeedProvider]] = None,
        cache: Optional[ScheduleCache] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the repository.

        Args:
            config: Cache settings; defaults to ScheduleConfig()
            feeds: (primary, secondary) feeds; defaults to build_default_feeds()
            cache: Cache to use instead of one built from config
            session: Session to use instead of a repository-owned one
        """
        self._config = config or ScheduleConfig()
        self._config.validate()
        primary, secondary = feeds if feeds is not None else build_default_feeds()
        self._primary = primary
        self._secondary = secondary
        self._cache = cache or ScheduleCache(self._config.cache_directory, self._config.cache_ttl)
        self._session = session
        self._owns_session = session is None

    @property
    def config(self) -> ScheduleConfig:
        return self._config

    def _get_session(self) -> requests.Session:
        """Get or create a requests session."""
        if self._session is None:
            self._session = create_session()
        return self._session

    def close(self) -> None:
        """Close the session if the repository created it."""
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "ScheduleRepository":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def load_feed(self, feed: FeedProvider) -> Dict[str, ReleaseRecord]:
        """
        Load one feed through the cache.

        Returns:
            Normalized records, or {} if the feed could not be fetched
        """
        cached = self._cache.read(feed.name)
        if cached is not None:
            return cached

        try:
            fragment = feed.fetch(self._get_session())
        except (FeedError, requests.exceptions.RequestException) as e:
            logger.warning(f"Release schedule feed {feed.name} unavailable: {e}")
            return {}

        logger.info(f"Fetched {len(fragment)} release lines from {feed.name}")
        self._cache.write(feed.name, fragment)
        return fragment

    def get_schedule(self) -> Schedule:
        """
        Fetch both feeds concurrently and merge them.

        Returns:
            Merged, read-only Schedule (possibly empty)
        """
        # Session is created here so both workers share it
        self._get_session()

        with ThreadPoolExecutor(max_workers=2) as executor:
            primary_future = executor.submit(self.load_feed, self._primary)
            secondary_future = executor.submit(self.load_feed, self._secondary)
            primary = primary_future.result()
            secondary = secondary_future.result()

        return merged_schedule(primary, secondary)
