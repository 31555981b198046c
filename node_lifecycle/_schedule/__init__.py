"""Release schedule plumbing: feeds, cache, configuration and merging."""

from .cache import ScheduleCache
from .config import ScheduleConfig
from .feeds import EndOfLifeFeed, ReleaseScheduleFeed, normalize_endoflife, normalize_release_schedule
from .merge import merged_schedule
from .protocol import FeedProvider
from .repository import ScheduleRepository, build_default_feeds

__all__ = [
    "EndOfLifeFeed",
    "FeedProvider",
    "ReleaseScheduleFeed",
    "ScheduleCache",
    "ScheduleConfig",
    "ScheduleRepository",
    "build_default_feeds",
    "merged_schedule",
    "normalize_endoflife",
    "normalize_release_schedule",
]
