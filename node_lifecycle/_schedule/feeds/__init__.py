"""Release schedule feeds."""

from .endoflife import ENDOFLIFE_URL, EndOfLifeFeed, normalize_endoflife
from .release_schedule import RELEASE_SCHEDULE_URL, ReleaseScheduleFeed, normalize_release_schedule

__all__ = [
    "ENDOFLIFE_URL",
    "EndOfLifeFeed",
    "RELEASE_SCHEDULE_URL",
    "ReleaseScheduleFeed",
    "normalize_endoflife",
    "normalize_release_schedule",
]
