"""On-disk TTL cache for normalized feed fragments.

The cache is best effort: a missing, stale, unreadable or corrupt entry is
a miss, and failing to write is ignored. Freshness is judged by file mtime.
"""

import json
import time
from datetime import timedelta
from pathlib import Path
from typing import Dict, Optional

from node_lifecycle.logging_config import logger
from node_lifecycle.models import ReleaseRecord

from .utils import has_valid_end, major_key


class ScheduleCache:
    """
    Key-value store of schedule fragments, keyed by feed name.

    Example:
        cache = ScheduleCache(Path("~/.cache/node-lifecycle"), timedelta(hours=24))
        fragment = cache.read("schedule.wg.json")
        if fragment is None:
            fragment = feed.fetch(session)
            cache.write("schedule.wg.json", fragment)
    """

    def __init__(self, directory: Path, ttl: timedelta) -> None:
        self._directory = Path(directory)
        self._ttl = ttl

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, name: str) -> Path:
        return self._directory / name

    def read(self, name: str) -> Optional[Dict[str, ReleaseRecord]]:
        """
        Return the cached fragment for ``name`` if it is still fresh.

        Returns:
            Records keyed by major version, or None on a miss
        """
        ttl_seconds = self._ttl.total_seconds()
        if ttl_seconds <= 0:
            return None

        path = self.path_for(name)
        try:
            age = time.time() - path.stat().st_mtime
            if age > ttl_seconds:
                logger.debug(f"Cache expired: {path}")
                return None
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable cache file {path}: {e}")
            return None

        if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
            logger.warning(f"Ignoring malformed cache file {path}")
            return None

        # Same filtering as feed normalization
        records: Dict[str, ReleaseRecord] = {}
        for key, value in data.items():
            major = major_key(key)
            record = ReleaseRecord.from_dict(value)
            if major is None or not has_valid_end(record):
                logger.debug(f"Dropping cached entry {key!r} from {path}")
                continue
            records[major] = record

        logger.debug(f"Cache hit: {path}")
        return records

    def write(self, name: str, fragment: Dict[str, ReleaseRecord]) -> None:
        """Store a fragment; failures are logged and otherwise ignored."""
        path = self.path_for(name)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump({key: record.to_dict() for key, record in fragment.items()}, f)
        except OSError as e:
            logger.warning(f"Failed to write cache file {path}: {e}")
