"""Tests for the on-disk schedule cache."""

import json
import os
import time
from datetime import timedelta

from node_lifecycle._schedule.cache import ScheduleCache
from node_lifecycle.models import ReleaseRecord

FRAGMENT = {
    "22": ReleaseRecord(start="2024-04-23", lts="2024-10-22", end="2027-04-30", codename="Jod"),
    "23": ReleaseRecord(end="2025-06-01"),
}


class TestScheduleCache:
    """Test ScheduleCache read/write behavior."""

    def test_write_then_read(self, tmp_path):
        cache = ScheduleCache(tmp_path / "cache", timedelta(hours=1))
        cache.write("schedule.wg.json", FRAGMENT)
        assert cache.read("schedule.wg.json") == FRAGMENT

    def test_write_creates_directory(self, tmp_path):
        directory = tmp_path / "a" / "b"
        cache = ScheduleCache(directory, timedelta(hours=1))
        cache.write("schedule.eol.json", FRAGMENT)
        assert (directory / "schedule.eol.json").is_file()

    def test_miss_when_absent(self, tmp_path):
        cache = ScheduleCache(tmp_path, timedelta(hours=1))
        assert cache.read("schedule.wg.json") is None

    def test_expired_entry_is_miss(self, tmp_path):
        cache = ScheduleCache(tmp_path, timedelta(hours=1))
        cache.write("schedule.wg.json", FRAGMENT)
        stale = time.time() - 2 * 3600
        os.utime(cache.path_for("schedule.wg.json"), (stale, stale))
        assert cache.read("schedule.wg.json") is None

    def test_zero_ttl_disables_hits(self, tmp_path):
        cache = ScheduleCache(tmp_path, timedelta(0))
        cache.write("schedule.wg.json", FRAGMENT)
        assert cache.read("schedule.wg.json") is None

    def test_corrupt_file_is_miss(self, tmp_path):
        (tmp_path / "schedule.wg.json").write_text("{not json", encoding="utf-8")
        cache = ScheduleCache(tmp_path, timedelta(hours=1))
        assert cache.read("schedule.wg.json") is None

    def test_wrong_shape_is_miss(self, tmp_path):
        (tmp_path / "schedule.wg.json").write_text(json.dumps(["22", "23"]), encoding="utf-8")
        (tmp_path / "schedule.eol.json").write_text(json.dumps({"22": "2027-04-30"}), encoding="utf-8")
        cache = ScheduleCache(tmp_path, timedelta(hours=1))
        assert cache.read("schedule.wg.json") is None
        assert cache.read("schedule.eol.json") is None

    def test_unwritable_location_is_ignored(self, tmp_path):
        """Test that a cache directory blocked by a file does not raise."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        cache = ScheduleCache(blocker / "cache", timedelta(hours=1))
        cache.write("schedule.wg.json", FRAGMENT)
        assert cache.read("schedule.wg.json") is None

    def test_stored_format_is_plain_json(self, tmp_path):
        cache = ScheduleCache(tmp_path, timedelta(hours=1))
        cache.write("schedule.eol.json", {"23": ReleaseRecord(end="2025-06-01")})
        with open(tmp_path / "schedule.eol.json", encoding="utf-8") as f:
            assert json.load(f) == {"23": {"end": "2025-06-01"}}

    def test_malformed_entries_dropped(self, tmp_path):
        """Test that cached entries failing feed validation are not returned."""
        data = {"22": {}, "bogus": {"end": "2030-01-01"}, "23": {"end": "TBD"}, "v24": {"end": "2028-04-30"}}
        (tmp_path / "schedule.wg.json").write_text(json.dumps(data), encoding="utf-8")
        cache = ScheduleCache(tmp_path, timedelta(hours=1))
        assert cache.read("schedule.wg.json") == {"24": ReleaseRecord(end="2028-04-30")}
