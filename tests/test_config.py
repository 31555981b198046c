"""Tests for ScheduleConfig."""

import unittest
from datetime import timedelta
from pathlib import Path

from node_lifecycle._schedule.config import DEFAULT_CACHE_TTL, ScheduleConfig, default_cache_directory
from node_lifecycle.exceptions import ConfigurationError


class TestScheduleConfigDefaults(unittest.TestCase):
    """Test defaults and validation."""

    def test_defaults(self):
        config = ScheduleConfig()
        self.assertEqual(config.cache_ttl, timedelta(hours=24))
        self.assertEqual(config.cache_directory, Path.home() / ".cache" / "node-lifecycle")
        config.validate()

    def test_negative_ttl_rejected(self):
        with self.assertRaises(ConfigurationError):
            ScheduleConfig(cache_ttl=timedelta(seconds=-5)).validate()

    def test_zero_ttl_allowed(self):
        ScheduleConfig(cache_ttl=timedelta(0)).validate()


class TestScheduleConfigFromEnv(unittest.TestCase):
    """Test environment handling in from_env."""

    def test_empty_environment(self):
        config = ScheduleConfig.from_env({})
        self.assertEqual(config.cache_ttl, DEFAULT_CACHE_TTL)
        self.assertEqual(config.cache_directory, default_cache_directory())

    def test_ttl_in_milliseconds(self):
        config = ScheduleConfig.from_env({"NODE_EOL_CACHE_TTL": "60000"})
        self.assertEqual(config.cache_ttl, timedelta(minutes=1))

    def test_invalid_ttl(self):
        with self.assertRaises(ConfigurationError):
            ScheduleConfig.from_env({"NODE_EOL_CACHE_TTL": "a day"})

    def test_negative_ttl(self):
        with self.assertRaises(ConfigurationError):
            ScheduleConfig.from_env({"NODE_EOL_CACHE_TTL": "-1"})

    def test_cache_dir_variable(self):
        config = ScheduleConfig.from_env({"NODE_EOL_CACHE_DIR": "/tmp/nl-cache", "XDG_CACHE_HOME": "/tmp/xdg"})
        self.assertEqual(config.cache_directory, Path("/tmp/nl-cache"))

    def test_xdg_cache_home_fallback(self):
        config = ScheduleConfig.from_env({"XDG_CACHE_HOME": "/tmp/xdg"})
        self.assertEqual(config.cache_directory, Path("/tmp/xdg/node-lifecycle"))

    def test_empty_values_fall_back_to_defaults(self):
        config = ScheduleConfig.from_env({"NODE_EOL_CACHE_DIR": "", "NODE_EOL_CACHE_TTL": " "})
        self.assertEqual(config.cache_directory, default_cache_directory())
        self.assertEqual(config.cache_ttl, DEFAULT_CACHE_TTL)

    def test_explicit_arguments_win(self):
        config = ScheduleConfig.from_env(
            {"NODE_EOL_CACHE_TTL": "1000", "NODE_EOL_CACHE_DIR": "/tmp/env"},
            cache_ttl=timedelta(seconds=30),
            cache_directory=Path("/tmp/arg"),
        )
        self.assertEqual(config.cache_ttl, timedelta(seconds=30))
        self.assertEqual(config.cache_directory, Path("/tmp/arg"))
