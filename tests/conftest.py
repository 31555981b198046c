"""Pytest configuration and shared fixtures for all tests."""

import pytest

from node_lifecycle.models import schedule_from_dict

from .sample_data import NOW, SAMPLE_SCHEDULE


@pytest.fixture
def now():
    """The fixed reference instant, 2025-06-02T00:00:00Z."""
    return NOW


@pytest.fixture
def schedule():
    """The sample merged schedule."""
    return schedule_from_dict(SAMPLE_SCHEDULE)


@pytest.fixture(autouse=True)
def isolate_cache_env(monkeypatch, tmp_path):
    """Keep tests away from the real user cache directory."""
    monkeypatch.delenv("NODE_EOL_CACHE_TTL", raising=False)
    monkeypatch.setenv("NODE_EOL_CACHE_DIR", str(tmp_path / "cache"))
