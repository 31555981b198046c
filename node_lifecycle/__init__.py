"""node-lifecycle: Node.js release lifecycle classification."""


def _get_version() -> str:
    """Get package version with fallback mechanisms."""
    # Method 1: Try importlib.metadata (preferred for installed packages)
    try:
        from importlib.metadata import version

        return version("node-lifecycle")
    except Exception:
        pass

    # Method 2: Try reading from pyproject.toml directly
    try:
        from pathlib import Path

        import tomllib

        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
            return pyproject_data.get("project", {}).get("version", "unknown")
    except Exception:
        pass

    # Final fallback
    return "unknown"


__version__ = _get_version()

from node_lifecycle._schedule import ScheduleConfig, ScheduleRepository, merged_schedule  # noqa: E402
from node_lifecycle.classifier import classify  # noqa: E402
from node_lifecycle.dates import format_friendly_date  # noqa: E402
from node_lifecycle.lifecycle import (  # noqa: E402
    active_lts_versions,
    codename_for,
    current_version,
    recommend_upgrades,
)
from node_lifecycle.models import (  # noqa: E402
    Classification,
    ReleaseRecord,
    Schedule,
    SupportStatus,
    schedule_from_dict,
)
from node_lifecycle.version import parse_major  # noqa: E402

__all__ = [
    "Classification",
    "ReleaseRecord",
    "Schedule",
    "ScheduleConfig",
    "ScheduleRepository",
    "SupportStatus",
    "active_lts_versions",
    "classify",
    "codename_for",
    "current_version",
    "format_friendly_date",
    "merged_schedule",
    "parse_major",
    "recommend_upgrades",
    "schedule_from_dict",
]
