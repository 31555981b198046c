"""Extraction of the major release line from loose version strings."""

import re
from typing import Optional

from semantic_version import Version

from node_lifecycle.logging_config import logger

# First run of up to three dot-separated numbers, e.g. "v22.5.0" -> "22.5.0".
# Components are capped at 16 digits so absurd inputs are rejected, not overflowed.
_VERSION_CORE = re.compile(r"(?<!\d)(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?!\d)")


def coerce_version(version: Optional[str]) -> Optional[Version]:
    """
    Coerce an arbitrary version-like string into a semantic version.

    Any prefix ("v", "node-v", ...), extra dot segments and pre-release or
    build suffixes are ignored. Missing minor/patch components become zero.

    Args:
        version: Version string such as "v22.5.0", "20", "22.1.0-rc.1"

    Returns:
        semantic_version.Version or None if no number could be found
    """
    if not isinstance(version, str):
        return None

    match = _VERSION_CORE.search(version)
    if not match:
        return None

    core = ".".join(str(int(part)) for part in match.groups() if part is not None)
    try:
        return Version.coerce(core)
    except ValueError:
        logger.debug(f"Could not coerce version string: {version!r}")
        return None


def parse_major(version: Optional[str]) -> Optional[int]:
    """
    Return the major version of a loose version string.

    Args:
        version: Version string such as "v22.5.0" or "22"

    Returns:
        Major version as int, or None when the string is unparsable
    """
    coerced = coerce_version(version)
    if coerced is None:
        return None
    return coerced.major
