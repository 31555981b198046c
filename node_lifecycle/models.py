"""Data model for release schedules and classification results."""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

# Reported as the major of a version string with no extractable number
UNPARSABLE_MAJOR = math.nan


class SupportStatus(str, Enum):
    """Support phase of a release line."""

    CURRENT = "current"
    ACTIVE_LTS = "active-lts"
    MAINTENANCE = "maintenance"
    EOL = "eol"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


def _str_or_none(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


@dataclass(frozen=True)
class ReleaseRecord:
    """
    Lifecycle dates of one major release line.

    All dates are kept in their original ISO string form. Only ``end`` is
    needed for classification; a record without it classifies as unknown.

    Attributes:
        start: Date the release line opened (informational)
        lts: Date the line entered long-term support
        maintenance: Date the line entered maintenance-only support
        end: End-of-life date
        codename: LTS codename published by the release schedule, if any
    """

    start: Optional[str] = None
    lts: Optional[str] = None
    maintenance: Optional[str] = None
    end: Optional[str] = None
    codename: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReleaseRecord":
        """Build a record from JSON-shaped data, ignoring non-string values."""
        return cls(
            start=_str_or_none(data.get("start")),
            lts=_str_or_none(data.get("lts")),
            maintenance=_str_or_none(data.get("maintenance")),
            end=_str_or_none(data.get("end")),
            codename=_str_or_none(data.get("codename")),
        )

    def to_dict(self) -> Dict[str, str]:
        """Serialize the record, omitting absent fields."""
        fields = {
            "start": self.start,
            "lts": self.lts,
            "maintenance": self.maintenance,
            "end": self.end,
            "codename": self.codename,
        }
        return {key: value for key, value in fields.items() if value is not None}


# Major version (decimal string) -> release record, read-only once built
Schedule = Mapping[str, ReleaseRecord]


def freeze_schedule(records: Mapping[str, ReleaseRecord]) -> Schedule:
    """Return a read-only snapshot of the given records."""
    return MappingProxyType(dict(records))


def as_record(value: Any) -> Optional[ReleaseRecord]:
    """Coerce a schedule value to a ReleaseRecord; non-mapping values give None."""
    if isinstance(value, ReleaseRecord):
        return value
    if isinstance(value, Mapping):
        return ReleaseRecord.from_dict(value)
    return None


def schedule_from_dict(data: Mapping[str, Any]) -> Schedule:
    """
    Build a Schedule from plain JSON-shaped data.

    Unlike feed normalization nothing is dropped here: records missing an
    end date are kept so that classification reports them as unknown.
    Non-mapping values are ignored.
    """
    records = {}
    for key, value in data.items():
        record = as_record(value)
        if record is not None:
            records[str(key)] = record
    return freeze_schedule(records)


def schedule_to_dict(schedule: Schedule) -> Dict[str, Dict[str, str]]:
    """Serialize a Schedule to plain JSON-shaped data."""
    return {key: record.to_dict() for key, record in schedule.items()}


@dataclass(frozen=True)
class Classification:
    """
    Support status of a version as of a given instant.

    Attributes:
        major: Major version, or ``UNPARSABLE_MAJOR`` (NaN) when none could be read
        status: Support phase
        eol: End-of-life date in its original string form
        days_to_eol: Whole days until end-of-life; zero or negative once reached
    """

    major: Union[int, float]
    status: SupportStatus
    eol: Optional[str] = None
    days_to_eol: Optional[int] = None

    @property
    def is_parsable(self) -> bool:
        return not (isinstance(self.major, float) and math.isnan(self.major))

    @property
    def is_supported(self) -> bool:
        return self.status in (SupportStatus.CURRENT, SupportStatus.ACTIVE_LTS, SupportStatus.MAINTENANCE)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "major": self.major if self.is_parsable else None,
            "status": self.status.value,
        }
        if self.eol is not None:
            result["eol"] = self.eol
        if self.days_to_eol is not None:
            result["daysToEol"] = self.days_to_eol
        return result
