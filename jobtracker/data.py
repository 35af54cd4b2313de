"""Job application records and their statuses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class JobStatus(Enum):
    """Stage an application has reached; ``ALL`` is used only for filtering."""

    APPLIED = "Applied"
    OA = "OA"
    INTERVIEW = "Interview"
    REJECTED = "Rejected"
    OFFER = "Offer"
    ACCEPTED = "Accepted"
    WITHDRAWN = "Withdrawn"
    ALL = "All"

    def __str__(self) -> str:
        return self.value


_TEXT_FIELDS = ("company", "position", "date_applied", "notes")
_OPTIONAL_TEXT_FIELDS = ("url", "last_updated")


@dataclass
class JobApplication:
    """A single job application."""

    company: str
    position: str
    date_applied: str
    status: JobStatus
    notes: str
    url: str | None = None
    last_updated: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping used in the data file."""
        return {
            "company": self.company,
            "position": self.position,
            "date_applied": self.date_applied,
            "status": self.status.value,
            "notes": self.notes,
            "url": self.url,
            "last_updated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, data: Any) -> JobApplication:
        """Build an application from a decoded JSON object.

        Raises ValueError when the object does not describe a job.
        """
        if not isinstance(data, dict):
            raise ValueError("job entry must be an object")
        for name in (*_TEXT_FIELDS, "status"):
            if name not in data:
                raise ValueError(f"missing field {name!r}")
        for name in _TEXT_FIELDS:
            if not isinstance(data[name], str):
                raise ValueError(f"field {name!r} must be a string")
        for name in _OPTIONAL_TEXT_FIELDS:
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"field {name!r} must be a string or null")
        raw_status = data["status"]
        if not isinstance(raw_status, str):
            raise ValueError("field 'status' must be a string")
        try:
            status = JobStatus(raw_status)
        except ValueError:
            raise ValueError(f"unknown status {raw_status!r}") from None
        return cls(
            company=data["company"],
            position=data["position"],
            date_applied=data["date_applied"],
            status=status,
            notes=data["notes"],
            url=data.get("url"),
            last_updated=data.get("last_updated"),
        )