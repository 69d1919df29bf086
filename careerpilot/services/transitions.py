"""Status transitions for tracked applications.

Any status may follow any other. A transition only decides which derived
timestamps to stamp: ``applied_date`` on the first entry into ``applied`` and
``response_date`` on the first entry into ``offer`` or ``rejected``. Once set,
neither is cleared or overwritten.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Protocol

from careerpilot.core.exceptions import InvalidStatusError


class ApplicationStatus(str, Enum):
    """Pipeline stages of an application."""

    SAVED = "saved"
    APPLIED = "applied"
    INTERVIEWING = "interviewing"
    OFFER = "offer"
    REJECTED = "rejected"


RESPONSE_STATUSES = frozenset({ApplicationStatus.OFFER, ApplicationStatus.REJECTED})
PENDING_STATUSES = frozenset({ApplicationStatus.SAVED, ApplicationStatus.APPLIED})


class TrackedRecord(Protocol):
    status: str
    applied_date: datetime | None
    response_date: datetime | None


@dataclass
class StatusUpdate:
    """Fields to merge into a record after a transition."""

    status: ApplicationStatus
    updated_at: datetime
    applied_date: datetime | None = None
    response_date: datetime | None = None

    def as_values(self) -> dict[str, Any]:
        """Return only the fields that change, ready for an UPDATE."""
        values: dict[str, Any] = {
            "status": self.status.value,
            "updated_at": self.updated_at,
        }
        if self.applied_date is not None:
            values["applied_date"] = self.applied_date
        if self.response_date is not None:
            values["response_date"] = self.response_date
        return values


@dataclass
class _BlankRecord:
    status: str = ApplicationStatus.SAVED.value
    applied_date: datetime | None = None
    response_date: datetime | None = None


def parse_status(value: object) -> ApplicationStatus:
    """Coerce ``value`` to a pipeline status or raise InvalidStatusError."""
    if isinstance(value, ApplicationStatus):
        return value
    try:
        return ApplicationStatus(value)
    except ValueError:
        raise InvalidStatusError(value) from None


def apply_transition(
    record: TrackedRecord,
    requested_status: object,
    now: datetime,
) -> StatusUpdate:
    """Compute the update for moving ``record`` to ``requested_status``."""
    target = parse_status(requested_status)
    current = record.status

    update = StatusUpdate(status=target, updated_at=now)

    if (
        target is ApplicationStatus.APPLIED
        and current != ApplicationStatus.APPLIED.value
        and record.applied_date is None
    ):
        update.applied_date = now

    if (
        target in RESPONSE_STATUSES
        and current not in {s.value for s in RESPONSE_STATUSES}
        and record.response_date is None
    ):
        update.response_date = now

    return update


def initial_fields(status: object | None, now: datetime) -> dict[str, Any]:
    """Fields for a new record, as if it moved from ``saved`` to ``status``."""
    if status is None:
        status = ApplicationStatus.SAVED
    update = apply_transition(_BlankRecord(), status, now)
    values = update.as_values()
    values["created_at"] = now
    return values
