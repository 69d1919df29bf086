"""Column defaults shared by the models."""

import uuid
from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current UTC time as timezone-naive datetime for DB storage."""
    return datetime.now(UTC).replace(tzinfo=None)


def new_id() -> str:
    """Return an opaque identifier for a new document."""
    return uuid.uuid4().hex


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)
