"""Shared UTC time helpers.

Todos are stored with whole-second Unix timestamps, so every timestamp that
enters the domain goes through ``utc_now`` or ``from_unix_seconds`` and is
truncated to the second.
"""

from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC timestamp truncated to whole seconds."""
    return truncate_to_seconds(datetime.now(UTC))


def truncate_to_seconds(value: datetime) -> datetime:
    """Drop sub-second precision, treating naive values as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).replace(microsecond=0)


def to_unix_seconds(value: datetime) -> int:
    """Convert a datetime to integer seconds since the epoch."""
    return int(truncate_to_seconds(value).timestamp())


def from_unix_seconds(seconds: int) -> datetime:
    """Convert integer seconds since the epoch to an aware UTC datetime."""
    return datetime.fromtimestamp(seconds, UTC)
