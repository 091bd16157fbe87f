"""Common time utilities."""

from __future__ import annotations

import datetime as dt


def utcnow() -> dt.datetime:
    """Return an aware UTC timestamp."""
    return dt.datetime.now(dt.UTC)


def parse_timestamp(value: str) -> dt.datetime:
    """Parse an ISO 8601 timestamp into an aware UTC datetime.

    GitHub emits ``Z`` suffixed timestamps; naive inputs are treated as UTC.
    Raises ``ValueError`` when the value cannot be parsed.
    """
    parsed = dt.datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


def to_github_datetime(value: dt.datetime) -> str:
    """Format an aware datetime the way GitHub search qualifiers expect."""
    if value.tzinfo is None:
        msg = "datetime must be timezone-aware"
        raise ValueError(msg)
    return value.astimezone(dt.UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
