"""Date helpers shared by the serialisers."""

from __future__ import annotations

from datetime import datetime, timezone

from techstacks.shared.consts import DateHandler


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo) and convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_datetime(
    value: datetime, handler: DateHandler = DateHandler.ISO8601
) -> str:
    """
    Format a datetime according to the configured date handler.

    Args:
        value: Datetime to format, naive values are treated as UTC
        handler: Wire format to use

    Returns:
        The formatted date string
    """
    value = as_utc(value)
    if handler is DateHandler.UNIX_TIME:
        return str(int(value.timestamp()))
    return value.isoformat(timespec="seconds").replace("+00:00", "Z")
