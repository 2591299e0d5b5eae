"""Shared UTC timestamp helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def domain_utc_now() -> datetime:
    """Return the current wall-clock time as an aware UTC datetime."""

    return datetime.now(timezone.utc)


def domain_format_utc_timestamp(moment: datetime) -> str:
    """Render a datetime as ISO-8601 UTC with millisecond precision.

    Args:
        moment: Aware or naive datetime; naive values are treated as UTC.

    Returns:
        str: Timestamp such as `2026-10-18T09:30:00.123Z`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    rendered = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return rendered.replace("+00:00", "Z")
