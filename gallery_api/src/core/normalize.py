from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional


def _to_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)):
        # Epoch milliseconds, as emitted by JavaScript clients.
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


# PUBLIC_INTERFACE
def normalize_date(value: Any) -> Optional[str]:
    """
    Normalize a stored date value to an ISO-8601 UTC string.

    Accepts datetime, date, ISO-8601 strings and epoch milliseconds. Naive
    values are taken as UTC. The result has millisecond precision and a `Z`
    suffix, e.g. "2024-05-01T08:30:00.000Z". Returns None when the value
    cannot be interpreted.
    """
    dt = _to_datetime(value)
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    try:
        dt = dt.astimezone(timezone.utc)
    except OverflowError:
        # Shifting to UTC can leave the datetime range near year 1 or 9999.
        return None
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
