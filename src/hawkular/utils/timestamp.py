"""Timestamp parsing and normalization utilities.

Hawkular exchanges timestamps as UNIX milliseconds. These helpers convert
between that representation and timezone-aware datetimes.
All functions raise ValueError for invalid input and do not accept None.
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_to_datetime(ts_value: str | int | float | datetime) -> datetime:
    """Parse various timestamp formats to UTC datetime.

    Args:
        ts_value: Timestamp in one of:
            - datetime: returned as-is (UTC ensured)
            - int/float: Unix timestamp in milliseconds
            - str: ISO 8601 format string

    Returns:
        datetime object in UTC timezone.

    Raises:
        ValueError: If input is None, empty string, or invalid format.
    """
    if ts_value is None:
        raise ValueError("Timestamp cannot be None")

    if isinstance(ts_value, datetime):
        # Ensure timezone-aware
        if ts_value.tzinfo is None:
            return ts_value.replace(tzinfo=timezone.utc)
        return ts_value

    if isinstance(ts_value, bool):
        raise ValueError("Timestamp cannot be a boolean")

    if isinstance(ts_value, int):
        return _EPOCH + timedelta(milliseconds=ts_value)

    if isinstance(ts_value, float):
        return datetime.fromtimestamp(ts_value / 1000, tz=timezone.utc)

    if isinstance(ts_value, str):
        ts_str = ts_value.strip()
        if not ts_str:
            raise ValueError("Timestamp string cannot be empty")

        # Handle ISO 8601 format with 'Z' suffix
        if ts_str.endswith("Z"):
            ts_str = ts_str[:-1] + "+00:00"

        try:
            parsed = datetime.fromisoformat(ts_str)
        except ValueError as exc:
            raise ValueError("Invalid timestamp format. Expected ISO 8601 string or UNIX milliseconds.") from exc

        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed

    raise ValueError(f"Unsupported timestamp type: {type(ts_value)}. Expected datetime, int, float, or ISO 8601 string.")


def parse_to_ms(ts_value: str | int | float | datetime) -> int:
    """Normalize timestamp to UNIX milliseconds.

    Args:
        ts_value: Timestamp in one of:
            - datetime: converted to UNIX milliseconds (naive values are UTC)
            - int/float: treated as UNIX time in milliseconds
            - str: parsed as ISO 8601 format string

    Returns:
        int: UNIX timestamp in milliseconds.

    Raises:
        ValueError: If input is None, empty string, or invalid format.
    """
    if ts_value is None:
        raise ValueError("Timestamp cannot be None")

    if isinstance(ts_value, (int, float)) and not isinstance(ts_value, bool):
        return int(ts_value)

    dt = parse_to_datetime(ts_value)
    # Integer arithmetic keeps millisecond precision for far-off dates
    delta = dt - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def now_ms() -> int:
    """Current time as UNIX milliseconds."""
    return time.time_ns() // 1_000_000
