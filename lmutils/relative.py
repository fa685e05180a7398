"""Relative time formatting for Unix timestamps.

Turns the distance between two instants into a short English phrase such as
``"just now"``, ``"5 minutes ago"`` or ``"2 years ago"``. The core functions
take the reference time explicitly so they stay pure; :func:`ago` is the only
entry point that reads the system clock.

Months and years use the fixed-length approximations from
:mod:`lmutils.util`. Every count is floor-divided from the same diff, and the
week bucket is checked before the month bucket, so a 30-day diff still reads
``"4 weeks ago"``.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from enum import Enum
from time import time as current_time
from typing import Any, TypeAlias

from dateutil.parser import isoparse

from lmutils.util import DAY, HOUR, MINUTE, MONTH, WEEK, YEAR

logger = logging.getLogger(__name__)

Instant: TypeAlias = int | datetime | date | str

# Diffs up to and including this many seconds read as "just now"
JUST_NOW_SECONDS = 15


class Bucket(Enum):
    """Relative-time category; counted buckets hold their singular unit word."""

    FUTURE = "future"
    JUST_NOW = "just now"
    SECONDS = "second"
    MINUTES = "minute"
    HOURS = "hour"
    DAYS = "day"
    WEEKS = "week"
    MONTHS = "month"
    YEARS = "year"


@dataclass(frozen=True, kw_only=True)
class Elapsed:
    diff: int
    bucket: Bucket
    count: int

    def __str__(self) -> str:
        """Human-friendly phrase, e.g. ``"1 hour ago"``."""
        if self.bucket is Bucket.FUTURE:
            return "in the future"
        if self.bucket is Bucket.JUST_NOW:
            return "just now"
        unit = self.bucket.value if self.count == 1 else f"{self.bucket.value}s"
        return f"{self.count} {unit} ago"


def classify(diff: int) -> Elapsed:
    """Select the bucket and count for ``diff`` seconds elapsed.

    Negative diffs are in the future. For ``FUTURE`` and ``JUST_NOW`` the
    count is the raw diff.
    """
    if diff < 0:
        logger.debug("Timestamp is %d seconds in the future", -diff)
        return Elapsed(diff=diff, bucket=Bucket.FUTURE, count=diff)
    if diff <= JUST_NOW_SECONDS:
        return Elapsed(diff=diff, bucket=Bucket.JUST_NOW, count=diff)

    # (bucket, count, exclusive upper limit), first match wins
    ladder = (
        (Bucket.SECONDS, diff, 60),
        (Bucket.MINUTES, diff // MINUTE, 60),
        (Bucket.HOURS, diff // HOUR, 24),
        (Bucket.DAYS, diff // DAY, 7),
        (Bucket.WEEKS, diff // WEEK, 5),
        (Bucket.MONTHS, diff // MONTH, 12),
    )
    for bucket, count, limit in ladder:
        if count < limit:
            return Elapsed(diff=diff, bucket=bucket, count=count)
    return Elapsed(diff=diff, bucket=Bucket.YEARS, count=diff // YEAR)


def to_timestamp(value: Any, name: str = "timestamp") -> int:
    """Convert an instant to integer seconds (Unix timestamp).

    Accepts:
    - int: Passed through as-is (Unix timestamp, may be negative)
    - datetime: Must be timezone-aware, converted to timestamp
    - date: Converted to midnight UTC of that day
    - str: ISO-8601 with a UTC offset, parsed with dateutil

    Raises:
        TypeError: If value is an unsupported type or naive datetime
        ValueError: If a string is not ISO-8601 or lacks a UTC offset
    """
    if isinstance(value, bool):
        raise TypeError(
            f"{name} must be int, datetime, date, or str, not bool.\n"
            f"Got: {value!r}"
        )
    if isinstance(value, int):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError(
                f"{name} must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return int(value.timestamp())
    if isinstance(value, date):
        dt = datetime.combine(value, time.min, tzinfo=timezone.utc)
        return int(dt.timestamp())
    if isinstance(value, str):
        try:
            parsed = isoparse(value)
        except ValueError as e:
            raise ValueError(
                f"{name} string must be ISO-8601.\n"
                f"Got: {value!r}\n"
                f"Example: '2025-01-15T14:00:00+00:00'"
            ) from e
        if parsed.tzinfo is None:
            raise ValueError(
                f"{name} string must include a UTC offset.\n"
                f"Got: {value!r}\n"
                f"Hint: Append 'Z' or '+00:00', e.g. '2025-01-15T14:00:00Z'"
            )
        return int(parsed.timestamp())
    raise TypeError(
        f"{name} must be int, datetime, date, or str.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  how_long_ago(1735689600, now)  # int (Unix seconds)\n"
        f"  how_long_ago(datetime(2025,1,1,tzinfo=timezone.utc), now)\n"
        f"  how_long_ago('2025-01-01T00:00:00Z', now)  # ISO-8601 string\n"
        f"Hint: Convert floats with int(), e.g. int(time.time())"
    )


def how_long_ago(timestamp: Instant, now: Instant) -> str:
    """Describe ``timestamp`` relative to ``now``, e.g. ``"3 days ago"``."""
    diff = to_timestamp(now, "now") - to_timestamp(timestamp)
    return str(classify(diff))


def ago(timestamp: Instant) -> str:
    """Describe ``timestamp`` relative to the current system time."""
    return how_long_ago(timestamp, int(current_time()))
