from __future__ import annotations

import logging
from datetime import datetime, timezone

from ..errors import InvalidTimestampError

logger = logging.getLogger(__name__)

# Time conversion constants
SECONDS_PER_MINUTE = 60
MINUTE_PER_HOUR = 60
HOUR_PER_DAY = 24
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTE_PER_HOUR
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOUR_PER_DAY

# Fixed-length approximations, not calendar months/years
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365

Instant = datetime | int | float | str


def utc_now() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(occurred: Instant) -> datetime:
    """Normalize an instant to an aware UTC datetime.

    Naive datetimes and naive ISO strings are interpreted as local time.

    Args:
        occurred: A `datetime`, Unix epoch seconds, or an ISO 8601 string
            (a trailing "Z" is accepted).

    Returns:
        The same instant as an aware datetime in UTC.

    Raises:
        InvalidTimestampError: If the value has an unsupported type, cannot be
            parsed, or is outside the representable range.
    """
    if isinstance(occurred, datetime):
        parsed = occurred
    elif isinstance(occurred, bool):
        raise InvalidTimestampError(f"Unsupported timestamp type: {type(occurred).__name__}")
    elif isinstance(occurred, (int, float)):
        try:
            return datetime.fromtimestamp(occurred, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidTimestampError(f"Epoch seconds out of range: {occurred!r}") from e
    elif isinstance(occurred, str):
        text = occurred.strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidTimestampError(f"Not an ISO 8601 timestamp: {occurred!r}") from e
    else:
        raise InvalidTimestampError(f"Unsupported timestamp type: {type(occurred).__name__}")

    try:
        return parsed.astimezone(timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidTimestampError(f"Timestamp out of range: {occurred!r}") from e


def _ago(value: int, unit: str) -> str:
    suffix = "" if value == 1 else "s"
    return f"{value} {unit}{suffix} ago"


def format_seconds_ago(seconds: float) -> str:
    """Convert an elapsed number of seconds to a human-readable time-ago string.

    Each tier reports the whole count of its unit over the entire duration,
    truncated toward zero. Months and years are 30 and 365 days.

    Args:
        seconds: Number of seconds ago. Negative values are clamped to zero.

    Returns:
        Human-readable time string (e.g., "5 minutes ago").
    """
    if seconds < 0:
        logger.debug(f"Instant is {-seconds}s in the future; clamping to zero.")
        seconds = 0
    if seconds < SECONDS_PER_MINUTE:
        return _ago(int(seconds), "second")
    if seconds < SECONDS_PER_HOUR:
        return _ago(int(seconds // SECONDS_PER_MINUTE), "minute")
    if seconds < SECONDS_PER_DAY:
        return _ago(int(seconds // SECONDS_PER_HOUR), "hour")
    days = seconds // SECONDS_PER_DAY
    if days < DAYS_PER_MONTH:
        return _ago(int(days), "day")
    if days < DAYS_PER_YEAR:
        return _ago(int(days // DAYS_PER_MONTH), "month")
    return _ago(int(days // DAYS_PER_YEAR), "year")


def format_time_ago(occurred: Instant, now: Instant | None = None) -> str:
    """Describe how long ago `occurred` was.

    Args:
        occurred: The instant to describe. See `to_utc` for accepted values.
        now: Reference instant. Defaults to the current UTC time, read on
            every call.

    Returns:
        A string such as "1 second ago", "3 days ago" or "2 years ago".

    Raises:
        InvalidTimestampError: If either instant cannot be normalized to UTC.
    """
    start = to_utc(occurred)
    reference = utc_now() if now is None else to_utc(now)
    return format_seconds_ago((reference - start).total_seconds())
