"""Date/time helpers for the task dashboard"""
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Tuple


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """
    Current time as an aware datetime in the given zone.

    Args:
        tz: Target zone; None means the server's local zone

    Returns:
        datetime: timezone-aware current time
    """
    return datetime.now(timezone.utc).astimezone(tz)


def today_window(now: datetime, tz: Optional[tzinfo] = None) -> Tuple[datetime, datetime]:
    """
    Half-open interval [start of day, start of next day) containing `now`.

    Args:
        now: Reference time (naive values are taken as already in `tz`)
        tz: Zone that defines the calendar day; None means the server's local zone

    Returns:
        (start, end) as aware datetimes in that zone
    """
    if now.tzinfo is None:
        local_now = now.replace(tzinfo=tz) if tz else now.astimezone()
    else:
        local_now = now.astimezone(tz)

    start_naive = local_now.replace(tzinfo=None, hour=0, minute=0, second=0, microsecond=0)
    end_naive = start_naive + timedelta(days=1)

    # Attach the zone separately to each bound so DST days stay 23/25 hours
    if tz is None:
        return start_naive.astimezone(), end_naive.astimezone()
    return start_naive.replace(tzinfo=tz), end_naive.replace(tzinfo=tz)


def parse_timestamp(value: str, tz: Optional[tzinfo] = None) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware datetime.

    Accepts a trailing "Z". Date-only values are UTC midnight; date-times
    without an offset are taken as local time in `tz`.

    Raises:
        ValueError: If the value is not a valid timestamp
    """
    if not isinstance(value, str):
        raise ValueError("timestamp must be a string")

    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"

    parsed = datetime.fromisoformat(text)
    if len(text) == 10:
        return parsed.replace(tzinfo=timezone.utc)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz) if tz else parsed.astimezone()
    return parsed


def format_due_time(dt: datetime, tz: Optional[tzinfo] = None) -> str:
    """
    Format a due time as "hh:mm AM/PM" in the display zone.

    Args:
        dt: Time to format (naive values are treated as UTC)
        tz: Display zone; None means the server's local zone

    Returns:
        str: e.g. "09:05 AM"
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(tz).strftime("%I:%M %p")
