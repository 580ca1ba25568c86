"""
Date Utilities - Calendar arithmetic over YYYY-MM-DD strings

Every function that depends on the clock accepts an injected value
(`today` or `now`); None means the real clock. Malformed input never
raises: arithmetic degrades to a neutral value and formatting echoes
the input back.
"""
import calendar
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

import pytz

from app.core.config import settings

DATE_FORMAT = "%Y-%m-%d"
DISPLAY_FORMAT = "%b %d, %Y"

DateLike = Union[str, date, None]


def get_app_tz():
    """
    Get the configured application timezone

    Returns:
        pytz timezone, or None when APP_TIMEZONE is unset (local time)
    """
    if not settings.APP_TIMEZONE:
        return None
    return pytz.timezone(settings.APP_TIMEZONE)


def get_now() -> datetime:
    """
    Get the current datetime in the application timezone

    Returns:
        Timezone-aware datetime when APP_TIMEZONE is set, naive local otherwise
    """
    tz = get_app_tz()
    if tz is None:
        return datetime.now()
    return datetime.now(tz)


def now_iso() -> str:
    """Current timestamp as an ISO 8601 string"""
    return get_now().isoformat()


def today(now: Optional[datetime] = None) -> str:
    """
    Get today's calendar date as a YYYY-MM-DD string

    Args:
        now: Optional injected current datetime

    Returns:
        Canonical date string for today
    """
    return (now or get_now()).strftime(DATE_FORMAT)


def parse_date(value: DateLike) -> Optional[date]:
    """
    Parse a calendar date from YYYY-MM-DD or a full ISO timestamp

    Returns:
        date object, or None when the value cannot be parsed
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value[:10], DATE_FORMAT).date()
    except ValueError:
        return None


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp (a trailing 'Z' is accepted)

    Returns:
        datetime object, or None when the value cannot be parsed
    """
    if not isinstance(value, str) or not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def resolve_today(value: DateLike = None) -> date:
    """Resolve an injected 'today' to a date, falling back to the real clock"""
    return parse_date(value) or parse_date(today())


def day_difference(a: DateLike, b: DateLike) -> int:
    """
    Signed number of calendar days from b to a

    Args:
        a: Later date (result is positive when a is after b)
        b: Earlier date

    Returns:
        Day difference, or 0 when either input cannot be parsed
    """
    first = parse_date(a)
    second = parse_date(b)
    if first is None or second is None:
        return 0
    return (first - second).days


def previous_day(value: DateLike) -> str:
    """Calendar day before the given date (input echoed when malformed)"""
    parsed = parse_date(value)
    if parsed is None:
        return value if isinstance(value, str) else ""
    return format_iso_date(parsed - timedelta(days=1))


def next_day(value: DateLike) -> str:
    """Calendar day after the given date (input echoed when malformed)"""
    parsed = parse_date(value)
    if parsed is None:
        return value if isinstance(value, str) else ""
    return format_iso_date(parsed + timedelta(days=1))


def last_n_days(n: int, today: DateLike = None) -> List[str]:
    """
    The n calendar dates ending at and including today, oldest first

    Args:
        n: Number of days (0 or less gives an empty list)
        today: Optional injected anchor date

    Returns:
        List of YYYY-MM-DD strings in ascending order
    """
    anchor = resolve_today(today)
    return [format_iso_date(anchor - timedelta(days=i)) for i in range(n - 1, -1, -1)]


def is_same_day(a: DateLike, b: DateLike) -> bool:
    if parse_date(a) is None or parse_date(b) is None:
        return False
    return day_difference(a, b) == 0


def is_today(value: DateLike, today: DateLike = None) -> bool:
    return is_same_day(value, resolve_today(today))


def is_past(value: DateLike, today: DateLike = None) -> bool:
    return day_difference(resolve_today(today), value) > 0


def week_dates(value: DateLike = None) -> List[str]:
    """The Monday..Sunday week containing the given date (default today)"""
    base = resolve_today(value)
    start = base - timedelta(days=base.weekday())
    return [format_iso_date(start + timedelta(days=i)) for i in range(7)]


def month_dates(value: DateLike = None) -> List[str]:
    """Every date of the month containing the given date (default today)"""
    base = resolve_today(value)
    days_in_month = calendar.monthrange(base.year, base.month)[1]
    return [format_iso_date(base.replace(day=d)) for d in range(1, days_in_month + 1)]


def format_date(value: str, fmt: str = DISPLAY_FORMAT) -> str:
    """
    Format a date string for display (e.g. 'Mar 15, 2024')

    Returns:
        Formatted date, or the input unchanged when it cannot be parsed
    """
    parsed = parse_timestamp(value) or parse_date(value)
    if parsed is None:
        return value
    if fmt == DISPLAY_FORMAT:
        return f"{parsed:%b} {parsed.day}, {parsed.year}"
    return parsed.strftime(fmt)


def format_day_name(value: str) -> str:
    """Weekday name of a date string, or the input unchanged when malformed"""
    return format_date(value, "%A")


def relative_time(timestamp: str, now: Optional[datetime] = None) -> str:
    """
    Human-readable time elapsed since a timestamp

    Args:
        timestamp: ISO timestamp string
        now: Optional injected current datetime

    Returns:
        'just now', 'Nm ago', 'Nh ago', 'Nd ago', or an absolute date after
        a week; the input unchanged when it cannot be parsed
    """
    moment = parse_timestamp(timestamp)
    if moment is None:
        return timestamp

    current = now or get_now()
    if moment.tzinfo is None and current.tzinfo is not None:
        if hasattr(current.tzinfo, "localize"):
            moment = current.tzinfo.localize(moment)
        else:
            moment = moment.replace(tzinfo=current.tzinfo)
    elif moment.tzinfo is not None and current.tzinfo is None:
        current = current.astimezone()

    diff_mins = int((current - moment).total_seconds() // 60)
    diff_hours = diff_mins // 60
    diff_days = diff_hours // 24

    if diff_mins < 1:
        return "just now"
    if diff_mins < 60:
        return f"{diff_mins}m ago"
    if diff_hours < 24:
        return f"{diff_hours}h ago"
    if diff_days < 7:
        return f"{diff_days}d ago"
    return format_date(timestamp)
