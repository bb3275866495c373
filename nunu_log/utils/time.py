"""Local calendar date to UTC window helpers used for day and week queries.

Entries are stored with UTC timestamps while clients ask for "my March 5th".
The timezone offset follows the browser's ``Date.getTimezoneOffset()``
encoding: ``UTC = local wall clock + offset`` in minutes, so a client at UTC+8
sends ``-480`` and a client at UTC-5 sends ``300``.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import NamedTuple

DAY_SPAN: timedelta = timedelta(hours=23, minutes=59, seconds=59, milliseconds=999)
_LOCAL_DATE_RE = re.compile(r"^(\d{1,4})-(\d{1,2})-(\d{1,2})$")


class DateRangeError(ValueError):
    """Base error for local date window resolution."""


class InvalidDateError(DateRangeError):
    """Raised when a local date cannot be parsed or is not a calendar date."""


class InvalidRangeError(DateRangeError):
    """Raised when a date range ends before it starts."""


class UtcRange(NamedTuple):
    """Closed UTC window ``[start, end]`` covering one or more local days."""

    start: datetime
    end: datetime


def local_date(year: int, month: int, day: int) -> date:
    """Build a calendar date, rejecting values such as Feb 30."""
    try:
        return date(year, month, day)
    except (TypeError, ValueError) as exc:
        raise InvalidDateError(f"Invalid date: {year}-{month}-{day}") from exc


def parse_local_date(value: str | date) -> date:
    """Parse a ``YYYY-MM-DD`` string (or pass a date through)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(f"Invalid date: {value!r}")

    match = _LOCAL_DATE_RE.match(value.strip())
    if match is None:
        raise InvalidDateError(f"Invalid date: {value!r}")
    year, month, day = (int(part) for part in match.groups())
    return local_date(year, month, day)


def _shift(wall_clock: datetime, tz_offset_minutes: int) -> datetime:
    try:
        return wall_clock + timedelta(minutes=tz_offset_minutes)
    except OverflowError as exc:
        raise InvalidDateError(f"Date {wall_clock.date().isoformat()} is out of range for offset {tz_offset_minutes}") from exc


def utc_range_for_local_date(value: str | date, tz_offset_minutes: int) -> UtcRange:
    """Return the UTC window of one local day.

    The wall-clock midnight and 23:59:59.999 of the day are read as if they
    were UTC and then shifted by ``+tz_offset_minutes``. The window always
    spans one day minus one millisecond.
    """
    day = parse_local_date(value)
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    start = _shift(midnight, tz_offset_minutes)
    try:
        end = start + DAY_SPAN
    except OverflowError as exc:
        raise InvalidDateError(f"Date {day.isoformat()} is out of range for offset {tz_offset_minutes}") from exc
    return UtcRange(start=start, end=end)


def utc_range_for_local_dates(
    from_value: str | date,
    to_value: str | date,
    tz_offset_minutes: int,
) -> UtcRange:
    """Return the UTC window from the start of ``from`` to the end of ``to``."""
    from_day = parse_local_date(from_value)
    to_day = parse_local_date(to_value)
    if from_day > to_day:
        raise InvalidRangeError(f"Range start {from_day.isoformat()} is after end {to_day.isoformat()}")

    start = utc_range_for_local_date(from_day, tz_offset_minutes).start
    end = utc_range_for_local_date(to_day, tz_offset_minutes).end
    return UtcRange(start=start, end=end)


def local_today(tz_offset_minutes: int, now: datetime | None = None) -> date:
    """Return the client's current calendar date, independent of the server's timezone."""
    current = ensure_utc(now) if now is not None else datetime.now(timezone.utc)
    return (current - timedelta(minutes=tz_offset_minutes)).date()


def week_start(value: str | date) -> date:
    """Return the Monday of the week containing ``value``."""
    day = parse_local_date(value)
    return day - timedelta(days=day.weekday())


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo) and normalize aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def minutes_within(start: datetime, end: datetime, window: UtcRange) -> int:
    """Whole minutes of ``[start, end]`` falling inside the local day ``window``."""
    window_end = window.end + timedelta(milliseconds=1)
    effective_start = max(ensure_utc(start), window.start)
    effective_end = min(ensure_utc(end), window_end)
    if effective_start >= effective_end:
        return 0
    return int((effective_end - effective_start).total_seconds() // 60)
