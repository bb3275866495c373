"""Daily and weekly time statistics."""

from __future__ import annotations

from datetime import date, timedelta

from sqlalchemy.orm import Session

from nunu_log.models import ENTRY_TYPES, TimeEntry
from nunu_log.schemas.summary import DailySummary, WeeklySummary
from nunu_log.services.entry_service import list_entries
from nunu_log.utils.time import (
    minutes_within,
    parse_local_date,
    utc_range_for_local_date,
    utc_range_for_local_dates,
    week_start,
)


def empty_by_type() -> dict[str, int]:
    return {entry_type: 0 for entry_type in ENTRY_TYPES}


def summarize_day(entries: list[TimeEntry], day: date, tz_offset_minutes: int) -> DailySummary:
    """Clip each finished entry to the local day and total minutes per type."""
    window = utc_range_for_local_date(day, tz_offset_minutes)
    by_type = empty_by_type()
    for entry in entries:
        if entry.end_time is None:
            continue
        by_type[entry.type] += minutes_within(entry.start_time, entry.end_time, window)
    return DailySummary(date=day, total_minutes=sum(by_type.values()), by_type=by_type)


def daily_summary(db: Session, value: str | date, tz_offset_minutes: int) -> DailySummary:
    day = parse_local_date(value)
    entries = list_entries(db, utc_range_for_local_date(day, tz_offset_minutes))
    return summarize_day(entries, day, tz_offset_minutes)


def weekly_summary(db: Session, value: str | date, tz_offset_minutes: int) -> WeeklySummary:
    """Summarize Monday..Sunday of the week containing ``value`` with one query."""
    monday = week_start(value)
    sunday = monday + timedelta(days=6)
    entries = list_entries(db, utc_range_for_local_dates(monday, sunday, tz_offset_minutes))

    days = [summarize_day(entries, monday + timedelta(days=offset), tz_offset_minutes) for offset in range(7)]
    totals = empty_by_type()
    for summary in days:
        for entry_type, minutes in summary.by_type.items():
            totals[entry_type] += minutes

    return WeeklySummary(
        week_start=monday,
        week_end=sunday,
        days=days,
        totals=totals,
        total_minutes=sum(summary.total_minutes for summary in days),
    )
