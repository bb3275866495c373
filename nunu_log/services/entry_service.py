"""Time entry persistence operations."""

from __future__ import annotations

from datetime import datetime, timedelta

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from nunu_log.models import TimeEntry
from nunu_log.schemas.entry import EntryCreate, EntryUpdate
from nunu_log.utils.time import UtcRange, ensure_utc


def resolve_end_time(start_time: datetime, end_time: datetime | None, duration_minutes: int | None) -> datetime:
    """Fill a missing end from the duration and never end before the start."""
    if end_time is None and duration_minutes:
        end_time = start_time + timedelta(minutes=duration_minutes)
    if end_time is None or end_time < start_time:
        return start_time
    return end_time


def list_entries(db: Session, window: UtcRange | None = None) -> list[TimeEntry]:
    """Return entries overlapping ``window`` (or all entries), oldest first.

    Entries without an end time are treated as still open and match any
    window that starts before they do.
    """
    statement = select(TimeEntry)
    if window is not None:
        statement = statement.where(
            TimeEntry.start_time <= window.end,
            or_(TimeEntry.end_time.is_(None), TimeEntry.end_time >= window.start),
        )
    return list(db.scalars(statement.order_by(TimeEntry.start_time.asc(), TimeEntry.created_at.asc())).all())


def get_entry(db: Session, entry_id: str) -> TimeEntry | None:
    return db.get(TimeEntry, entry_id)


def create_entry(
    db: Session,
    *,
    entry_type: str,
    start_time: datetime,
    end_time: datetime | None = None,
    duration_minutes: int | None = None,
    notes: str | None = None,
    input_method: str = "MANUAL",
) -> TimeEntry:
    start_utc = ensure_utc(start_time)
    end_utc = ensure_utc(end_time) if end_time is not None else None
    entry = TimeEntry(
        type=entry_type,
        start_time=start_utc,
        end_time=resolve_end_time(start_utc, end_utc, duration_minutes),
        notes=notes,
        input_method=input_method,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def create_entry_from_payload(db: Session, payload: EntryCreate) -> TimeEntry:
    return create_entry(
        db,
        entry_type=payload.type,
        start_time=payload.start_time,
        end_time=payload.end_time,
        duration_minutes=payload.duration_minutes,
        notes=payload.notes,
        input_method=payload.input_method or "MANUAL",
    )


def update_entry(db: Session, entry: TimeEntry, payload: EntryUpdate) -> TimeEntry:
    """Apply a partial update; explicit ``null`` clears ``notes``/``end_time``."""
    provided = payload.model_fields_set

    if payload.type is not None:
        entry.type = payload.type
    if "notes" in provided:
        entry.notes = payload.notes
    if payload.start_time is not None:
        entry.start_time = ensure_utc(payload.start_time)

    start_utc = ensure_utc(entry.start_time)
    if "end_time" in provided:
        entry.end_time = ensure_utc(payload.end_time) if payload.end_time is not None else None
    if payload.end_time is None and payload.duration_minutes:
        entry.end_time = start_utc + timedelta(minutes=payload.duration_minutes)
    if entry.end_time is not None and ensure_utc(entry.end_time) < start_utc:
        entry.end_time = start_utc

    db.commit()
    db.refresh(entry)
    return entry


def delete_entry(db: Session, entry: TimeEntry) -> None:
    db.delete(entry)
    db.commit()
