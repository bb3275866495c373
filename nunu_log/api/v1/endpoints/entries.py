"""Time entry endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from nunu_log.api.v1.endpoints.params import bad_date_request, tz_offset_param
from nunu_log.db.session import get_db
from nunu_log.models import TimeEntry
from nunu_log.schemas.entry import DeleteResponse, EntryCreate, EntryRead, EntryUpdate
from nunu_log.services import entry_service
from nunu_log.utils.time import DateRangeError, UtcRange, utc_range_for_local_date, utc_range_for_local_dates

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)


def _get_entry_or_404(db: Session, entry_id: str) -> TimeEntry:
    entry = entry_service.get_entry(db, entry_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Entry not found")
    return entry


@router.get("", response_model=list[EntryRead])
def list_entries(
    date_value: str | None = Query(default=None, alias="date"),
    from_value: str | None = Query(default=None, alias="from"),
    to_value: str | None = Query(default=None, alias="to"),
    tz_offset: int = Depends(tz_offset_param),
    db: Session = Depends(get_db),
) -> list[TimeEntry]:
    """List entries for a local day, a local date range, or everything."""
    if date_value is None and (from_value is None) != (to_value is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Both 'from' and 'to' are required for a range query",
        )

    window: UtcRange | None = None
    try:
        if date_value is not None:
            window = utc_range_for_local_date(date_value, tz_offset)
        elif from_value is not None and to_value is not None:
            window = utc_range_for_local_dates(from_value, to_value, tz_offset)
    except DateRangeError as exc:
        raise bad_date_request(exc) from exc

    return entry_service.list_entries(db, window)


@router.post("", response_model=EntryRead, status_code=status.HTTP_201_CREATED)
def create_entry(payload: EntryCreate, db: Session = Depends(get_db)) -> TimeEntry:
    entry = entry_service.create_entry_from_payload(db, payload)
    logger.info("[ENTRY] Created %s entry id=%s", entry.type, entry.id)
    return entry


@router.patch("/{entry_id}", response_model=EntryRead)
def update_entry(entry_id: str, payload: EntryUpdate, db: Session = Depends(get_db)) -> TimeEntry:
    entry = _get_entry_or_404(db, entry_id)
    return entry_service.update_entry(db, entry, payload)


@router.delete("/{entry_id}", response_model=DeleteResponse)
def delete_entry(entry_id: str, db: Session = Depends(get_db)) -> DeleteResponse:
    entry = _get_entry_or_404(db, entry_id)
    entry_service.delete_entry(db, entry)
    logger.info("[ENTRY] Deleted entry id=%s", entry_id)
    return DeleteResponse()
