"""Daily and weekly statistics endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from nunu_log.api.v1.endpoints.params import bad_date_request, tz_offset_param
from nunu_log.db.session import get_db
from nunu_log.schemas.summary import DailySummary, WeeklySummary
from nunu_log.services.summary_service import daily_summary, weekly_summary
from nunu_log.utils.time import DateRangeError, local_today

router: APIRouter = APIRouter()


@router.get("/daily", response_model=DailySummary)
def get_daily_summary(
    date_value: str | None = Query(default=None, alias="date"),
    tz_offset: int = Depends(tz_offset_param),
    db: Session = Depends(get_db),
) -> DailySummary:
    """Minutes per entry type for one local day (defaults to today)."""
    try:
        return daily_summary(db, date_value or local_today(tz_offset), tz_offset)
    except DateRangeError as exc:
        raise bad_date_request(exc) from exc


@router.get("/weekly", response_model=WeeklySummary)
def get_weekly_summary(
    date_value: str | None = Query(default=None, alias="date"),
    tz_offset: int = Depends(tz_offset_param),
    db: Session = Depends(get_db),
) -> WeeklySummary:
    """Monday-to-Sunday review of the week containing ``date``."""
    try:
        return weekly_summary(db, date_value or local_today(tz_offset), tz_offset)
    except DateRangeError as exc:
        raise bad_date_request(exc) from exc
