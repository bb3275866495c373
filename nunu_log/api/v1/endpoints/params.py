"""Query parameter helpers shared by date-bounded endpoints."""

from fastapi import HTTPException, Query, status

from nunu_log.core.config import settings
from nunu_log.utils.time import DateRangeError


def tz_offset_param(
    tz_offset: int | None = Query(
        default=None,
        alias="tzOffset",
        ge=-settings.max_tz_offset_minutes,
        le=settings.max_tz_offset_minutes,
        description="Minutes such that UTC = local time + offset (browser getTimezoneOffset()).",
    ),
) -> int:
    return settings.default_tz_offset if tz_offset is None else tz_offset


def bad_date_request(exc: DateRangeError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
