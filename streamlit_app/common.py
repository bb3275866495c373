"""Shared DB helpers for the Streamlit review pages."""

from datetime import datetime

from sqlalchemy.orm import Session

from nunu_log.db import session as db_session
from nunu_log.db.base import Base
from nunu_log.db.migrations import ensure_sqlite_schema

Base.metadata.create_all(bind=db_session.engine)
ensure_sqlite_schema(db_session.engine)


def get_session() -> Session:
    return db_session.SessionLocal()


def now_string() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M")


def local_tz_offset_minutes() -> int:
    """This host's offset in the browser encoding (UTC = local + offset)."""
    offset = datetime.now().astimezone().utcoffset()
    return -int(offset.total_seconds() // 60) if offset is not None else 0


def format_minutes(minutes: int) -> str:
    if minutes <= 0:
        return "-"
    hours, rest = divmod(minutes, 60)
    if hours == 0:
        return f"{rest} min"
    return f"{hours} h" if rest == 0 else f"{hours} h {rest} min"
