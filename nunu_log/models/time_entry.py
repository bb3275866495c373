"""Time entry ORM model."""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import DateTime, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nunu_log.db.base import Base

ENTRY_TYPES = ("SLEEP", "MEAL", "WORK", "CHILDCARE", "ENTERTAINMENT", "OTHER")
INPUT_METHODS = ("MANUAL", "SIRI", "API")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimeEntry(Base):
    """A logged block of time, stored with UTC boundaries."""

    __tablename__ = "time_entries"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=lambda: uuid4().hex)
    type: Mapped[str] = mapped_column(Enum(*ENTRY_TYPES, name="entry_type"), nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    input_method: Mapped[str] = mapped_column(
        Enum(*INPUT_METHODS, name="input_method"),
        nullable=False,
        default="MANUAL",
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )
