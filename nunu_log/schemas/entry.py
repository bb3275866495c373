"""Time entry API schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nunu_log.utils.time import ensure_utc

EntryType = Literal["SLEEP", "MEAL", "WORK", "CHILDCARE", "ENTERTAINMENT", "OTHER"]
InputMethod = Literal["MANUAL", "SIRI", "API"]


class EntryCreate(BaseModel):
    """Payload for creating a time entry."""

    type: EntryType
    start_time: datetime
    end_time: datetime | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    notes: str | None = None
    input_method: InputMethod | None = None


class EntryUpdate(BaseModel):
    """Partial update of a time entry; omitted fields are left untouched."""

    type: EntryType | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    notes: str | None = None


class EntryRead(BaseModel):
    """Serialized time entry."""

    id: str
    type: EntryType
    start_time: datetime
    end_time: datetime | None
    notes: str | None
    input_method: InputMethod
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("start_time", "end_time", "created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value) if value is not None else None


class SiriEntryCreate(BaseModel):
    """Shortcut/voice payload; everything can be inferred from ``text``."""

    type: EntryType | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    duration_minutes: int | None = Field(default=None, gt=0)
    notes: str | None = None
    text: str | None = None


class SiriEntryResponse(BaseModel):
    """Webhook response wrapping the created entry."""

    success: bool = True
    entry: EntryRead


class DeleteResponse(BaseModel):
    success: bool = True
