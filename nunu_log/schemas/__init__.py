"""Schema exports."""

from nunu_log.schemas.entry import (
    DeleteResponse,
    EntryCreate,
    EntryRead,
    EntryUpdate,
    SiriEntryCreate,
    SiriEntryResponse,
)
from nunu_log.schemas.summary import DailySummary, WeeklySummary

__all__ = [
    "DeleteResponse",
    "EntryCreate",
    "EntryRead",
    "EntryUpdate",
    "SiriEntryCreate",
    "SiriEntryResponse",
    "DailySummary",
    "WeeklySummary",
]
