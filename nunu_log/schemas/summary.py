"""Daily and weekly statistics schemas."""

from datetime import date

from pydantic import BaseModel, Field


class DailySummary(BaseModel):
    """Minutes logged per entry type within one local day."""

    date: date
    total_minutes: int = 0
    by_type: dict[str, int] = Field(default_factory=dict)


class WeeklySummary(BaseModel):
    """Monday-to-Sunday review built from seven daily summaries."""

    week_start: date
    week_end: date
    days: list[DailySummary]
    totals: dict[str, int]
    total_minutes: int
