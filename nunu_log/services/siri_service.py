"""Free-text helpers for the Siri shortcut webhook."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from nunu_log.models import TimeEntry
from nunu_log.schemas.entry import SiriEntryCreate
from nunu_log.services.entry_service import create_entry
from nunu_log.utils.time import ensure_utc

HOUR_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*(小时|h|hr)", re.IGNORECASE)
MINUTE_PATTERN = re.compile(r"(\d+)\s*(分钟|分|min)", re.IGNORECASE)

# First match wins.
TYPE_KEYWORDS: list[tuple[str, re.Pattern[str]]] = [
    ("SLEEP", re.compile(r"睡|午睡|睡觉|小憩")),
    ("MEAL", re.compile(r"吃|吃饭|早餐|午餐|晚餐|加餐|宵夜")),
    ("WORK", re.compile(r"工作|加班|会议|方案|写|文档|邮箱|办公")),
    ("CHILDCARE", re.compile(r"育儿|带娃|孩子|宝宝|哄|喂奶|陪")),
    ("ENTERTAINMENT", re.compile(r"娱乐|放松|游戏|刷剧|电影|散步|健身|运动|阅读|看书")),
]


class MissingEntryTypeError(Exception):
    """Raised when neither an explicit type nor text to guess from is given."""


def parse_duration_minutes(text: str) -> int | None:
    """Sum ``N小时``/``Nh`` hours and ``N分钟``/``Nmin`` minutes found in text."""
    minutes = 0
    for match in HOUR_PATTERN.finditer(text):
        minutes += int(float(match.group(1)) * 60 + 0.5)
    for match in MINUTE_PATTERN.finditer(text):
        minutes += int(match.group(1))
    return minutes or None


def guess_type_from_text(text: str) -> str:
    for entry_type, pattern in TYPE_KEYWORDS:
        if pattern.search(text):
            return entry_type
    return "OTHER"


def create_siri_entry(db: Session, payload: SiriEntryCreate, now: datetime | None = None) -> TimeEntry:
    """Create an entry from a shortcut call, inferring what the caller left out.

    Without a start time but with a duration the entry is taken to have just
    finished: it ends ``now`` and started ``duration`` minutes earlier.
    """
    text = payload.text.strip() if payload.text else None
    entry_type = payload.type or (guess_type_from_text(text) if text else None)
    if entry_type is None:
        raise MissingEntryTypeError("Missing type")

    now = ensure_utc(now) if now is not None else datetime.now(timezone.utc)
    duration_minutes = payload.duration_minutes or (parse_duration_minutes(text) if text else None)

    start_time = ensure_utc(payload.start_time) if payload.start_time else now
    end_time = ensure_utc(payload.end_time) if payload.end_time else None
    if payload.start_time is None and duration_minutes:
        start_time = now - timedelta(minutes=duration_minutes)
        end_time = now

    return create_entry(
        db,
        entry_type=entry_type,
        start_time=start_time,
        end_time=end_time,
        duration_minutes=duration_minutes,
        notes=payload.notes if payload.notes is not None else text,
        input_method="SIRI",
    )
