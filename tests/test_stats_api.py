"""Daily and weekly statistics tests."""

from datetime import date, datetime, timedelta, timezone
from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from nunu_log.core.config import settings
from nunu_log.db import session as db_session
from nunu_log.db.base import Base
from nunu_log.main import app
from nunu_log.models import TimeEntry
from nunu_log.services.summary_service import daily_summary, weekly_summary


def _build_test_engine(db_file: Path) -> Engine:
    return create_engine(
        f"sqlite:///{db_file}",
        connect_args={"check_same_thread": False},
    )


def _setup_db(tmp_path: Path, monkeypatch, name: str) -> sessionmaker:
    engine = _build_test_engine(tmp_path / name)
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "SessionLocal", testing_session_local)
    return testing_session_local


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def _seed_week(db: Session) -> None:
    db.add_all(
        [
            TimeEntry(type="SLEEP", start_time=_utc(2024, 1, 21, 23), end_time=_utc(2024, 1, 22, 7)),
            TimeEntry(type="MEAL", start_time=_utc(2024, 1, 22, 12), end_time=_utc(2024, 1, 22, 12, 30)),
            TimeEntry(type="WORK", start_time=_utc(2024, 1, 23, 9), end_time=_utc(2024, 1, 23, 17)),
            TimeEntry(type="OTHER", start_time=_utc(2024, 1, 22, 18), end_time=None),
        ]
    )
    db.commit()


def test_daily_summary_clips_overnight_sleep(tmp_path: Path, monkeypatch) -> None:
    """Only the part of an entry inside the local day is counted."""
    testing_session_local = _setup_db(tmp_path, monkeypatch, "test_daily_summary.db")

    with testing_session_local() as db:
        _seed_week(db)
        summary = daily_summary(db, "2024-01-22", 0)

    assert summary.date == date(2024, 1, 22)
    assert summary.by_type["SLEEP"] == 420
    assert summary.by_type["MEAL"] == 30
    assert summary.by_type["WORK"] == 0
    assert summary.by_type["OTHER"] == 0
    assert set(summary.by_type) == {"SLEEP", "MEAL", "WORK", "CHILDCARE", "ENTERTAINMENT", "OTHER"}
    assert summary.total_minutes == 450


def test_daily_summary_follows_client_offset(tmp_path: Path, monkeypatch) -> None:
    """At UTC+8 the whole overnight sleep falls inside Jan 22."""
    testing_session_local = _setup_db(tmp_path, monkeypatch, "test_daily_offset.db")

    with testing_session_local() as db:
        _seed_week(db)
        summary = daily_summary(db, "2024-01-22", -480)

    assert summary.by_type["SLEEP"] == 480
    assert summary.by_type["MEAL"] == 30
    assert summary.total_minutes == 510


def test_weekly_summary_runs_monday_to_sunday(tmp_path: Path, monkeypatch) -> None:
    testing_session_local = _setup_db(tmp_path, monkeypatch, "test_weekly_summary.db")

    with testing_session_local() as db:
        _seed_week(db)
        summary = weekly_summary(db, date(2024, 1, 24), 0)

    assert summary.week_start == date(2024, 1, 22)
    assert summary.week_end == date(2024, 1, 28)
    assert [day.date for day in summary.days][0] == date(2024, 1, 22)
    assert len(summary.days) == 7
    assert summary.days[0].total_minutes == 450
    assert summary.days[1].by_type["WORK"] == 480
    assert all(day.total_minutes == 0 for day in summary.days[2:])
    assert summary.totals["SLEEP"] == 420
    assert summary.totals["WORK"] == 480
    assert summary.total_minutes == 930


def test_stats_endpoints(tmp_path: Path, monkeypatch) -> None:
    testing_session_local = _setup_db(tmp_path, monkeypatch, "test_stats_api.db")

    with TestClient(app) as client:
        with testing_session_local() as db:
            _seed_week(db)

        daily = client.get("/api/v1/stats/daily", params={"date": "2024-01-22", "tzOffset": -480})
        weekly = client.get("/api/v1/stats/weekly", params={"date": "2024-01-28", "tzOffset": 0})
        bad = client.get("/api/v1/stats/daily", params={"date": "2024-02-30"})
        bad_weekly = client.get("/api/v1/stats/weekly", params={"date": "not-a-date"})

    assert daily.status_code == 200
    assert daily.json()["total_minutes"] == 510
    assert daily.json()["date"] == "2024-01-22"

    assert weekly.status_code == 200
    weekly_body = weekly.json()
    assert weekly_body["week_start"] == "2024-01-22"
    assert weekly_body["week_end"] == "2024-01-28"
    assert weekly_body["total_minutes"] == 930

    assert bad.status_code == 400
    assert bad_weekly.status_code == 400


def test_daily_without_date_uses_client_today(tmp_path: Path, monkeypatch) -> None:
    """A client a full day ahead of UTC gets its own calendar day, not the server's."""
    _setup_db(tmp_path, monkeypatch, "test_daily_today.db")

    with TestClient(app) as client:
        before = (datetime.now(timezone.utc) + timedelta(minutes=1440)).date()
        response = client.get("/api/v1/stats/daily", params={"tzOffset": -1440})
        after = (datetime.now(timezone.utc) + timedelta(minutes=1440)).date()

    assert response.status_code == 200
    assert response.json()["date"] in {before.isoformat(), after.isoformat()}


def test_weekly_without_date_uses_client_today(tmp_path: Path, monkeypatch) -> None:
    _setup_db(tmp_path, monkeypatch, "test_weekly_today.db")

    with TestClient(app) as client:
        before = (datetime.now(timezone.utc) - timedelta(minutes=1440)).date()
        response = client.get("/api/v1/stats/weekly", params={"tzOffset": 1440})
        after = (datetime.now(timezone.utc) - timedelta(minutes=1440)).date()

    assert response.status_code == 200
    mondays = {(day - timedelta(days=day.weekday())).isoformat() for day in (before, after)}
    assert response.json()["week_start"] in mondays


def test_omitted_offset_falls_back_to_configured_default(tmp_path: Path, monkeypatch) -> None:
    """Without tzOffset the configured DEFAULT_TZ_OFFSET bounds the local day."""
    testing_session_local = _setup_db(tmp_path, monkeypatch, "test_default_offset.db")
    monkeypatch.setattr(settings, "default_tz_offset", -480)

    with TestClient(app) as client:
        with testing_session_local() as db:
            _seed_week(db)

        daily = client.get("/api/v1/stats/daily", params={"date": "2024-01-22"})
        entries = client.get("/api/v1/entries", params={"date": "2024-01-22"})

    assert daily.status_code == 200
    assert daily.json()["by_type"]["SLEEP"] == 480
    assert daily.json()["total_minutes"] == 510
    assert [entry["type"] for entry in entries.json()] == ["SLEEP", "MEAL"]
