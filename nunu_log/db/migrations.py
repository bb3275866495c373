"""Lightweight schema migrations for SQLite databases."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)


def _sqlite_column_names(connection: Connection, table_name: str) -> set[str]:
    """Return column names for a SQLite table using PRAGMA table_info."""
    rows = connection.execute(text(f"PRAGMA table_info({table_name});")).mappings().all()
    return {str(row["name"]) for row in rows}


def _sqlite_index_names(connection: Connection, table_name: str) -> set[str]:
    """Return index names for a SQLite table using PRAGMA index_list."""
    rows = connection.execute(text(f"PRAGMA index_list({table_name});")).mappings().all()
    return {str(row["name"]) for row in rows}


def ensure_sqlite_schema(engine: Engine) -> None:
    """Apply lightweight schema updates for legacy SQLite databases."""
    if engine.dialect.name != "sqlite":
        return

    with engine.begin() as connection:
        table_rows = connection.execute(text("SELECT name FROM sqlite_master WHERE type='table';")).all()
        table_names: set[str] = {str(row[0]) for row in table_rows}
        if "time_entries" not in table_names:
            return

        columns = _sqlite_column_names(connection, "time_entries")
        if "input_method" not in columns:
            connection.execute(
                text("ALTER TABLE time_entries ADD COLUMN input_method VARCHAR(6) NOT NULL DEFAULT 'MANUAL'")
            )
            logger.info("[MIGRATION] Added time_entries.input_method")
        if "updated_at" not in columns:
            connection.execute(text("ALTER TABLE time_entries ADD COLUMN updated_at DATETIME"))
            now_iso: str = datetime.now(timezone.utc).replace(tzinfo=None).isoformat(sep=" ")
            connection.execute(
                text("UPDATE time_entries SET updated_at = COALESCE(created_at, :now) WHERE updated_at IS NULL"),
                {"now": now_iso},
            )
            logger.info("[MIGRATION] Added time_entries.updated_at")

        if "ix_time_entries_start_time" not in _sqlite_index_names(connection, "time_entries"):
            connection.execute(text("CREATE INDEX ix_time_entries_start_time ON time_entries (start_time)"))

        # Point entries written before end times were mandatory.
        backfilled = connection.execute(
            text("UPDATE time_entries SET end_time = start_time WHERE end_time IS NULL")
        ).rowcount
        if backfilled:
            logger.info("[MIGRATION] Backfilled end_time for %s time entries", backfilled)
