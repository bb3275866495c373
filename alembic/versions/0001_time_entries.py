"""time entries schema

Revision ID: 0001_time_entries
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_time_entries"
down_revision = None
branch_labels = None
depends_on = None

ENTRY_TYPES = ("SLEEP", "MEAL", "WORK", "CHILDCARE", "ENTERTAINMENT", "OTHER")
INPUT_METHODS = ("MANUAL", "SIRI", "API")


def upgrade() -> None:
    op.create_table(
        "time_entries",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("type", sa.Enum(*ENTRY_TYPES, name="entry_type"), nullable=False),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "input_method",
            sa.Enum(*INPUT_METHODS, name="input_method"),
            nullable=False,
            server_default="MANUAL",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_time_entries_start_time", "time_entries", ["start_time"])


def downgrade() -> None:
    op.drop_index("ix_time_entries_start_time", table_name="time_entries")
    op.drop_table("time_entries")
    sa.Enum(name="input_method").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="entry_type").drop(op.get_bind(), checkfirst=True)
