"""Streamlit weekly review of logged time."""

from datetime import date

import streamlit as st

from nunu_log.models import ENTRY_TYPES
from nunu_log.services.summary_service import weekly_summary
from streamlit_app.common import format_minutes, get_session, local_tz_offset_minutes, now_string

st.set_page_config(page_title="Weekly review", layout="centered")
st.title("Weekly review")
st.caption(f"Last refresh: {now_string()}")

selected_day = st.date_input("Any day of the week", value=date.today())
tz_offset = st.number_input(
    "Timezone offset (minutes, UTC = local + offset)",
    value=local_tz_offset_minutes(),
    step=15,
)

with get_session() as db:
    summary = weekly_summary(db, selected_day, int(tz_offset))

st.subheader(
    f"{summary.week_start.isoformat()} - {summary.week_end.isoformat()}: {format_minutes(summary.total_minutes)}"
)
st.bar_chart({entry_type: [summary.totals[entry_type]] for entry_type in ENTRY_TYPES})

for day in summary.days:
    label = f"{day.date.isoformat()} ({day.date.strftime('%A')})"
    with st.expander(f"{label}: {format_minutes(day.total_minutes) if day.total_minutes else 'no entries'}"):
        st.table({entry_type: format_minutes(day.by_type[entry_type]) for entry_type in ENTRY_TYPES})
