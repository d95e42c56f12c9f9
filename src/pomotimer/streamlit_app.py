"""Streamlit dashboard for the Pomodoro timer.

Run with:

    streamlit run src/pomotimer/streamlit_app.py

Features:
- Sidebar for the schedule parameters used by ``pomotimer schedule``.
- Planned interval list with the total length of the run.
- Completed tasks for a chosen day, read from the daily task log.
- A preview of the alert sound (bundled asset or generated beep).
"""
from __future__ import annotations

from datetime import date

import streamlit as st

from pomotimer import notifier, scheduler, tasklog


def format_minutes(seconds: int) -> str:
    return f"{seconds // 60} min"


def alert_bytes() -> bytes:
    path = notifier.find_sound_asset()
    if path is not None:
        return path.read_bytes()
    return notifier.generate_beep()


def main() -> None:
    st.set_page_config(page_title="Pomodoro Dashboard", layout="centered")

    st.title("Pomodoro")

    with st.sidebar:
        sessions = st.number_input("Sessions", min_value=1, value=scheduler.DEFAULTS["sessions"])
        work_minutes = st.number_input("Work minutes", min_value=1, value=scheduler.DEFAULTS["work_minutes"])
        short_break_minutes = st.number_input("Short break minutes", min_value=1, value=scheduler.DEFAULTS["short_break_minutes"])
        long_break_minutes = st.number_input("Long break minutes", min_value=1, value=scheduler.DEFAULTS["long_break_minutes"])
        task = st.text_input("Task", value=scheduler.DEFAULT_TASK)
        st.write("---")
        day = st.date_input("Log day", value=date.today())

    plan = scheduler.build_schedule(
        sessions=int(sessions),
        work_minutes=int(work_minutes),
        short_break_minutes=int(short_break_minutes),
        long_break_minutes=int(long_break_minutes),
        task=task or scheduler.DEFAULT_TASK,
    )

    st.subheader("Planned intervals")
    for it in plan:
        st.write(f"- {it.title}: {format_minutes(it.duration_seconds)}")
    st.caption(f"Total: {format_minutes(plan.total_seconds)}")
    st.code(
        f'pomotimer schedule --sessions={plan.session_count} --work={plan.work_minutes} '
        f'--short-break={plan.short_break_minutes} --long-break={plan.long_break_minutes} --task="{plan.task_label}"',
        language="bash",
    )

    st.write("---")

    st.subheader(f"Completed tasks on {day:%Y-%m-%d}")
    entries = tasklog.read_entries(day)
    if entries:
        st.table([{"time": entry.time, "task": entry.task} for entry in entries])
        st.metric("Pomodoros", len(entries))
    else:
        st.write("Nothing logged for this day.")

    st.write("---")

    if st.button("Preview alert sound"):
        try:
            st.audio(alert_bytes(), format="audio/wav")
        except OSError as exc:
            st.error(f"Could not load the alert sound: {exc}")


if __name__ == "__main__":
    main()
