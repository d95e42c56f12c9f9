"""Pomodoro schedule helpers."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List


class IntervalKind(str, Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


TITLES = {
    IntervalKind.WORK: "Pomodoro",
    IntervalKind.SHORT_BREAK: "Short Break",
    IntervalKind.LONG_BREAK: "Long Break",
}

BREAK_LABEL = "Time to relax"
DEFAULT_TASK = "no description"


@dataclass(frozen=True)
class Interval:
    """Represents one work or break interval."""

    kind: IntervalKind
    label: str
    duration_seconds: int

    @property
    def title(self) -> str:
        return TITLES[self.kind]

    @property
    def minutes(self) -> int:
        return self.duration_seconds // 60

    @property
    def is_break(self) -> bool:
        return self.kind is not IntervalKind.WORK


def work_interval(minutes: int, task: str) -> Interval:
    return Interval(kind=IntervalKind.WORK, label=task, duration_seconds=minutes * 60)


def break_interval(minutes: int, *, long: bool = False) -> Interval:
    kind = IntervalKind.LONG_BREAK if long else IntervalKind.SHORT_BREAK
    return Interval(kind=kind, label=BREAK_LABEL, duration_seconds=minutes * 60)


DEFAULTS = {
    "sessions": 4,
    "work_minutes": 25,
    "short_break_minutes": 5,
    "long_break_minutes": 15,
}


@dataclass(frozen=True)
class Schedule:
    """Holds a full Pomodoro schedule.

    Iterating a schedule yields ``session_count`` work intervals with a short
    break after each one except the last, which is followed by the long break.
    """

    session_count: int
    work_minutes: int
    short_break_minutes: int
    long_break_minutes: int
    task_label: str = DEFAULT_TASK

    @property
    def intervals(self) -> List[Interval]:
        return list(self)

    @property
    def total_seconds(self) -> int:
        return sum(interval.duration_seconds for interval in self)

    def __iter__(self) -> Iterator[Interval]:
        for index in range(1, self.session_count + 1):
            yield work_interval(self.work_minutes, self.task_label)
            if index == self.session_count:
                yield break_interval(self.long_break_minutes, long=True)
            else:
                yield break_interval(self.short_break_minutes)


def build_schedule(
    *,
    sessions: int = DEFAULTS["sessions"],
    work_minutes: int = DEFAULTS["work_minutes"],
    short_break_minutes: int = DEFAULTS["short_break_minutes"],
    long_break_minutes: int = DEFAULTS["long_break_minutes"],
    task: str = DEFAULT_TASK,
) -> Schedule:
    """Create a Pomodoro schedule with the requested durations.

    Args:
        sessions: Number of work sessions.
        work_minutes: Length of each work session.
        short_break_minutes: Length of breaks between work sessions.
        long_break_minutes: Length of the long break after the last session.
        task: Description logged for every completed work session.
    """
    if sessions < 1:
        raise ValueError("sessions must be at least 1")
    if min(work_minutes, short_break_minutes, long_break_minutes) <= 0:
        raise ValueError("all durations must be positive")

    return Schedule(
        session_count=sessions,
        work_minutes=work_minutes,
        short_break_minutes=short_break_minutes,
        long_break_minutes=long_break_minutes,
        task_label=task,
    )
