"""Blocking per-second countdown shown on a single status line."""
from __future__ import annotations

import sys
import time
from datetime import datetime, timedelta
from typing import Callable, Optional, TextIO


def format_time(seconds: int) -> str:
    minutes, remainder = divmod(seconds, 60)
    return f"{minutes:02d}:{remainder:02d}"


def status_line(title: str, description: str, remaining: int, now: datetime) -> str:
    end_time = now + timedelta(seconds=remaining)
    return f"\r{title}: {end_time:%H:%M:%S} | {format_time(remaining)} | {description}  "


def countdown(
    duration_seconds: int,
    title: str,
    description: str,
    *,
    tick_seconds: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], datetime] = datetime.now,
    stream: Optional[TextIO] = None,
) -> int:
    """Count down ``duration_seconds`` ticks and return the number of ticks run.

    Each tick rewrites the status line with the remaining time and the
    projected end time, then sleeps ``tick_seconds``. Ctrl+C raises
    ``KeyboardInterrupt`` out of the sleep; callers let it propagate so no
    completion work runs for an interrupted interval.
    """
    if duration_seconds <= 0:
        return 0

    out = stream or sys.stdout
    ticks = 0
    for remaining in range(duration_seconds, 0, -1):
        out.write(status_line(title, description, remaining, clock()))
        out.flush()
        sleep(tick_seconds)
        ticks += 1

    out.write("\n")
    out.flush()
    return ticks
