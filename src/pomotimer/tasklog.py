"""Append-only daily log of completed tasks.

One plain-text file per calendar day lives under ``~/.completed_tasks``
(or ``$POMOTIMER_LOG_DIR``), named ``YYYYMMDD.txt``, holding lines of the form
``HH:MM:SS | <task description>``.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

LOG_DIR_ENV = "POMOTIMER_LOG_DIR"
LOG_DIR_NAME = ".completed_tasks"
SEPARATOR = " | "


@dataclass(frozen=True)
class LogEntry:
    time: str
    task: str


def log_dir() -> Path:
    override = os.environ.get(LOG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / LOG_DIR_NAME


def log_path(day: date, directory: Optional[Path] = None) -> Path:
    return (directory or log_dir()) / f"{day:%Y%m%d}.txt"


def format_entry(task_label: str, when: datetime) -> str:
    return f"{when:%H:%M:%S}{SEPARATOR}{task_label}\n"


def log_completed_task(task_label: str, when: Optional[datetime] = None) -> Optional[Path]:
    """Append one line for ``task_label`` to the file for ``when``'s day.

    Returns the file written, or ``None`` when logging was skipped. Failures
    never reach the caller.
    """
    when = when or datetime.now()
    try:
        directory = log_dir()
        directory.mkdir(parents=True, exist_ok=True)
        path = log_path(when.date(), directory)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(format_entry(task_label, when))
    except (OSError, RuntimeError) as exc:
        # RuntimeError: Path.home() could not resolve a home directory
        logger.debug("Skipping task log write: %s", exc)
        return None
    return path


def read_entries(day: date, directory: Optional[Path] = None) -> List[LogEntry]:
    """Return the entries logged on ``day``; a missing or unreadable file means no entries."""
    path = log_path(day, directory)
    try:
        lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as exc:
        logger.debug("Cannot read task log %s: %s", path, exc)
        return []

    entries: List[LogEntry] = []
    for line in lines:
        stamp, sep, task = line.partition(SEPARATOR)
        if not sep:
            continue
        entries.append(LogEntry(time=stamp, task=task))
    return entries
