import re
from datetime import date, datetime

import pytest

from pomotimer import tasklog


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    directory = tmp_path / "completed"
    monkeypatch.setenv(tasklog.LOG_DIR_ENV, str(directory))
    return directory


def test_appends_lines_in_call_order_to_one_daily_file(log_dir):
    first = tasklog.log_completed_task("write spec", datetime(2024, 5, 6, 9, 30, 0))
    second = tasklog.log_completed_task("review", datetime(2024, 5, 6, 10, 0, 5))

    assert first == second == log_dir / "20240506.txt"
    assert [p.name for p in log_dir.iterdir()] == ["20240506.txt"]
    assert first.read_text(encoding="utf-8") == "09:30:00 | write spec\n10:00:05 | review\n"


def test_line_format(log_dir):
    path = tasklog.log_completed_task("demo")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert re.match(r"^\d{2}:\d{2}:\d{2} \| demo$", lines[0])


def test_new_day_gets_new_file(log_dir):
    tasklog.log_completed_task("a", datetime(2024, 5, 6, 23, 59, 59))
    tasklog.log_completed_task("b", datetime(2024, 5, 7, 0, 0, 1))
    assert sorted(p.name for p in log_dir.iterdir()) == ["20240506.txt", "20240507.txt"]


def test_existing_entries_are_kept(log_dir):
    log_dir.mkdir()
    (log_dir / "20240506.txt").write_text("08:00:00 | earlier\n", encoding="utf-8")
    tasklog.log_completed_task("later", datetime(2024, 5, 6, 9, 0, 0))
    assert (log_dir / "20240506.txt").read_text(encoding="utf-8") == "08:00:00 | earlier\n09:00:00 | later\n"


def test_unicode_task_labels(log_dir):
    path = tasklog.log_completed_task("écrire 🍅", datetime(2024, 5, 6, 9, 0, 0))
    assert path.read_bytes() == "09:00:00 | écrire 🍅\n".encode("utf-8")


def test_write_failure_is_swallowed(tmp_path, monkeypatch):
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setenv(tasklog.LOG_DIR_ENV, str(blocker))
    assert tasklog.log_completed_task("demo") is None


def test_missing_home_directory_skips_logging(monkeypatch):
    def no_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(tasklog, "log_dir", no_home)
    assert tasklog.log_completed_task("demo") is None


def test_default_directory_is_under_home(tmp_path, monkeypatch):
    monkeypatch.delenv(tasklog.LOG_DIR_ENV, raising=False)
    monkeypatch.setattr(tasklog.Path, "home", classmethod(lambda cls: tmp_path))
    assert tasklog.log_dir() == tmp_path / ".completed_tasks"


def test_read_entries_skips_malformed_lines(log_dir):
    log_dir.mkdir()
    (log_dir / "20240506.txt").write_text("09:00:00 | one\ngarbage\n10:00:00 | two | three\n", encoding="utf-8")
    entries = tasklog.read_entries(date(2024, 5, 6))
    assert entries == [
        tasklog.LogEntry(time="09:00:00", task="one"),
        tasklog.LogEntry(time="10:00:00", task="two | three"),
    ]


def test_read_entries_for_day_without_log(log_dir):
    assert tasklog.read_entries(date(2024, 1, 1)) == []


def test_read_entries_tolerates_bad_encoding(log_dir):
    log_dir.mkdir()
    (log_dir / "20240506.txt").write_bytes(b"09:00:00 | caf\xe9\n10:00:00 | ok\n")
    entries = tasklog.read_entries(date(2024, 5, 6))
    assert [entry.time for entry in entries] == ["09:00:00", "10:00:00"]
    assert entries[0].task == "caf\ufffd"


def test_read_entries_unreadable_log_means_no_entries(log_dir):
    (log_dir / "20240506.txt").mkdir(parents=True)
    assert tasklog.read_entries(date(2024, 5, 6)) == []
