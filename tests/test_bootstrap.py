# tests/test_bootstrap.py

from __future__ import annotations

import contextlib
import logging

import pytest

from schedule_organizer import bootstrap
from schedule_organizer.config import Settings
from schedule_organizer.logging_setup import setup_logging
from schedule_organizer.tasks.task_events import TaskEventLogger
from schedule_organizer.tasks.task_models import Task


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("SCHEDULE_MIN_BREAK_MINUTES", "5")
    monkeypatch.setenv("SCHEDULE_HIGH_PRIORITY_SHARE", "60.5")
    monkeypatch.setenv("SCHEDULE_MAX_SPAN_MINUTES", "not-a-number")
    monkeypatch.setenv("SCHEDULE_DATA_DIR", str(tmp_path / "data"))

    s = Settings.from_env()
    assert s.min_break_minutes == 5
    assert s.high_priority_share == 60.5
    assert s.max_span_minutes == 600
    assert s.data_dir == tmp_path / "data"


def test_create_schedule_manager_uses_settings(settings) -> None:
    settings.min_break_minutes = 0
    manager = bootstrap.create_schedule_manager(settings=settings)

    manager.add_task("Workout", "07:00", "08:00", "high")
    manager.add_task("Breakfast", "08:00", "08:30", "low")
    result = manager.analyze()
    assert result.insufficient_breaks == ()


def test_event_logger_writes_records(settings, caplog: pytest.LogCaptureFixture) -> None:
    manager = bootstrap.create_schedule_manager(settings=settings)
    with caplog.at_level(logging.INFO, logger="schedule_organizer"):
        task = manager.add_task("Workout", "07:00", "08:00", "high")
        manager.add_task("Meeting", "07:30", "08:30", "medium")

    assert isinstance(task, Task)
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Task added: Workout") for m in messages)
    assert any("Task conflict: 'Meeting'" in m for m in messages)


def test_event_logger_is_optional(settings) -> None:
    manager = bootstrap.create_schedule_manager(settings=settings, log_events=False)
    assert not any(isinstance(o, TaskEventLogger) for o in manager._observers)


@contextlib.contextmanager
def isolated_root_logging():
    """Run setup_logging inside a test and put pytest's own handlers back afterwards."""
    root = logging.getLogger()
    saved = list(root.handlers)
    saved_level = root.level
    try:
        yield root
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            if h not in saved:
                h.close()
        for h in saved:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)


def test_setup_logging_creates_file(tmp_path) -> None:
    with isolated_root_logging() as root:
        log_file = setup_logging(log_dir=tmp_path / "logs", console_level="warning")
        logging.getLogger("schedule_organizer.test").debug("hello file")
        for h in root.handlers:
            h.flush()

    assert log_file == tmp_path / "logs" / "schedule.log"
    assert "hello file" in log_file.read_text("utf-8")


def test_configure_logging_reads_settings(settings, tmp_path) -> None:
    settings.log_level = "warning"
    settings.data_dir = tmp_path / "state"

    with isolated_root_logging() as root:
        log_file = bootstrap.configure_logging(settings)
        console = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]
        console_levels = [h.level for h in console]

    assert log_file == tmp_path / "state" / "schedule.log"
    assert console_levels == [logging.WARNING]


def test_create_schedule_manager_can_configure_logs(settings, tmp_path) -> None:
    settings.data_dir = tmp_path / "state"

    with isolated_root_logging() as root:
        manager = bootstrap.create_schedule_manager(settings=settings, configure_logs=True)
        manager.add_task("Workout", "07:00", "08:00", "high")
        manager.analyze()
        for h in root.handlers:
            h.flush()

    text = (tmp_path / "state" / "schedule.log").read_text("utf-8")
    assert "Task added: Workout" in text
    assert "Productivity analysis: tasks=1" in text
