# src/schedule_organizer/bootstrap.py

"""
Composition root.

Wires settings -> logging, settings -> analyzer -> ScheduleManager, and attaches the
logging observer. Callers (a console UI, an exporter, tests) receive the manager
explicitly instead of reaching for a shared global instance.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .analysis.productivity import AnalyzerSettings, ProductivityAnalyzer
from .config import get_settings
from .logging_setup import setup_logging
from .tasks.schedule_manager import ScheduleManager
from .tasks.task_events import TaskEventLogger
from .tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def configure_logging(settings=None) -> Path:
    """Route console level from settings.log_level and the log file into settings.data_dir."""
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(console_level, int):
        console_level = logging.INFO

    log_dir = getattr(settings, "data_dir", ".local/schedule")
    return setup_logging(log_dir=log_dir, console_level=console_level)


def create_schedule_manager(
    *,
    settings=None,
    log_events: bool = True,
    configure_logs: bool = False,
) -> ScheduleManager:
    """
    Build a ready-to-use ScheduleManager.

    Keeping settings injectable makes the core easy to test and avoids hidden global
    config reads. If settings is None, falls back to get_settings().
    `configure_logs=True` also installs the console/file handlers (do it once per process).
    """
    if settings is None:
        settings = get_settings()

    if configure_logs:
        log_file = configure_logging(settings)
        logger.debug("Logging to %s", log_file)

    analyzer = ProductivityAnalyzer(AnalyzerSettings.from_settings(settings))
    observers = [TaskEventLogger()] if log_events else []

    manager = ScheduleManager(TaskStore(), analyzer=analyzer, observers=observers)
    logger.info("Schedule manager ready app=%s", getattr(settings, "app_name", "schedule-organizer"))
    return manager
