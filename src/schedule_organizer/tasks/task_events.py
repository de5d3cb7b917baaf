# src/schedule_organizer/tasks/task_events.py

from __future__ import annotations

import logging

from ..analysis.productivity import AnalysisResult
from ..core.errors import ScheduleError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskEventLogger:
    """TaskObserver that writes every schedule event to the log."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def on_task_added(self, task: Task) -> None:
        self._log.info(
            "Task added: %s (%s - %s) priority=%s duration=%dmin",
            task.description,
            task.formatted_start,
            task.formatted_end,
            task.priority.display_name,
            task.duration_minutes,
        )

    def on_task_updated(self, old: Task, new: Task) -> None:
        self._log.info(
            "Task updated: %s (%s - %s) -> %s (%s - %s) priority=%s",
            old.description,
            old.formatted_start,
            old.formatted_end,
            new.description,
            new.formatted_start,
            new.formatted_end,
            new.priority.display_name,
        )

    def on_task_removed(self, task: Task) -> None:
        self._log.info("Task removed: %s (%s - %s)", task.description, task.formatted_start, task.formatted_end)

    def on_task_completed(self, task: Task) -> None:
        self._log.info("Task completed: %s", task.description)

    def on_task_conflict(self, candidate: Task, conflicting: Task) -> None:
        self._log.warning(
            "Task conflict: '%s' (%s - %s) overlaps '%s' (%s - %s)",
            candidate.description,
            candidate.formatted_start,
            candidate.formatted_end,
            conflicting.description,
            conflicting.formatted_start,
            conflicting.formatted_end,
        )

    def on_operation_error(self, operation: str, error: ScheduleError) -> None:
        self._log.info("%s rejected: %s", operation, error)

    def on_analysis_completed(self, result: AnalysisResult) -> None:
        self._log.info(
            "Productivity analysis: tasks=%d completed=%.1f%% high_priority=%.1f%% recommendations=%d",
            result.total_tasks,
            result.completion_rate,
            result.high_priority_percentage,
            len(result.recommendations),
        )
