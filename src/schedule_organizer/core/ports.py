# src/schedule_organizer/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The schedule manager depends on Protocols instead of concrete implementations,
so a console UI, an exporter or a test double can listen to schedule changes
without the core importing any of them.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..analysis.productivity import AnalysisResult
    from ..tasks.task_models import Task
    from .errors import ScheduleError


class TaskObserver(Protocol):
    """
    Receives notifications after a schedule operation has finished.

    Called outside the manager lock; exceptions are logged and swallowed by the manager,
    they never roll back a committed change.
    """

    def on_task_added(self, task: Task) -> None: ...
    def on_task_updated(self, old: Task, new: Task) -> None: ...
    def on_task_removed(self, task: Task) -> None: ...
    def on_task_completed(self, task: Task) -> None: ...
    def on_task_conflict(self, candidate: Task, conflicting: Task) -> None: ...
    def on_operation_error(self, operation: str, error: ScheduleError) -> None: ...
    def on_analysis_completed(self, result: AnalysisResult) -> None: ...


class Analyzer(Protocol):
    """Read-only analysis over a start-ordered task snapshot."""

    def analyze(self, tasks: Sequence[Task]) -> AnalysisResult: ...
