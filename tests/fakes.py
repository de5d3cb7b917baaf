# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time

from schedule_organizer.analysis.productivity import AnalysisResult
from schedule_organizer.core.errors import ScheduleError
from schedule_organizer.tasks.task_models import Priority, Task, TaskStatus


class FakeClock:
    """Monotonic fake for ScheduleManager(clock=...); each call advances one second."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        self.now += 1.0
        return self.now


@dataclass(slots=True)
class RecordingObserver:
    """
    TaskObserver that records every event as (name, payload) for assertions.
    """

    events: list[tuple[str, object]] = field(default_factory=list)

    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def on_task_added(self, task: Task) -> None:
        self.events.append(("added", task))

    def on_task_updated(self, old: Task, new: Task) -> None:
        self.events.append(("updated", (old, new)))

    def on_task_removed(self, task: Task) -> None:
        self.events.append(("removed", task))

    def on_task_completed(self, task: Task) -> None:
        self.events.append(("completed", task))

    def on_task_conflict(self, candidate: Task, conflicting: Task) -> None:
        self.events.append(("conflict", (candidate, conflicting)))

    def on_operation_error(self, operation: str, error: ScheduleError) -> None:
        self.events.append(("error", (operation, error)))

    def on_analysis_completed(self, result: AnalysisResult) -> None:
        self.events.append(("analysis", result))


class ExplodingObserver(RecordingObserver):
    def on_task_added(self, task: Task) -> None:
        raise RuntimeError("observer failure")


def hm(text: str) -> time:
    h, m = text.split(":")
    return time(int(h), int(m))


def make_task(
    description: str,
    start: str,
    end: str,
    priority: Priority = Priority.MEDIUM,
    *,
    task_id: str | None = None,
    status: TaskStatus = TaskStatus.PENDING,
    created_at: float = 0.0,
) -> Task:
    return Task(
        id=task_id or description.lower().replace(" ", "-"),
        description=description,
        start=hm(start),
        end=hm(end),
        priority=priority,
        status=status,
        created_at=created_at,
        updated_at=created_at,
    )
