# src/schedule_organizer/tasks/task_store.py

from __future__ import annotations

import bisect
import logging

from .task_models import Priority, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory, start-ordered task collection.

    Layout:
    - `_by_id` maps id -> Task for O(1) lookup
    - `_ordered` keeps the same tasks sorted by Task.sort_key (start, created_at, id)

    Tasks are frozen dataclasses, so updates replace the instance in both views.

    Thread-safety:
    - none here; ScheduleManager serializes every call under its own lock
    """

    def __init__(self) -> None:
        self._by_id: dict[str, Task] = {}
        self._ordered: list[Task] = []
        logger.debug("TaskStore ready")

    # ---- low-level helpers ----

    def _index_of(self, task: Task) -> int:
        i = bisect.bisect_left(self._ordered, task.sort_key, key=lambda t: t.sort_key)
        if i < len(self._ordered) and self._ordered[i].id == task.id:
            return i
        raise KeyError(task.id)

    # ---- public API ----

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._by_id

    def count_tasks(self) -> int:
        return len(self._by_id)

    def get(self, task_id: str) -> Task | None:
        return self._by_id.get(task_id)

    def insert(self, task: Task) -> None:
        if task.id in self._by_id:
            raise KeyError(f"duplicate task id {task.id}")
        bisect.insort(self._ordered, task, key=lambda t: t.sort_key)
        self._by_id[task.id] = task
        logger.debug("Task stored id=%s start=%s", task.id, task.formatted_start)

    def replace(self, task: Task) -> Task:
        """Swap the stored task with the same id; returns the previous instance."""
        old = self._by_id.get(task.id)
        if old is None:
            raise KeyError(task.id)

        del self._ordered[self._index_of(old)]
        bisect.insort(self._ordered, task, key=lambda t: t.sort_key)
        self._by_id[task.id] = task
        return old

    def remove(self, task_id: str) -> Task | None:
        task = self._by_id.pop(task_id, None)
        if task is None:
            return None
        del self._ordered[self._index_of(task)]
        logger.debug("Task dropped id=%s", task_id)
        return task

    def clear(self) -> int:
        n = len(self._by_id)
        self._by_id.clear()
        self._ordered.clear()
        return n

    def snapshot(self) -> tuple[Task, ...]:
        """Immutable, start-ordered copy; safe to hand to readers outside the lock."""
        return tuple(self._ordered)

    def list_by_priority(self, priority: Priority) -> tuple[Task, ...]:
        return tuple(t for t in self._ordered if t.priority is priority)
