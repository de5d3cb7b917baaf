# src/schedule_organizer/tasks/schedule_manager.py

from __future__ import annotations

"""
Schedule manager.

The facade the rest of the application calls. Every mutating operation runs:
- validation of the merged candidate fields,
- conflict detection against the current start-ordered snapshot,
- the store mutation,
inside one critical section, so two concurrent callers can never both pass the
conflict check against a stale view and commit overlapping tasks.

Failures are returned as typed values (ValidationError / ConflictError / NotFoundError);
the store is only touched after every check has passed.

Observers are notified after the lock is released.
"""

import logging
import threading
import time
import uuid
from collections.abc import Callable, Iterable
from datetime import time as time_of_day

from ..analysis.productivity import AnalysisResult, ProductivityAnalyzer
from ..core.errors import ConflictError, NotFoundError, ScheduleError, ValidationError
from ..core.ports import Analyzer, TaskObserver
from .conflict_detector import find_conflict
from .task_models import Priority, Task, TaskStatus
from .task_store import TaskStore
from .task_validator import parse_time_of_day, validate_priority, validate_task_fields

logger = logging.getLogger(__name__)

_Notification = Callable[[TaskObserver], None]


def _new_task_id() -> str:
    return uuid.uuid4().hex


class ScheduleManager:
    """
    Owns one schedule: a TaskStore plus the lock guarding it.

    Construct one per schedule and pass it to callers; there is no module-level instance.
    """

    def __init__(
        self,
        store: TaskStore | None = None,
        *,
        analyzer: Analyzer | None = None,
        observers: Iterable[TaskObserver] = (),
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = _new_task_id,
    ) -> None:
        self._store = store if store is not None else TaskStore()
        self._analyzer = analyzer if analyzer is not None else ProductivityAnalyzer()
        self._observers: list[TaskObserver] = list(observers)
        self._clock = clock
        self._new_id = id_factory
        self._lock = threading.Lock()

    # ---- observers ----

    # Observers are matched by identity; dataclass observers compare equal by value.
    def add_observer(self, observer: TaskObserver) -> None:
        with self._lock:
            if not any(o is observer for o in self._observers):
                self._observers.append(observer)

    def remove_observer(self, observer: TaskObserver) -> None:
        with self._lock:
            self._observers = [o for o in self._observers if o is not observer]

    def _notify(self, notifications: list[_Notification]) -> None:
        if not notifications:
            return
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            for fn in notifications:
                try:
                    fn(observer)
                except Exception:
                    logger.exception("Task observer %r failed", observer)

    # ---- helpers (caller holds the lock) ----

    def _check_candidate(
        self,
        description: str | None,
        start: str | time_of_day,
        end: str | time_of_day,
        priority: str | Priority,
        exclude_id: str | None,
    ) -> tuple[str, time_of_day, time_of_day, Priority] | ValidationError | ConflictError:
        err = validate_task_fields(description, start, end)
        if err is not None:
            return err

        prio = validate_priority(priority)
        if isinstance(prio, ValidationError):
            return prio

        start_t = parse_time_of_day(start)
        end_t = parse_time_of_day(end)

        conflicting = find_conflict(start_t, end_t, self._store.snapshot(), exclude_id)
        if conflicting is not None:
            return ConflictError(conflicting)

        return (description or "").strip(), start_t, end_t, prio

    @staticmethod
    def _rejected(operation: str, error: ScheduleError, candidate: Task | None = None) -> list[_Notification]:
        out: list[_Notification] = [lambda o: o.on_operation_error(operation, error)]
        if isinstance(error, ConflictError) and candidate is not None:
            out.insert(0, lambda o: o.on_task_conflict(candidate, error.conflicting_task))
        return out

    def _draft(
        self,
        description: str | None,
        start: str | time_of_day,
        end: str | time_of_day,
        priority: str | Priority,
        now: float,
    ) -> Task | None:
        """Best-effort Task built from raw input, used only to describe a rejected candidate."""
        try:
            return Task(
                id="",
                description=(description or "").strip(),
                start=parse_time_of_day(start),
                end=parse_time_of_day(end),
                priority=Priority.parse(priority),
                status=TaskStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
        except ValueError:
            return None

    # ---- mutations ----

    def add_task(
        self,
        description: str | None,
        start: str | time_of_day,
        end: str | time_of_day,
        priority: str | Priority = Priority.MEDIUM,
    ) -> Task | ValidationError | ConflictError:
        with self._lock:
            now = self._clock()
            checked = self._check_candidate(description, start, end, priority, exclude_id=None)
            if isinstance(checked, (ValidationError, ConflictError)):
                result: Task | ValidationError | ConflictError = checked
                notifications = self._rejected("add_task", checked, self._draft(description, start, end, priority, now))
            else:
                text, start_t, end_t, prio = checked
                task = Task(
                    id=self._new_id(),
                    description=text,
                    start=start_t,
                    end=end_t,
                    priority=prio,
                    status=TaskStatus.PENDING,
                    created_at=now,
                    updated_at=now,
                )
                self._store.insert(task)
                result = task
                notifications = [lambda o: o.on_task_added(task)]

        if isinstance(result, Task):
            logger.info("Task added id=%s %s-%s", result.id, result.formatted_start, result.formatted_end)
        else:
            logger.info("add_task rejected: %s", result)
        self._notify(notifications)
        return result

    def edit_task(
        self,
        task_id: str,
        *,
        description: str | None = None,
        start: str | time_of_day | None = None,
        end: str | time_of_day | None = None,
        priority: str | Priority | None = None,
    ) -> Task | ValidationError | ConflictError | NotFoundError:
        """
        Update any subset of fields.

        Omitted fields keep their stored values. The merged candidate is validated again
        and conflict-checked against every other task, never against itself.
        """
        with self._lock:
            now = self._clock()
            old = self._store.get(task_id)
            if old is None:
                result: Task | ValidationError | ConflictError | NotFoundError = NotFoundError(task_id)
                notifications = self._rejected("edit_task", result)
            else:
                m_description = old.description if description is None else description
                m_start = old.start if start is None else start
                m_end = old.end if end is None else end
                m_priority = old.priority if priority is None else priority

                checked = self._check_candidate(m_description, m_start, m_end, m_priority, exclude_id=task_id)
                if isinstance(checked, (ValidationError, ConflictError)):
                    result = checked
                    candidate = self._draft(m_description, m_start, m_end, m_priority, now)
                    notifications = self._rejected("edit_task", checked, candidate)
                else:
                    text, start_t, end_t, prio = checked
                    new = old.with_fields(description=text, start=start_t, end=end_t, priority=prio, now_ts=now)
                    self._store.replace(new)
                    result = new
                    notifications = [lambda o: o.on_task_updated(old, new)]

        if isinstance(result, Task):
            logger.info("Task edited id=%s %s-%s", result.id, result.formatted_start, result.formatted_end)
        else:
            logger.info("edit_task rejected id=%s: %s", task_id, result)
        self._notify(notifications)
        return result

    def mark_complete(self, task_id: str) -> Task | NotFoundError:
        """PENDING -> COMPLETED. Completing an already completed task returns it unchanged."""
        notifications: list[_Notification] = []
        with self._lock:
            old = self._store.get(task_id)
            if old is None:
                result: Task | NotFoundError = NotFoundError(task_id)
                notifications = self._rejected("mark_complete", result)
            elif old.is_completed:
                result = old
            else:
                new = old.completed(now_ts=self._clock())
                self._store.replace(new)
                result = new
                notifications = [lambda o: o.on_task_completed(new)]

        if isinstance(result, NotFoundError):
            logger.info("mark_complete rejected: %s", result)
        elif notifications:
            logger.info("Task completed id=%s", task_id)
        else:
            logger.debug("Task already completed id=%s", task_id)
        self._notify(notifications)
        return result

    def remove_task(self, task_id: str) -> Task | NotFoundError:
        with self._lock:
            removed = self._store.remove(task_id)

        if removed is None:
            err = NotFoundError(task_id)
            logger.info("remove_task rejected: %s", err)
            self._notify(self._rejected("remove_task", err))
            return err

        logger.info("Task removed id=%s", task_id)
        self._notify([lambda o: o.on_task_removed(removed)])
        return removed

    def clear_all(self) -> int:
        with self._lock:
            removed = self._store.snapshot()
            self._store.clear()

        logger.info("Schedule cleared: %d tasks removed", len(removed))
        self._notify([lambda o, t=t: o.on_task_removed(t) for t in removed])
        return len(removed)

    # ---- reads ----

    def list_tasks(self) -> tuple[Task, ...]:
        """Start-ordered snapshot. Tasks are frozen, so the tuple can be shared freely."""
        with self._lock:
            return self._store.snapshot()

    def get_task(self, task_id: str) -> Task | NotFoundError:
        with self._lock:
            task = self._store.get(task_id)
        return task if task is not None else NotFoundError(task_id)

    def tasks_by_priority(self, priority: str | Priority) -> tuple[Task, ...] | ValidationError:
        prio = validate_priority(priority)
        if isinstance(prio, ValidationError):
            return prio
        with self._lock:
            return self._store.list_by_priority(prio)

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    def __len__(self) -> int:
        return self.count()

    def analyze(self) -> AnalysisResult:
        # Snapshot under the lock, analyze outside it.
        result = self._analyzer.analyze(self.list_tasks())
        self._notify([lambda o: o.on_analysis_completed(result)])
        return result
