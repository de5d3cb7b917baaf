# src/schedule_organizer/tasks/conflict_detector.py

"""
Overlap detection between a candidate interval and existing tasks.

Intervals are half-open [start, end): a task ending at 08:00 and another starting at
08:00 are back-to-back, not conflicting.

The scan is linear over tasks in start order (TaskStore snapshots already are). That makes
the first hit the earliest-starting overlapping task and lets the scan stop at the first
task starting at or after the candidate's end. Pass `presorted=False` for arbitrary input.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import time

from .task_models import Task, minute_of_day


def intervals_overlap(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    return a_start < b_end and b_start < a_end


def _iter_overlapping(
    candidate_start: time,
    candidate_end: time,
    existing_tasks: Iterable[Task],
    exclude_id: str | None,
    presorted: bool,
) -> Iterator[Task]:
    c_start = minute_of_day(candidate_start)
    c_end = minute_of_day(candidate_end)

    tasks = existing_tasks if presorted else sorted(existing_tasks, key=lambda t: t.sort_key)
    for t in tasks:
        if t.start_minute >= c_end:
            break
        if exclude_id is not None and t.id == exclude_id:
            continue
        if intervals_overlap(c_start, c_end, t.start_minute, t.end_minute):
            yield t


def find_conflict(
    candidate_start: time,
    candidate_end: time,
    existing_tasks: Iterable[Task],
    exclude_id: str | None = None,
    *,
    presorted: bool = True,
) -> Task | None:
    """Return the earliest-starting task overlapping the candidate, or None."""
    return next(
        _iter_overlapping(candidate_start, candidate_end, existing_tasks, exclude_id, presorted),
        None,
    )


def find_all_conflicts(
    candidate_start: time,
    candidate_end: time,
    existing_tasks: Iterable[Task],
    exclude_id: str | None = None,
    *,
    presorted: bool = True,
) -> list[Task]:
    return list(
        _iter_overlapping(candidate_start, candidate_end, existing_tasks, exclude_id, presorted)
    )
