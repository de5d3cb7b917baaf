# src/schedule_organizer/analysis/productivity.py

"""
Productivity analysis over a schedule snapshot.

A pure pass: the analyzer holds only thresholds, never tasks, and a result is rebuilt from
scratch on every call. The output covers:
- priority histogram and percentage distribution,
- completion statistics and workload (minutes) per priority,
- gaps between consecutive tasks and continuous work blocks,
- recommendations, emitted by fixed rules in a fixed order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import time
from enum import StrEnum
from itertools import pairwise
from types import MappingProxyType

from ..tasks.task_models import Priority, Task

logger = logging.getLogger(__name__)


class Recommendation(StrEnum):
    ADD_TASKS = "Add tasks to your schedule to get productivity insights"
    REDISTRIBUTE_HIGH_PRIORITY = "Redistribute high-priority load: more than half of the tasks are HIGH or CRITICAL"
    ADD_BREAKS = "Add breaks between tasks: some consecutive tasks leave too little time in between"
    SPLIT_ACROSS_DAYS = "Consider splitting across days: the schedule spans longer than a healthy working day"


@dataclass(frozen=True, slots=True)
class AnalyzerSettings:
    # A gap shorter than this between consecutive tasks is an insufficient break.
    min_break_minutes: int = 10
    # Percentage (0-100) of HIGH+CRITICAL tasks above which load should be redistributed.
    high_priority_share: float = 50.0
    max_span_minutes: int = 10 * 60
    short_task_minutes: int = 30
    max_continuous_work_minutes: int = 120

    @staticmethod
    def from_settings(settings) -> AnalyzerSettings:
        defaults = AnalyzerSettings()
        return AnalyzerSettings(
            min_break_minutes=int(getattr(settings, "min_break_minutes", defaults.min_break_minutes)),
            high_priority_share=float(getattr(settings, "high_priority_share", defaults.high_priority_share)),
            max_span_minutes=int(getattr(settings, "max_span_minutes", defaults.max_span_minutes)),
            short_task_minutes=int(getattr(settings, "short_task_minutes", defaults.short_task_minutes)),
            max_continuous_work_minutes=int(
                getattr(settings, "max_continuous_work_minutes", defaults.max_continuous_work_minutes)
            ),
        )


@dataclass(frozen=True, slots=True)
class Gap:
    before: Task
    after: Task
    minutes: int
    insufficient: bool


@dataclass(frozen=True, slots=True)
class WorkBlock:
    """Tasks chained together by insufficient breaks."""

    tasks: tuple[Task, ...]
    start: time
    end: time
    minutes: int


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    completion_rate: float

    priority_counts: Mapping[Priority, int]
    priority_percentages: Mapping[Priority, float]
    high_priority_percentage: float

    total_duration_minutes: int
    minutes_by_priority: Mapping[Priority, int]

    gaps: tuple[Gap, ...]
    span_start: time | None
    span_end: time | None
    span_minutes: int

    short_task_count: int
    long_work_blocks: tuple[WorkBlock, ...]

    recommendations: tuple[str, ...]

    def __post_init__(self) -> None:
        # Read-only views; the analyzer never hands out its working dicts.
        for name in ("priority_counts", "priority_percentages", "minutes_by_priority"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def __hash__(self) -> int:
        return hash(
            (
                self.total_tasks,
                self.completed_tasks,
                tuple(sorted(self.priority_counts.items())),
                tuple(sorted(self.minutes_by_priority.items())),
                self.gaps,
                self.span_start,
                self.span_end,
                self.long_work_blocks,
                self.recommendations,
            )
        )

    @property
    def is_empty(self) -> bool:
        return self.total_tasks == 0

    @property
    def insufficient_breaks(self) -> tuple[Gap, ...]:
        return tuple(g for g in self.gaps if g.insufficient)


def _zero_by_priority() -> dict[Priority, int]:
    return {p: 0 for p in Priority}


def _empty_result() -> AnalysisResult:
    return AnalysisResult(
        total_tasks=0,
        completed_tasks=0,
        pending_tasks=0,
        completion_rate=0.0,
        priority_counts=_zero_by_priority(),
        priority_percentages={p: 0.0 for p in Priority},
        high_priority_percentage=0.0,
        total_duration_minutes=0,
        minutes_by_priority=_zero_by_priority(),
        gaps=(),
        span_start=None,
        span_end=None,
        span_minutes=0,
        short_task_count=0,
        long_work_blocks=(),
        recommendations=(Recommendation.ADD_TASKS,),
    )


class ProductivityAnalyzer:
    def __init__(self, settings: AnalyzerSettings | None = None) -> None:
        self.settings = settings or AnalyzerSettings()

    def analyze(self, tasks: Sequence[Task]) -> AnalysisResult:
        if not tasks:
            logger.debug("Analysis on empty schedule")
            return _empty_result()

        cfg = self.settings
        ordered = sorted(tasks, key=lambda t: t.sort_key)
        total = len(ordered)

        counts = _zero_by_priority()
        minutes = _zero_by_priority()
        for t in ordered:
            counts[t.priority] += 1
            minutes[t.priority] += t.duration_minutes

        percentages = {p: counts[p] * 100.0 / total for p in Priority}
        high_pct = (counts[Priority.HIGH] + counts[Priority.CRITICAL]) * 100.0 / total
        completed = sum(1 for t in ordered if t.is_completed)

        gaps = tuple(
            Gap(
                before=cur,
                after=nxt,
                minutes=nxt.start_minute - cur.end_minute,
                insufficient=nxt.start_minute - cur.end_minute < cfg.min_break_minutes,
            )
            for cur, nxt in pairwise(ordered)
        )

        last = max(ordered, key=lambda t: t.end_minute)
        span_minutes = last.end_minute - ordered[0].start_minute

        recommendations: list[str] = []
        if high_pct > cfg.high_priority_share:
            recommendations.append(Recommendation.REDISTRIBUTE_HIGH_PRIORITY)
        if any(g.insufficient for g in gaps):
            recommendations.append(Recommendation.ADD_BREAKS)
        if span_minutes > cfg.max_span_minutes:
            recommendations.append(Recommendation.SPLIT_ACROSS_DAYS)

        result = AnalysisResult(
            total_tasks=total,
            completed_tasks=completed,
            pending_tasks=total - completed,
            completion_rate=completed * 100.0 / total,
            priority_counts=counts,
            priority_percentages=percentages,
            high_priority_percentage=high_pct,
            total_duration_minutes=sum(minutes.values()),
            minutes_by_priority=minutes,
            gaps=gaps,
            span_start=ordered[0].start,
            span_end=last.end,
            span_minutes=span_minutes,
            short_task_count=sum(1 for t in ordered if t.duration_minutes < cfg.short_task_minutes),
            long_work_blocks=self._long_work_blocks(ordered, gaps),
            recommendations=tuple(recommendations),
        )
        logger.debug(
            "Analysis done tasks=%d completed=%d recommendations=%d",
            total,
            completed,
            len(recommendations),
        )
        return result

    def _long_work_blocks(self, ordered: list[Task], gaps: tuple[Gap, ...]) -> tuple[WorkBlock, ...]:
        blocks: list[list[Task]] = [[ordered[0]]]
        for gap in gaps:
            if gap.insufficient:
                blocks[-1].append(gap.after)
            else:
                blocks.append([gap.after])

        out: list[WorkBlock] = []
        for block in blocks:
            end_task = max(block, key=lambda t: t.end_minute)
            length = end_task.end_minute - block[0].start_minute
            if length > self.settings.max_continuous_work_minutes:
                out.append(WorkBlock(tuple(block), block[0].start, end_task.end, length))
        return tuple(out)


def analyze(tasks: Sequence[Task], settings: AnalyzerSettings | None = None) -> AnalysisResult:
    return ProductivityAnalyzer(settings).analyze(tasks)
