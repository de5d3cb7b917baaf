# src/schedule_organizer/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import time
from enum import StrEnum


class Priority(StrEnum):
    """
    Ordinal urgency of a task.

    Members compare by rank (LOW < MEDIUM < HIGH < CRITICAL), not by their string value.
    """

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, raw: str | Priority) -> Priority:
        if isinstance(raw, Priority):
            return raw
        if raw is None or not str(raw).strip():
            raise ValueError("Priority level cannot be empty")
        try:
            return cls(str(raw).strip().upper())
        except ValueError:
            options = ", ".join(p.value for p in cls)
            raise ValueError(f"Invalid priority level: {raw!r}. Valid options are: {options}") from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank >= other.rank


_PRIORITY_RANK = {
    Priority.LOW: 1,
    Priority.MEDIUM: 2,
    Priority.HIGH: 3,
    Priority.CRITICAL: 4,
}


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    PENDING -> COMPLETED is the only transition; COMPLETED is terminal.
    """

    PENDING = "pending"
    COMPLETED = "completed"


def minute_of_day(t: time) -> int:
    return t.hour * 60 + t.minute


def format_hhmm(t: time) -> str:
    return t.strftime("%H:%M")


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    description: str
    start: time
    end: time
    priority: Priority
    status: TaskStatus
    created_at: float
    updated_at: float

    @property
    def start_minute(self) -> int:
        return minute_of_day(self.start)

    @property
    def end_minute(self) -> int:
        return minute_of_day(self.end)

    @property
    def duration_minutes(self) -> int:
        return self.end_minute - self.start_minute

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED

    @property
    def formatted_start(self) -> str:
        return format_hhmm(self.start)

    @property
    def formatted_end(self) -> str:
        return format_hhmm(self.end)

    @property
    def sort_key(self) -> tuple[int, float, str]:
        return (self.start_minute, self.created_at, self.id)

    def overlaps(self, start_minute: int, end_minute: int) -> bool:
        """Half-open interval test; touching endpoints do not overlap."""
        return start_minute < self.end_minute and self.start_minute < end_minute

    def completed(self, *, now_ts: float) -> Task:
        if self.is_completed:
            return self
        return replace(self, status=TaskStatus.COMPLETED, updated_at=now_ts)

    def with_fields(
        self,
        *,
        description: str,
        start: time,
        end: time,
        priority: Priority,
        now_ts: float,
    ) -> Task:
        """Copy with edited fields; id, status and created_at are preserved."""
        return replace(
            self,
            description=description,
            start=start,
            end=end,
            priority=priority,
            updated_at=now_ts,
        )

    def __str__(self) -> str:
        status = "[COMPLETED]" if self.is_completed else "[PENDING]"
        return (
            f"{status} {self.description} ({self.formatted_start} - {self.formatted_end}) "
            f"[{self.priority.display_name}] Duration: {self.duration_minutes} min"
        )
