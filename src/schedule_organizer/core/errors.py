# src/schedule_organizer/core/errors.py

"""
Typed failure results returned by the schedule core.

Operations return either a Task or one of these values; nothing here is raised
unless a caller opts in via unwrap() at its own boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from ..tasks.task_models import Task

T = TypeVar("T")


class ValidationCode(StrEnum):
    EMPTY_DESCRIPTION = "EMPTY_DESCRIPTION"
    DESCRIPTION_LENGTH = "DESCRIPTION_LENGTH"
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    START_AFTER_END = "START_AFTER_END"
    DURATION_TOO_SHORT = "DURATION_TOO_SHORT"
    DURATION_TOO_LONG = "DURATION_TOO_LONG"
    INVALID_PRIORITY = "INVALID_PRIORITY"


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Caller input is malformed. Recoverable by asking again."""

    code: ValidationCode
    message: str

    kind = "validation"

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


@dataclass(frozen=True, slots=True)
class ConflictError:
    """The candidate interval collides with an existing task."""

    conflicting_task: Task

    kind = "conflict"
    code = "OVERLAPPING_TASK"

    @property
    def message(self) -> str:
        t = self.conflicting_task
        return (
            f"Task conflicts with existing task '{t.description}' "
            f"({t.formatted_start} - {t.formatted_end})"
        )

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


@dataclass(frozen=True, slots=True)
class NotFoundError:
    task_id: str

    kind = "not_found"
    code = "TASK_NOT_FOUND"

    @property
    def message(self) -> str:
        return f"Task not found with ID: {self.task_id}"

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


ScheduleError = ValidationError | ConflictError | NotFoundError

_ERROR_TYPES = (ValidationError, ConflictError, NotFoundError)


class ScheduleOperationError(Exception):
    """Exception wrapper for callers that want to raise at their own boundary."""

    def __init__(self, error: ScheduleError) -> None:
        super().__init__(str(error))
        self.error = error


def is_error(result: object) -> bool:
    return isinstance(result, _ERROR_TYPES)


def unwrap(result: T | ScheduleError) -> T:
    if isinstance(result, _ERROR_TYPES):
        raise ScheduleOperationError(result)
    return result
