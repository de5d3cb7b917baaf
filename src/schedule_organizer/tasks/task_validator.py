# src/schedule_organizer/tasks/task_validator.py

"""
Structural validation of a single candidate task.

No knowledge of other tasks lives here (that is the conflict detector's job).
Checks run in a fixed order and the first failure is the one reported.
"""

from __future__ import annotations

import re
from datetime import time

from ..core.errors import ValidationCode, ValidationError
from .task_models import Priority, minute_of_day

MIN_DESCRIPTION_LENGTH = 3
MAX_DESCRIPTION_LENGTH = 100

MIN_DURATION_MINUTES = 15
MAX_DURATION_MINUTES = 8 * 60

_HHMM_RE = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])$")


def parse_time_of_day(value: str | time) -> time:
    """
    Parse a 24-hour HH:mm value.

    `datetime.time` objects pass through when they carry no seconds, so callers that
    already hold parsed times (an edit merging stored fields) don't round-trip via str.
    """
    if isinstance(value, time):
        if value.second or value.microsecond or value.tzinfo is not None:
            raise ValueError(f"Time must be minute-granular and naive: {value!r}")
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported time value: {value!r}")

    m = _HHMM_RE.match(value.strip())
    if not m:
        raise ValueError(f"Invalid time format: {value!r}. Expected HH:mm (24-hour format)")
    return time(hour=int(m.group(1)), minute=int(m.group(2)))


def validate_task_fields(
    description: str | None,
    start: str | time,
    end: str | time,
) -> ValidationError | None:
    text = (description or "").strip()
    if not text:
        return ValidationError(ValidationCode.EMPTY_DESCRIPTION, "Task description cannot be empty")

    if not MIN_DESCRIPTION_LENGTH <= len(text) <= MAX_DESCRIPTION_LENGTH:
        return ValidationError(
            ValidationCode.DESCRIPTION_LENGTH,
            f"Task description must be between {MIN_DESCRIPTION_LENGTH} and "
            f"{MAX_DESCRIPTION_LENGTH} characters (got {len(text)})",
        )

    try:
        start_t = parse_time_of_day(start)
        end_t = parse_time_of_day(end)
    except ValueError as e:
        return ValidationError(ValidationCode.INVALID_TIME_FORMAT, str(e))

    start_m = minute_of_day(start_t)
    end_m = minute_of_day(end_t)
    if start_m >= end_m:
        return ValidationError(
            ValidationCode.START_AFTER_END,
            f"Start time ({start_t:%H:%M}) must be before end time ({end_t:%H:%M})",
        )

    duration = end_m - start_m
    if duration < MIN_DURATION_MINUTES:
        return ValidationError(
            ValidationCode.DURATION_TOO_SHORT,
            f"Task duration must be at least {MIN_DURATION_MINUTES} minutes (got {duration})",
        )
    if duration > MAX_DURATION_MINUTES:
        return ValidationError(
            ValidationCode.DURATION_TOO_LONG,
            f"Task duration cannot exceed {MAX_DURATION_MINUTES // 60} hours (got {duration} minutes)",
        )

    return None


def validate_priority(value: str | Priority) -> Priority | ValidationError:
    try:
        return Priority.parse(value)
    except ValueError as e:
        return ValidationError(ValidationCode.INVALID_PRIORITY, str(e))
