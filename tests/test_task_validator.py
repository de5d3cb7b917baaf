# tests/test_task_validator.py

from __future__ import annotations

from datetime import time

import pytest

from schedule_organizer.core.errors import ValidationCode, ValidationError
from schedule_organizer.tasks.task_models import Priority
from schedule_organizer.tasks.task_validator import (
    parse_time_of_day,
    validate_priority,
    validate_task_fields,
)


def _code(description, start, end):
    err = validate_task_fields(description, start, end)
    return None if err is None else err.code


def test_valid_task_passes() -> None:
    assert validate_task_fields("Morning Workout", "07:00", "08:00") is None


@pytest.mark.parametrize("description", ["", "   ", None, "\t\n"])
def test_blank_description(description) -> None:
    assert _code(description, "07:00", "08:00") is ValidationCode.EMPTY_DESCRIPTION


def test_description_length_bounds() -> None:
    assert _code("ab", "07:00", "08:00") is ValidationCode.DESCRIPTION_LENGTH
    assert _code("abc", "07:00", "08:00") is None
    assert _code("x" * 100, "07:00", "08:00") is None
    assert _code("x" * 101, "07:00", "08:00") is ValidationCode.DESCRIPTION_LENGTH


def test_description_is_measured_after_trim() -> None:
    assert _code("  ab  ", "07:00", "08:00") is ValidationCode.DESCRIPTION_LENGTH


@pytest.mark.parametrize("value", ["7:00", "24:00", "12:60", "noon", "12:00:00", "", "07h00"])
def test_invalid_time_format(value: str) -> None:
    assert _code("Reading", value, "23:00") is ValidationCode.INVALID_TIME_FORMAT
    assert _code("Reading", "00:00", value) is ValidationCode.INVALID_TIME_FORMAT


def test_start_must_precede_end() -> None:
    assert _code("Reading", "10:00", "10:00") is ValidationCode.START_AFTER_END
    assert _code("Reading", "11:00", "10:00") is ValidationCode.START_AFTER_END


def test_duration_boundaries() -> None:
    assert _code("Stretching", "09:00", "09:15") is None
    assert _code("Stretching", "09:00", "09:14") is ValidationCode.DURATION_TOO_SHORT
    assert _code("Deep work", "08:00", "16:00") is None
    assert _code("Deep work", "08:00", "16:01") is ValidationCode.DURATION_TOO_LONG


def test_first_failing_check_wins() -> None:
    # Short description and a 5-minute window: description length is checked first.
    assert _code("X", "09:00", "09:05") is ValidationCode.DESCRIPTION_LENGTH
    # Bad format takes precedence over ordering.
    assert _code("Reading", "bad", "01:00") is ValidationCode.INVALID_TIME_FORMAT


def test_error_carries_message() -> None:
    err = validate_task_fields("Quick call", "09:00", "09:05")
    assert isinstance(err, ValidationError)
    assert "15" in err.message
    assert str(err).startswith("DURATION_TOO_SHORT")


def test_parse_time_of_day() -> None:
    assert parse_time_of_day(" 07:05 ") == time(7, 5)
    assert parse_time_of_day(time(23, 59)) == time(23, 59)
    with pytest.raises(ValueError):
        parse_time_of_day(time(10, 0, 30))
    with pytest.raises(ValueError):
        parse_time_of_day(700)  # type: ignore[arg-type]


def test_time_objects_are_accepted() -> None:
    assert validate_task_fields("Reading", time(7, 0), time(8, 0)) is None


def test_validate_priority() -> None:
    assert validate_priority(" high ") is Priority.HIGH
    assert validate_priority(Priority.LOW) is Priority.LOW
    err = validate_priority("urgent")
    assert isinstance(err, ValidationError)
    assert err.code is ValidationCode.INVALID_PRIORITY


@pytest.mark.parametrize("value", ["0٧:00", "０７:00", "07:٣٠"])
def test_non_ascii_digits_are_rejected(value: str) -> None:
    assert _code("Reading", value, "08:30") is ValidationCode.INVALID_TIME_FORMAT
