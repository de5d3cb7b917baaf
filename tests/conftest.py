# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from schedule_organizer.analysis.productivity import AnalyzerSettings, ProductivityAnalyzer
from schedule_organizer.tasks.schedule_manager import ScheduleManager

from .fakes import FakeClock, RecordingObserver


@pytest.fixture()
def settings(tmp_path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AnalyzerSettings.from_settings and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="schedule-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        min_break_minutes=10,
        high_priority_share=50.0,
        max_span_minutes=600,
        short_task_minutes=30,
        max_continuous_work_minutes=120,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture()
def manager(settings: SimpleNamespace, clock: FakeClock, observer: RecordingObserver) -> ScheduleManager:
    """ScheduleManager with a deterministic clock and a recording observer attached."""
    return ScheduleManager(
        analyzer=ProductivityAnalyzer(AnalyzerSettings.from_settings(settings)),
        observers=[observer],
        clock=clock,
    )
