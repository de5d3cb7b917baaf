# src/schedule_organizer/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

One Settings object for the whole app. Validation bounds (description length,
task duration) are fixed constants in tasks.task_validator and are not configurable;
only analysis thresholds and local paths live here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "SCHEDULE"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Productivity analysis ----
    min_break_minutes: int
    high_priority_share: float
    max_span_minutes: int
    short_task_minutes: int
    max_continuous_work_minutes: int

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            app_name=_env(_k("APP_NAME"), "schedule-organizer"),
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/schedule")),
            min_break_minutes=_env_int(_k("MIN_BREAK_MINUTES"), 10),
            high_priority_share=_env_float(_k("HIGH_PRIORITY_SHARE"), 50.0),
            max_span_minutes=_env_int(_k("MAX_SPAN_MINUTES"), 10 * 60),
            short_task_minutes=_env_int(_k("SHORT_TASK_MINUTES"), 30),
            max_continuous_work_minutes=_env_int(_k("MAX_CONTINUOUS_WORK_MINUTES"), 120),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
