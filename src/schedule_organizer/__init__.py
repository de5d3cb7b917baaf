"""Task scheduling and conflict-detection core of the daily schedule organizer."""

from .analysis.productivity import AnalysisResult, ProductivityAnalyzer
from .core.errors import ConflictError, NotFoundError, ValidationCode, ValidationError
from .tasks.schedule_manager import ScheduleManager
from .tasks.task_models import Priority, Task, TaskStatus

__all__ = [
    "AnalysisResult",
    "ConflictError",
    "NotFoundError",
    "Priority",
    "ProductivityAnalyzer",
    "ScheduleManager",
    "Task",
    "TaskStatus",
    "ValidationCode",
    "ValidationError",
]
