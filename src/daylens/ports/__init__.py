"""Ports - interfaces/protocols for external dependencies."""

from .calendar_repo import CalendarRepository
from .task_repo import TaskRepository

__all__ = [
    "CalendarRepository",
    "TaskRepository",
]
