"""Task repository interface."""

from typing import Protocol

from daylens.core.tasks import Task


class TaskRepository(Protocol):
    """Interface for reading the user's task list."""

    def get_all_tasks(self) -> list[Task]:
        """Fetch all tasks, open and completed."""
        ...
