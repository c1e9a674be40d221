"""Task list adapter - reads tasks from a JSON file."""

import json
import logging
from datetime import tzinfo
from pathlib import Path

from daylens.core.tasks import Task

logger = logging.getLogger(__name__)


class JsonTaskAdapter:
    """
    Reads the task list exported by the dashboard.

    Implements TaskRepository protocol. A missing file means no tasks.
    Completion times are reported in ``timezone`` when one is given.
    """

    def __init__(self, path: Path | str, timezone: tzinfo | None = None):
        self.path = Path(path).expanduser()
        self.timezone = timezone

    def get_all_tasks(self) -> list[Task]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse task file {self.path}: {e}")
            return []

        tasks = []
        for item in data if isinstance(data, list) else []:
            try:
                tasks.append(Task.from_dict(item, tz=self.timezone))
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping malformed task {item!r}: {e}")
        return tasks
