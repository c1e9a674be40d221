"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta, tzinfo

from .calendar import parse_datetime

WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@dataclass(frozen=True)
class Task:
    """A user-entered task."""

    text: str
    completed: bool = False
    completed_at: datetime | None = None
    due_date: date | None = None
    note: str = ""
    category: str | None = None

    def complete(self, at: datetime) -> "Task":
        """Return a completed copy. Already-completed tasks are returned unchanged."""
        if self.completed:
            return self
        return replace(self, completed=True, completed_at=at)

    def is_overdue(self, as_of: date | None = None) -> bool:
        """Due before ``as_of`` and still open."""
        if self.completed or not self.due_date:
            return False
        as_of = as_of or date.today()
        return self.due_date < as_of

    @classmethod
    def from_dict(cls, data: dict, tz: tzinfo | None = None) -> "Task":
        """Create a Task from a JSON-style mapping.

        Aware completion times are converted to ``tz`` so they count toward
        the local day they happened on.
        """
        completed_at = None
        if data.get("completedAt"):
            completed_at = parse_datetime(data["completedAt"])
            if tz and completed_at.tzinfo:
                completed_at = completed_at.astimezone(tz)
        due = None
        if data.get("dueDate"):
            due = date.fromisoformat(data["dueDate"].split("T")[0])
        return cls(
            text=data["text"],
            completed=bool(data.get("completed", False)),
            completed_at=completed_at,
            due_date=due,
            note=data.get("note") or "",
            category=data.get("category"),
        )


def _weekday_label(d: date) -> str:
    # date.weekday() is Monday-based; the chart starts on Sunday
    return WEEKDAYS[(d.weekday() + 1) % 7]


def completed_tasks(tasks: list[Task]) -> list[Task]:
    """Completed tasks that carry a completion timestamp."""
    return [t for t in tasks if t.completed and t.completed_at]


def completion_streak(tasks: list[Task], today: date | None = None) -> int:
    """
    Count consecutive days, ending today, with at least one completed task.

    Pure function - no I/O.
    """
    today = today or date.today()
    days = {t.completed_at.date() for t in completed_tasks(tasks)}

    streak = 0
    day = today
    while day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak


def completions_by_weekday(tasks: list[Task]) -> dict[str, int]:
    """Completed-task counts keyed Sun..Sat, in that order."""
    counts = {day: 0 for day in WEEKDAYS}
    for task in completed_tasks(tasks):
        counts[_weekday_label(task.completed_at.date())] += 1
    return counts


def most_productive_day(tasks: list[Task]) -> str | None:
    """Weekday with the most completions. Ties go to the earlier day in the week."""
    best, best_count = None, 0
    for day, count in completions_by_weekday(tasks).items():
        if count > best_count:
            best, best_count = day, count
    return best


def most_productive_day_insight(tasks: list[Task]) -> str:
    day = most_productive_day(tasks)
    if day is None:
        return "Complete some tasks to see your productivity insights."
    return f"You're most productive on {day}s!"


def filter_overdue(tasks: list[Task], as_of: date | None = None) -> list[Task]:
    """Filter to overdue tasks only."""
    as_of = as_of or date.today()
    return [t for t in tasks if t.is_overdue(as_of)]
