"""Keyword-based event categorization."""

from enum import Enum


class Category(Enum):
    """Fixed taxonomy of event categories."""

    WORK = "Work"
    PERSONAL = "Personal"
    HEALTH = "Health"
    LEARNING = "Learning"
    MEETINGS = "Meetings"
    BREAK = "Break"
    OTHER = "Other"


PALETTE = [
    "#3B82F6",
    "#10B981",
    "#F59E0B",
    "#EF4444",
    "#8B5CF6",
    "#06B6D4",
    "#84CC16",
    "#F97316",
]

# Evaluated top to bottom; the first matching category wins.
# Fitness terms appear under both Work and Health; Work wins.
CATEGORY_RULES: list[tuple[Category, tuple[str, ...]]] = [
    (
        Category.WORK,
        ("work", "project", "client", "business", "office",
         "workout", "exercise", "gym", "fitness", "health"),
    ),
    (
        Category.PERSONAL,
        ("personal", "family", "friend", "social", "dinner", "lunch", "coffee", "date"),
    ),
    (
        Category.HEALTH,
        ("workout", "exercise", "gym", "fitness", "health", "doctor", "medical", "therapy"),
    ),
    (
        Category.LEARNING,
        ("study", "course", "learning", "training", "workshop", "seminar", "conference", "reading"),
    ),
    (
        Category.MEETINGS,
        ("meeting", "call", "conference", "standup", "review", "sync"),
    ),
    (
        Category.BREAK,
        ("break", "lunch", "dinner", "coffee", "rest", "pause"),
    ),
]


def categorize(title: str | None) -> Category:
    """
    Map an event title to a category.

    Pure function - no I/O. Never fails: unmatched titles are Other.
    """
    lowered = (title or "").lower()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return Category.OTHER
