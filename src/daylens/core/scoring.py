"""Heuristic productivity score."""

from .categories import Category
from .distribution import TimeAnalysis, find_entry, hours_for


def calculate_productivity_score(distribution: list[TimeAnalysis]) -> int:
    """
    Score how well time allocation matches target ranges, 0-100.

    Pure function - no I/O.
    """
    if not distribution:
        return 0

    work = hours_for(distribution, Category.WORK)
    meetings = hours_for(distribution, Category.MEETINGS)
    learning = hours_for(distribution, Category.LEARNING)

    score = 0
    if 30 <= work <= 50:  # Optimal work hours
        score += 30
    if meetings <= work * 0.3:
        score += 25
    if learning >= 5:
        score += 20
    if find_entry(distribution, Category.HEALTH) is not None:
        score += 15
    if find_entry(distribution, Category.PERSONAL) is not None:
        score += 10

    return min(score, 100)


def score_label(score: int) -> str:
    """Short verdict shown next to the score."""
    if score >= 80:
        return "Excellent! You're maintaining great work-life balance."
    elif score >= 60:
        return "Good progress! Consider optimizing your schedule."
    else:
        return "Room for improvement. Focus on time management and breaks."
