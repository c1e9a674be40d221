"""Time distribution across event categories."""

import math
from dataclasses import dataclass

from .calendar import Event
from .categories import PALETTE, Category, categorize


@dataclass
class TimeAnalysis:
    """Aggregated time for one category."""

    category: Category
    hours: float
    percentage: int
    event_count: int
    color: str


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for non-negative values (not banker's rounding)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def analyze_time_distribution(events: list[Event]) -> list[TimeAnalysis]:
    """
    Aggregate event durations by category.

    Pure function - no I/O. Colors follow the order in which categories
    first appear in ``events``; the result is sorted by hours, descending.
    """
    hours_by_category: dict[Category, float] = {}
    counts_by_category: dict[Category, int] = {}

    for event in events:
        category = categorize(event.title)
        hours_by_category[category] = hours_by_category.get(category, 0.0) + event.duration_hours()
        counts_by_category[category] = counts_by_category.get(category, 0) + 1

    total = sum(hours_by_category.values())

    analysis = []
    for index, (category, hours) in enumerate(hours_by_category.items()):
        percentage = int(round_half_up(hours / total * 100)) if total > 0 else 0
        analysis.append(
            TimeAnalysis(
                category=category,
                hours=round_half_up(hours, 2),
                percentage=percentage,
                event_count=counts_by_category[category],
                color=PALETTE[index % len(PALETTE)],
            )
        )

    return sorted(analysis, key=lambda a: a.hours, reverse=True)


def find_entry(distribution: list[TimeAnalysis], category: Category) -> TimeAnalysis | None:
    for entry in distribution:
        if entry.category is category:
            return entry
    return None


def hours_for(distribution: list[TimeAnalysis], category: Category) -> float:
    """Hours recorded for a category, 0 when absent."""
    entry = find_entry(distribution, category)
    return entry.hours if entry else 0.0


def total_hours(distribution: list[TimeAnalysis]) -> float:
    return sum(entry.hours for entry in distribution)
