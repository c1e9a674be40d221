"""Rule-based natural-language insights about a schedule."""

from collections import Counter

from .calendar import Event
from .categories import Category, categorize
from .distribution import TimeAnalysis, hours_for, round_half_up, total_hours
from .gaps import ScheduleGap
from .trends import WeeklyBucket

NO_EVENTS_INSIGHT = "No calendar events found. Add some events to get personalized insights."


def peak_hour(events: list[Event]) -> int | None:
    """Most common start hour. Ties go to the hour seen first."""
    counts = Counter(event.start_at().hour for event in events)
    if not counts:
        return None
    hour, _ = counts.most_common(1)[0]
    return hour


def generate_insights(
    distribution: list[TimeAnalysis],
    weekly_trend: list[WeeklyBucket],
    gaps: list[ScheduleGap],
    events: list[Event],
) -> list[str]:
    """
    Produce observations about the schedule, in a fixed rule order.

    Pure function - no I/O. No current rule reads ``weekly_trend``.
    """
    if not events:
        return [NO_EVENTS_INSIGHT]

    insights = []

    # Meeting load, from raw events so counts are not affected by rounding
    meetings = [e for e in events if categorize(e.title) is Category.MEETINGS]
    meeting_hours = sum(e.duration_hours() for e in meetings)

    if len(meetings) > 5:
        insights.append(
            f"You have {len(meetings)} meetings scheduled. Consider blocking focus time between meetings."
        )
    if meeting_hours > 20:
        insights.append(
            f"You're spending {int(round_half_up(meeting_hours))} hours in meetings. "
            "Consider if all meetings are necessary."
        )

    # Work-life balance
    work = hours_for(distribution, Category.WORK)
    personal = hours_for(distribution, Category.PERSONAL)
    health = hours_for(distribution, Category.HEALTH)

    if work > 0 and personal == 0:
        insights.append("No personal time scheduled. Consider adding breaks and personal activities.")
    elif work > personal * 4:
        insights.append("Work hours significantly outweigh personal time. Try to balance your schedule better.")

    if health == 0:
        insights.append("No health activities scheduled. Consider adding exercise or wellness time.")

    hour = peak_hour(events)
    if hour is not None:
        insights.append(
            f"Most scheduled activities are during {hour}:00. This might be your peak productivity time."
        )

    if gaps:
        insights.append(
            f"You have {len(gaps)} time gaps in your schedule. Consider using these for focused work."
        )

    total = total_hours(distribution)
    if total > 0 and work / total * 100 > 80:
        insights.append("Over 80% of your time is work-related. Consider adding more variety to your schedule.")

    return insights
