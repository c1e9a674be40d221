"""Schedule gaps and break suggestions."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo

from .calendar import Event, TimeSlot, timed_events

NO_BREAK_MESSAGE = "No optimal break found in your schedule today. Try to take a break between meetings!"


@dataclass
class ScheduleGap(TimeSlot):
    """An idle interval between two consecutive timed events."""


def find_gaps(events: list[Event], min_gap_minutes: int = 60) -> list[ScheduleGap]:
    """
    Find idle intervals longer than ``min_gap_minutes`` between timed events.

    Pure function - no I/O. Only gaps between consecutive events are
    reported, never before the first or after the last one.
    """
    threshold = timedelta(minutes=min_gap_minutes)
    ordered = timed_events(events)

    gaps = []
    for current, following in zip(ordered, ordered[1:]):
        gap_start = current.end_at()
        gap_end = following.start_at()
        if gap_end - gap_start > threshold:
            gaps.append(ScheduleGap(start=gap_start, end=gap_end))
    return gaps


def suggest_break(
    events: list[Event],
    day: date,
    work_start: time = time(9, 0),
    work_end: time = time(18, 0),
    min_break_minutes: int = 20,
    default_break: tuple[time, time] = (time(12, 0), time(12, 30)),
    tz: tzinfo | None = None,
) -> TimeSlot | None:
    """
    Pick the single longest free window inside the workday on ``day``.

    Pure function - no I/O. Returns the default window when ``day`` has no
    timed events, and None when no window reaches ``min_break_minutes``.
    """
    todays = [e for e in timed_events(events) if e.start.at.date() == day]

    if not todays:
        return TimeSlot(
            start=datetime.combine(day, default_break[0], tzinfo=tz),
            end=datetime.combine(day, default_break[1], tzinfo=tz),
        )

    # Workday boundaries follow the events' timezone
    day_tz = todays[0].start.at.tzinfo
    day_start = datetime.combine(day, work_start, tzinfo=day_tz)
    day_end = datetime.combine(day, work_end, tzinfo=day_tz)
    threshold = timedelta(minutes=min_break_minutes)

    best: TimeSlot | None = None
    last_end = day_start

    for event in todays:
        gap = event.start.at - last_end
        if gap >= threshold and (best is None or gap > best.end - best.start):
            best = TimeSlot(start=last_end, end=event.start.at)
        last_end = event.end_at()

    trailing = day_end - last_end
    if trailing >= threshold and (best is None or trailing > best.end - best.start):
        best = TimeSlot(start=last_end, end=day_end)

    return best


def format_break_suggestion(slot: TimeSlot | None) -> str:
    """Render a break window on a 12-hour clock, or the no-break message."""
    if slot is None:
        return NO_BREAK_MESSAGE
    return slot.format_12h()
