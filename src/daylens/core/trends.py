"""Weekly trend buckets over the trailing eight weeks."""

from dataclasses import dataclass
from datetime import datetime, time, timedelta

from .calendar import Event
from .categories import Category, categorize
from .distribution import round_half_up

WEEKS = 8


@dataclass
class WeeklyBucket:
    """Work, personal and meeting hours for one 7-day window."""

    week_label: str
    work_hours: float
    personal_hours: float
    meeting_hours: float
    productivity: int


def week_windows(now: datetime, weeks: int = WEEKS) -> list[tuple[datetime, datetime]]:
    """Trailing [start, end) windows, oldest first, the last one starting at today's midnight."""
    midnight = datetime.combine(now.date(), time(0, 0), tzinfo=now.tzinfo)
    windows = []
    for i in range(weeks - 1, -1, -1):
        week_start = midnight - timedelta(days=i * 7)
        windows.append((week_start, week_start + timedelta(days=7)))
    return windows


def build_weekly_trend(events: list[Event], now: datetime) -> list[WeeklyBucket]:
    """
    Bucket events into the eight trailing weekly windows ending at ``now``.

    Pure function - no I/O. Only Work, Personal and Meetings hours are tracked.
    """
    tz = now.tzinfo
    buckets = []

    for week_start, week_end in week_windows(now):
        work = personal = meetings = 0.0

        for event in events:
            if not week_start <= event.start_at(tz) < week_end:
                continue
            category = categorize(event.title)
            if category is Category.WORK:
                work += event.duration_hours()
            elif category is Category.PERSONAL:
                personal += event.duration_hours()
            elif category is Category.MEETINGS:
                meetings += event.duration_hours()

        tracked = work + personal + meetings
        productivity = min(100.0, max(0.0, work / tracked * 100)) if tracked > 0 else 0.0

        buckets.append(
            WeeklyBucket(
                week_label=f"{week_start.strftime('%b')} {week_start.day}",
                work_hours=round_half_up(work, 2),
                personal_hours=round_half_up(personal, 2),
                meeting_hours=round_half_up(meetings, 2),
                productivity=int(round_half_up(productivity)),
            )
        )

    return buckets


def has_activity(trend: list[WeeklyBucket]) -> bool:
    """True when any week has work or personal hours."""
    return any(week.work_hours > 0 or week.personal_hours > 0 for week in trend)
