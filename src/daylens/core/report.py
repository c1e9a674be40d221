"""Pure analytics report assembly - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, datetime, time

from .calendar import Event, TimeSlot
from .categories import Category
from .distribution import (
    TimeAnalysis,
    analyze_time_distribution,
    find_entry,
    hours_for,
    round_half_up,
    total_hours,
)
from .gaps import ScheduleGap, find_gaps, format_break_suggestion, suggest_break
from .insights import generate_insights
from .scoring import calculate_productivity_score, score_label
from .trends import WeeklyBucket, build_weekly_trend, has_activity


@dataclass
class AnalyticsSettings:
    """Tunable thresholds for one analytics pass."""

    work_start: time = time(9, 0)
    work_end: time = time(18, 0)
    min_gap_minutes: int = 60
    min_break_minutes: int = 20
    default_break: tuple[time, time] = (time(12, 0), time(12, 30))


@dataclass
class QuickStats:
    total_hours: float
    meeting_count: int
    learning_hours: float


@dataclass
class AnalyticsReport:
    """View model handed to the rendering layer."""

    category_breakdown: list[TimeAnalysis]
    weekly_trend: list[WeeklyBucket]
    productivity_score: int
    insights: list[str]
    break_slot: TimeSlot | None
    gaps: list[ScheduleGap] = field(default_factory=list)

    @property
    def break_suggestion(self) -> str:
        return format_break_suggestion(self.break_slot)

    @property
    def score_label(self) -> str:
        return score_label(self.productivity_score)

    @property
    def quick_stats(self) -> QuickStats:
        return quick_stats(self.category_breakdown)

    def to_dict(self) -> dict:
        """JSON-ready representation."""
        stats = self.quick_stats
        return {
            "categoryBreakdown": [
                {
                    "category": a.category.value,
                    "hours": a.hours,
                    "percentage": a.percentage,
                    "events": a.event_count,
                    "color": a.color,
                }
                for a in self.category_breakdown
            ],
            "weeklyTrend": [
                {
                    "week": w.week_label,
                    "workHours": w.work_hours,
                    "personalHours": w.personal_hours,
                    "meetings": w.meeting_hours,
                    "productivity": w.productivity,
                }
                for w in self.weekly_trend
            ],
            "productivityScore": self.productivity_score,
            "insights": list(self.insights),
            "breakSuggestion": self.break_suggestion,
            "quickStats": {
                "totalHours": stats.total_hours,
                "meetingCount": stats.meeting_count,
                "learningHours": stats.learning_hours,
            },
        }


def quick_stats(distribution: list[TimeAnalysis]) -> QuickStats:
    meetings = find_entry(distribution, Category.MEETINGS)
    return QuickStats(
        total_hours=round_half_up(total_hours(distribution), 1),
        meeting_count=meetings.event_count if meetings else 0,
        learning_hours=hours_for(distribution, Category.LEARNING),
    )


def build_report(
    events: list[Event],
    now: datetime,
    day: date | None = None,
    settings: AnalyticsSettings | None = None,
) -> AnalyticsReport:
    """
    Run the full analytics pass over one event snapshot.

    Pure function - no I/O. ``now`` anchors the weekly windows; ``day``
    (defaults to ``now``'s date) selects the day for the break suggestion.
    ``now`` must be timezone-aware whenever the events are.
    """
    settings = settings or AnalyticsSettings()
    day = day or now.date()

    distribution = analyze_time_distribution(events)
    trend = build_weekly_trend(events, now)
    gaps = find_gaps(events, min_gap_minutes=settings.min_gap_minutes)

    return AnalyticsReport(
        category_breakdown=distribution,
        weekly_trend=trend,
        productivity_score=calculate_productivity_score(distribution),
        insights=generate_insights(distribution, trend, gaps, events),
        break_slot=suggest_break(
            events,
            day,
            work_start=settings.work_start,
            work_end=settings.work_end,
            min_break_minutes=settings.min_break_minutes,
            default_break=settings.default_break,
            tz=now.tzinfo,
        ),
        gaps=gaps,
    )


def format_breakdown_line(entry: TimeAnalysis) -> str:
    return f"- {entry.category.value}: {entry.hours}h ({entry.percentage}%, {entry.event_count} events)"


def format_week_line(week: WeeklyBucket) -> str:
    return (
        f"- {week.week_label}: work {week.work_hours}h, personal {week.personal_hours}h, "
        f"meetings {week.meeting_hours}h ({week.productivity}% productive)"
    )


def format_report_sections(report: AnalyticsReport) -> dict[str, str]:
    """
    Format a report into display sections.

    Pure function - no I/O.
    Returns dict with keys: score, breakdown, trend, insights, break, stats
    """
    breakdown_md = "\n".join(format_breakdown_line(a) for a in report.category_breakdown) or "No data available."

    if has_activity(report.weekly_trend):
        trend_md = "\n".join(format_week_line(w) for w in report.weekly_trend)
    else:
        trend_md = "No weekly data available."

    insights_md = "\n".join(f"- {i}" for i in report.insights) or "No insights yet."

    break_md = report.break_suggestion
    if report.break_slot:
        break_md = f"Suggested break: {break_md}"

    stats = report.quick_stats
    stats_md = f"""- Total hours: {stats.total_hours:.1f}h
- Meetings: {stats.meeting_count}
- Learning: {stats.learning_hours}h"""

    return {
        "score": f"{report.productivity_score}% - {report.score_label}",
        "breakdown": breakdown_md,
        "trend": trend_md,
        "insights": insights_md,
        "break": break_md,
        "stats": stats_md,
    }
