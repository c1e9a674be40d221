"""Functional core - pure schedule analytics with no I/O."""

from .calendar import AllDay, Event, EventTime, Timed, TimeSlot
from .categories import Category, categorize
from .distribution import TimeAnalysis, analyze_time_distribution
from .trends import WeeklyBucket, build_weekly_trend
from .gaps import ScheduleGap, find_gaps, suggest_break, format_break_suggestion
from .insights import generate_insights
from .scoring import calculate_productivity_score, score_label
from .report import AnalyticsReport, AnalyticsSettings, build_report, format_report_sections
from .tasks import Task, completion_streak, completions_by_weekday, most_productive_day_insight

__all__ = [
    # Calendar
    "AllDay",
    "Event",
    "EventTime",
    "Timed",
    "TimeSlot",
    # Categories
    "Category",
    "categorize",
    # Distribution
    "TimeAnalysis",
    "analyze_time_distribution",
    # Trends
    "WeeklyBucket",
    "build_weekly_trend",
    # Gaps
    "ScheduleGap",
    "find_gaps",
    "suggest_break",
    "format_break_suggestion",
    # Insights & score
    "generate_insights",
    "calculate_productivity_score",
    "score_label",
    # Report
    "AnalyticsReport",
    "AnalyticsSettings",
    "build_report",
    "format_report_sections",
    # Tasks
    "Task",
    "completion_streak",
    "completions_by_weekday",
    "most_productive_day_insight",
]
