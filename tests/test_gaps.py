"""Tests for schedule gaps and break suggestions."""

from datetime import date, datetime, time, timedelta, timezone

import pytest

from daylens.core.calendar import AllDay, Event, Timed
from daylens.core.gaps import (
    NO_BREAK_MESSAGE,
    find_gaps,
    format_break_suggestion,
    suggest_break,
)


@pytest.fixture
def today():
    return date(2025, 1, 15)


@pytest.fixture
def make_event(today):
    """Factory for timed events on ``today``."""
    def _make(title: str, start: time, end: time | None, day: date | None = None) -> Event:
        d = day or today
        return Event(
            id=f"{title}-{start}",
            title=title,
            start=Timed(datetime.combine(d, start)),
            end=Timed(datetime.combine(d, end)) if end else None,
        )
    return _make


class TestFindGaps:
    def test_no_events(self):
        assert find_gaps([]) == []

    def test_single_event(self, make_event):
        assert find_gaps([make_event("Sync", time(9), time(10))]) == []

    def test_gap_above_threshold(self, make_event, today):
        events = [
            make_event("Lunch", time(12, 30), time(13)),
            make_event("Standup", time(9), time(10)),
            make_event("Review", time(11, 30), time(12)),
        ]
        gaps = find_gaps(events)
        assert len(gaps) == 1
        assert gaps[0].start == datetime.combine(today, time(10))
        assert gaps[0].end == datetime.combine(today, time(11, 30))
        assert gaps[0].duration_minutes() == 90

    def test_exact_threshold_not_reported(self, make_event):
        events = [make_event("A", time(9), time(10)), make_event("B", time(11), time(12))]
        assert find_gaps(events) == []
        assert len(find_gaps(events, min_gap_minutes=59)) == 1

    def test_all_day_events_ignored(self, make_event, today):
        events = [
            Event(id="h", title="Holiday", start=AllDay(today)),
            make_event("A", time(9), time(10)),
        ]
        assert find_gaps(events) == []

    def test_missing_end_uses_start(self, make_event, today):
        events = [make_event("Reminder", time(9), None), make_event("B", time(11), time(12))]
        gaps = find_gaps(events)
        assert gaps[0].start == datetime.combine(today, time(9))

    def test_gaps_stay_between_events(self, make_event):
        events = [
            make_event("A", time(8), time(9)),
            make_event("B", time(13), time(14)),
        ]
        first_start = events[0].start.at
        last_end = events[-1].end.at
        for gap in find_gaps(events):
            assert gap.start >= first_start
            assert gap.end <= last_end


class TestSuggestBreak:
    def test_default_when_no_events(self, today):
        slot = suggest_break([], today)
        assert slot.start == datetime.combine(today, time(12))
        assert slot.end == datetime.combine(today, time(12, 30))
        assert format_break_suggestion(slot) == "12:00 PM - 12:30 PM"

    def test_default_when_only_other_days(self, make_event, today):
        events = [make_event("Sync", time(10), time(11), day=today + timedelta(days=1))]
        assert format_break_suggestion(suggest_break(events, today)) == "12:00 PM - 12:30 PM"

    def test_default_when_only_all_day(self, today):
        events = [Event(id="h", title="Holiday", start=AllDay(today))]
        assert format_break_suggestion(suggest_break(events, today)) == "12:00 PM - 12:30 PM"

    def test_trailing_gap_wins_when_largest(self, make_event, today):
        events = [
            make_event("Gym workout", time(7), time(8)),
            make_event("Client project review", time(10), time(12)),
        ]
        slot = suggest_break(events, today)
        assert format_break_suggestion(slot) == "12:00 PM - 06:00 PM"

    def test_gap_before_event(self, make_event, today):
        events = [
            make_event("Gym workout", time(7), time(8)),
            make_event("Client project review", time(10), time(12)),
            make_event("Office hours", time(12), time(18)),
        ]
        slot = suggest_break(events, today)
        assert format_break_suggestion(slot) == "08:00 AM - 10:00 AM"
        assert slot.duration_minutes() == 120

    def test_no_break_found(self, make_event, today):
        events = [
            make_event("Deep work", time(9), time(12)),
            make_event("Client calls", time(12, 10), time(18)),
        ]
        slot = suggest_break(events, today)
        assert slot is None
        assert format_break_suggestion(slot) == NO_BREAK_MESSAGE

    def test_threshold_is_inclusive(self, make_event, today):
        events = [make_event("Work block", time(9, 20), time(18))]
        slot = suggest_break(events, today)
        assert slot.start == datetime.combine(today, time(9))
        assert slot.end == datetime.combine(today, time(9, 20))

    def test_ties_keep_first(self, make_event, today):
        events = [
            make_event("A", time(9, 30), time(12)),
            make_event("B", time(12, 30), time(18)),
        ]
        slot = suggest_break(events, today)
        assert slot.start == datetime.combine(today, time(9))

    def test_custom_workday(self, make_event, today):
        events = [make_event("Sync", time(8), time(16))]
        slot = suggest_break(events, today, work_start=time(8), work_end=time(17))
        assert format_break_suggestion(slot) == "04:00 PM - 05:00 PM"

    def test_timezone_follows_events(self, today):
        tz = timezone(timedelta(hours=-5))
        event = Event(
            id="1",
            title="Sync",
            start=Timed(datetime.combine(today, time(9), tzinfo=tz)),
            end=Timed(datetime.combine(today, time(17), tzinfo=tz)),
        )
        slot = suggest_break([event], today)
        assert slot.start == datetime.combine(today, time(17), tzinfo=tz)
        assert slot.end == datetime.combine(today, time(18), tzinfo=tz)
