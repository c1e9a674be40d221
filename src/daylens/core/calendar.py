"""Pure calendar domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo

NO_TITLE = "(No Title)"


@dataclass(frozen=True)
class Timed:
    """An event boundary with a precise time of day."""

    at: datetime

    def to_datetime(self, tz: tzinfo | None = None) -> datetime:
        return self.at


@dataclass(frozen=True)
class AllDay:
    """An event boundary given as a calendar date only."""

    day: date

    def to_datetime(self, tz: tzinfo | None = None) -> datetime:
        """Local midnight of the day, in ``tz`` when given."""
        return datetime.combine(self.day, time(0, 0), tzinfo=tz)


EventTime = Timed | AllDay


@dataclass(frozen=True)
class Event:
    """A calendar event as supplied by the calendar collaborator."""

    id: str
    title: str
    start: EventTime
    end: EventTime | None = None

    @property
    def is_timed(self) -> bool:
        return isinstance(self.start, Timed)

    @property
    def display_title(self) -> str:
        return self.title or NO_TITLE

    def start_at(self, tz: tzinfo | None = None) -> datetime:
        """Start as a datetime. All-day starts resolve to midnight in ``tz``."""
        return self.start.to_datetime(tz)

    def end_at(self, tz: tzinfo | None = None) -> datetime:
        """Effective end: the end if present, otherwise the start."""
        if self.end is None:
            return self.start_at(tz)
        return self.end.to_datetime(tz)

    def duration_hours(self) -> float:
        """Duration in hours. Missing end or a negative span counts as zero."""
        if self.end is None:
            return 0.0
        tz = self.start.at.tzinfo if isinstance(self.start, Timed) else None
        if tz is None and isinstance(self.end, Timed):
            tz = self.end.at.tzinfo
        seconds = (self.end_at(tz) - self.start_at(tz)).total_seconds()
        return max(seconds, 0.0) / 3600

    @classmethod
    def from_api(cls, data: dict) -> "Event | None":
        """Create an Event from a calendar API item.

        Returns None when the item has no determinable start.
        """
        start = _parse_boundary(data.get("start") or {})
        if start is None:
            return None
        return cls(
            id=str(data.get("id", "")),
            title=data.get("summary") or "",
            start=start,
            end=_parse_boundary(data.get("end") or {}),
        )


def _parse_boundary(raw: dict) -> EventTime | None:
    if raw.get("dateTime"):
        return Timed(parse_datetime(raw["dateTime"]))
    if raw.get("date"):
        return AllDay(date.fromisoformat(raw["date"]))
    return None


def parse_datetime(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, accepting a trailing Z for UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass
class TimeSlot:
    """A span of free time."""

    start: datetime
    end: datetime

    def duration_minutes(self) -> int:
        return int((self.end - self.start).total_seconds() / 60)

    def format(self) -> str:
        return f"{self.start.strftime('%H:%M')}-{self.end.strftime('%H:%M')} ({self.duration_minutes()} min)"

    def format_12h(self) -> str:
        return f"{self.start.strftime('%I:%M %p')} - {self.end.strftime('%I:%M %p')}"


def timed_events(events: list[Event]) -> list[Event]:
    """Timed (non-all-day) events sorted by start."""
    return sorted((e for e in events if e.is_timed), key=lambda e: e.start.at)

