"""Calendar repository interface."""

from typing import Protocol

from daylens.core.calendar import Event


class CalendarRepository(Protocol):
    """Interface for fetching one calendar snapshot from any backend."""

    def fetch_events(self) -> list[Event]:
        """Fetch every event in the snapshot window, each with a known start."""
        ...
