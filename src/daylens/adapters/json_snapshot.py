"""Calendar snapshot adapter - reads a calendar API export from disk."""

import json
import logging
from datetime import datetime, tzinfo
from pathlib import Path

from daylens.core.calendar import Event, Timed

logger = logging.getLogger(__name__)


class SnapshotError(Exception):
    """Raised when a snapshot file cannot be read or is not an event list."""


class JsonSnapshotAdapter:
    """
    Reads events saved from a calendar API ``events.list`` response.

    Implements CalendarRepository protocol. The file may hold either the raw
    response (``{"items": [...]}``) or a bare list of items.
    """

    def __init__(self, path: Path | str, timezone: tzinfo | None = None):
        self.path = Path(path).expanduser()
        self.timezone = timezone

    def _load_items(self) -> list[dict]:
        if not self.path.exists():
            raise SnapshotError(f"Calendar snapshot not found: {self.path}")
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            raise SnapshotError(f"Calendar snapshot is not valid JSON: {e}") from e

        if isinstance(data, dict):
            data = data.get("items", [])
        if not isinstance(data, list):
            raise SnapshotError("Calendar snapshot must be a list of events or an object with 'items'")
        return data

    def _localize(self, event: Event) -> Event:
        """Attach the configured timezone to naive timed boundaries."""
        if self.timezone is None:
            return event

        def fix(boundary):
            if isinstance(boundary, Timed) and boundary.at.tzinfo is None:
                return Timed(boundary.at.replace(tzinfo=self.timezone))
            return boundary

        return Event(id=event.id, title=event.title, start=fix(event.start), end=fix(event.end))

    def fetch_events(self) -> list[Event]:
        """Parse every item with a usable start; skip the rest."""
        events = []
        for item in self._load_items():
            if not isinstance(item, dict):
                logger.warning(f"Skipping non-object snapshot entry: {item!r}")
                continue
            try:
                event = Event.from_api(item)
            except (ValueError, TypeError) as e:
                logger.warning(f"Skipping event {item.get('id', '?')} with bad timestamp: {e}")
                continue
            if event is None:
                logger.debug(f"Skipping event {item.get('id', '?')} without a start")
                continue
            events.append(self._localize(event))

        logger.debug(f"Loaded {len(events)} events from {self.path}")
        return events
