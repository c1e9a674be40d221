"""Configuration management for daylens."""

import logging
import os
from dataclasses import dataclass
from datetime import time
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from daylens.core.report import AnalyticsSettings

logger = logging.getLogger(__name__)

DAYLENS_HOME = Path(os.environ.get("DAYLENS_HOME", Path.home() / "daylens"))
CONFIG_FILE = DAYLENS_HOME / "config" / "daylens.conf"
DATA_DIR = DAYLENS_HOME / "data"


@dataclass
class Config:
    """daylens configuration."""

    timezone: str = "America/Toronto"
    work_hours: str = "09:00-18:00"
    min_gap_minutes: int = 60
    min_break_minutes: int = 20
    default_break: str = "12:00-12:30"
    calendar_snapshot: str = ""
    tasks_file: str = ""

    @property
    def tzinfo(self) -> ZoneInfo | None:
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown timezone {self.timezone!r}, using local time")
            return None

    def snapshot_path(self) -> Path:
        if self.calendar_snapshot:
            return Path(self.calendar_snapshot).expanduser()
        return DATA_DIR / "calendar.json"

    def tasks_path(self) -> Path:
        if self.tasks_file:
            return Path(self.tasks_file).expanduser()
        return DATA_DIR / "tasks.json"

    def analytics_settings(self) -> AnalyticsSettings:
        """Translate config strings into core analytics thresholds."""
        settings = AnalyticsSettings(
            min_gap_minutes=self.min_gap_minutes,
            min_break_minutes=self.min_break_minutes,
        )
        try:
            settings.work_start, settings.work_end = parse_time_range(self.work_hours)
        except ValueError:
            logger.warning(f"Invalid WORK_HOURS {self.work_hours!r}, using defaults")
        try:
            settings.default_break = parse_time_range(self.default_break)
        except ValueError:
            logger.warning(f"Invalid DEFAULT_BREAK {self.default_break!r}, using defaults")
        return settings


def parse_time_range(value: str) -> tuple[time, time]:
    """Parse "HH:MM-HH:MM" into two times. Raises ValueError when malformed."""
    start_str, sep, end_str = value.partition("-")
    if not sep:
        raise ValueError(f"Expected HH:MM-HH:MM, got {value!r}")
    start = time.fromisoformat(start_str.strip())
    end = time.fromisoformat(end_str.strip())
    if end <= start:
        raise ValueError(f"Range end must be after start: {value!r}")
    return start, end


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}")
        return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from daylens.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            # Unquoted: strip inline comments
            value = value.split("#")[0].strip()

        match key:
            case "timezone":
                config.timezone = value
            case "work_hours":
                config.work_hours = value
            case "min_gap_minutes":
                config.min_gap_minutes = _parse_int(key, value, config.min_gap_minutes)
            case "min_break_minutes":
                config.min_break_minutes = _parse_int(key, value, config.min_break_minutes)
            case "default_break":
                config.default_break = value
            case "calendar_snapshot":
                config.calendar_snapshot = value
            case "tasks_file":
                config.tasks_file = value
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
