"""Tests for the JSON file adapters."""

import json
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from daylens.adapters import JsonSnapshotAdapter, JsonTaskAdapter, SnapshotError
from daylens.core.calendar import AllDay


@pytest.fixture
def snapshot(tmp_path):
    def _write(data) -> str:
        path = tmp_path / "calendar.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return str(path)
    return _write


class TestJsonSnapshotAdapter:
    def test_reads_items_object(self, snapshot):
        path = snapshot(
            {
                "items": [
                    {
                        "id": "1",
                        "summary": "Standup",
                        "start": {"dateTime": "2025-01-15T10:00:00-05:00"},
                        "end": {"dateTime": "2025-01-15T10:30:00-05:00"},
                    },
                    {"id": "2", "summary": "Holiday", "start": {"date": "2025-01-16"}, "end": {"date": "2025-01-17"}},
                ]
            }
        )
        events = JsonSnapshotAdapter(path).fetch_events()
        assert [e.title for e in events] == ["Standup", "Holiday"]
        assert events[1].start == AllDay(date(2025, 1, 16))

    def test_reads_bare_list(self, snapshot):
        path = snapshot([{"id": "1", "summary": "Sync", "start": {"dateTime": "2025-01-15T10:00:00Z"}}])
        assert len(JsonSnapshotAdapter(path).fetch_events()) == 1

    def test_skips_items_without_start(self, snapshot):
        path = snapshot(
            [
                {"id": "1", "summary": "No start"},
                {"id": "2", "summary": "Empty start", "start": {}},
                {"id": "3", "summary": "Good", "start": {"date": "2025-01-15"}},
            ]
        )
        events = JsonSnapshotAdapter(path).fetch_events()
        assert [e.id for e in events] == ["3"]

    def test_skips_bad_timestamps(self, snapshot):
        path = snapshot(
            [
                {"id": "1", "start": {"dateTime": "yesterday-ish"}},
                {"id": "2", "start": {"dateTime": "2025-01-15T10:00:00+00:00"}},
                "not an object",
            ]
        )
        events = JsonSnapshotAdapter(path).fetch_events()
        assert [e.id for e in events] == ["2"]

    def test_localizes_naive_times(self, snapshot):
        tz = timezone(timedelta(hours=-5))
        path = snapshot([{"id": "1", "start": {"dateTime": "2025-01-15T10:00:00"}}])
        events = JsonSnapshotAdapter(path, timezone=tz).fetch_events()
        assert events[0].start.at == datetime(2025, 1, 15, 10, tzinfo=tz)

    def test_keeps_explicit_offsets(self, snapshot):
        tz = timezone(timedelta(hours=-5))
        path = snapshot([{"id": "1", "start": {"dateTime": "2025-01-15T10:00:00+01:00"}}])
        events = JsonSnapshotAdapter(path, timezone=tz).fetch_events()
        assert events[0].start.at.utcoffset() == timedelta(hours=1)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SnapshotError, match="not found"):
            JsonSnapshotAdapter(tmp_path / "missing.json").fetch_events()

    def test_invalid_json(self, snapshot):
        with pytest.raises(SnapshotError, match="not valid JSON"):
            JsonSnapshotAdapter(snapshot("{nope")).fetch_events()

    def test_wrong_shape(self, snapshot):
        with pytest.raises(SnapshotError):
            JsonSnapshotAdapter(snapshot({"items": "nope"})).fetch_events()


class TestJsonTaskAdapter:
    def test_missing_file_means_no_tasks(self, tmp_path):
        assert JsonTaskAdapter(tmp_path / "tasks.json").get_all_tasks() == []

    def test_reads_tasks(self, tmp_path):
        path = tmp_path / "tasks.json"
        path.write_text(
            json.dumps(
                [
                    {"text": "Write report", "completed": True, "completedAt": "2025-01-15T10:00:00"},
                    {"text": "Pay bill", "dueDate": "2025-01-10"},
                    {"completed": True},
                ]
            )
        )
        tasks = JsonTaskAdapter(path).get_all_tasks()
        assert [t.text for t in tasks] == ["Write report", "Pay bill"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "tasks.json"
        path.write_text("[")
        assert JsonTaskAdapter(path).get_all_tasks() == []

    def test_completion_times_in_local_timezone(self, tmp_path):
        toronto = ZoneInfo("America/Toronto")
        path = tmp_path / "tasks.json"
        path.write_text(
            json.dumps([{"text": "Evening review", "completed": True, "completedAt": "2025-01-16T02:00:00.000Z"}])
        )
        tasks = JsonTaskAdapter(path, timezone=toronto).get_all_tasks()
        assert len(tasks) == 1
        assert tasks[0].completed_at.date() == date(2025, 1, 15)
