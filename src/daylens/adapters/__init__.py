"""Adapters - I/O implementations of ports."""

from .json_snapshot import JsonSnapshotAdapter, SnapshotError
from .json_tasks import JsonTaskAdapter

__all__ = [
    "JsonSnapshotAdapter",
    "JsonTaskAdapter",
    "SnapshotError",
]
