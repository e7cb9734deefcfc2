"""
Pytest configuration and shared fixtures for logweave tests
"""

import pytest
import json
from datetime import datetime, timedelta
from typing import Callable, List

from logweave.models import LogContext, LogDate, LogEvent
from logweave.context.building import LocalTimeline

BASE_TIME = datetime(2024, 3, 1, 10, 0, 0)


def at(seconds: int) -> datetime:
    """Timestamp `seconds` after the fixed test epoch"""
    return BASE_TIME + timedelta(seconds=seconds)


@pytest.fixture
def at_time() -> Callable[[int], datetime]:
    return at


@pytest.fixture
def make_event() -> Callable[..., LogEvent]:
    """Factory for events; `seconds=None` gives an untimed continuation line"""
    def factory(seconds=None, message="msg", pattern="generic",
                file_type="", path="/logs/node1/error.log", **identity) -> LogEvent:
        date = None
        if seconds is not None:
            date = LogDate(at(seconds), at(seconds).strftime("%Y-%m-%d %H:%M:%S"))
        context = LogContext(file_path=path, file_type=file_type, **identity)
        return LogEvent(date=date, context=context, message=message, pattern=pattern)
    return factory


@pytest.fixture
def make_timeline(make_event) -> Callable[..., LocalTimeline]:
    """Timeline of distinct events at the given seconds"""
    def factory(seconds: List[int], path="/logs/node1/error.log", **identity) -> LocalTimeline:
        timeline = LocalTimeline()
        for s in seconds:
            timeline = timeline.add(make_event(s, message=f"event at {s}", path=path, **identity))
        return timeline
    return factory


@pytest.fixture
def segment_files(tmp_path):
    """Two nodes, node1 split over two overlapping segments"""
    def write(path, records):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(json.dumps(r) for r in records) + "\n")
        return path

    def record(second, message, name):
        return {"timestamp": f"2024-03-01 10:00:{second:02d}", "message": message,
                "pattern": message, "names": [name]}

    node1_a = write(tmp_path / "node1" / "error.log.1.jsonl", [
        record(1, "starting", "db-1"),
        record(3, "joined", "db-1"),
        record(4, "ready", "db-1"),
    ])
    node1_b = write(tmp_path / "node1" / "error.log.jsonl", [
        record(3, "joined", "db-1"),
        record(4, "ready", "db-1"),
        record(5, "synced", "db-1"),
    ])
    node2 = write(tmp_path / "node2" / "error.log.jsonl", [
        record(2, "starting", "db-2"),
        record(4, "donor", "db-2"),
    ])
    return [node1_a, node1_b, node2]
