"""Shared fixtures: synthetic sources, a recording sink and a manual timer."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from env_panel.sink import PresentationSink
from env_panel.sources import EnvironmentSources


class RecordingSink(PresentationSink):
    """In-memory sink remembering every write."""

    def __init__(self):
        self.texts = {}
        self.emphasis = {}
        self.busy_history = []
        self.writes = []

    def set_text(self, name, text):
        self.texts[name] = text
        self.writes.append(name)

    def set_emphasis(self, name, emphasis):
        self.emphasis[name] = emphasis

    def set_busy(self, busy):
        self.busy_history.append(busy)


class ManualTimer:
    """Stand-in for tkinter's after/after_cancel; callbacks run on demand."""

    def __init__(self):
        self.pending = {}
        self._next = 0

    def after(self, ms, func):
        self._next += 1
        after_id = f"after#{self._next}"
        self.pending[after_id] = (ms, func)
        return after_id

    def after_cancel(self, after_id):
        self.pending.pop(after_id, None)

    def delays(self):
        return sorted(ms for ms, _ in self.pending.values())

    def fire(self, ms=None):
        """Run every pending callback (or only those with delay ``ms``)."""
        due = [(i, f) for i, (d, f) in list(self.pending.items()) if ms is None or d == ms]
        for after_id, func in due:
            self.pending.pop(after_id, None)
            func()
        return len(due)


class FixedClock:
    def __init__(self, instant, tz_key="Europe/Berlin", locale="de_DE"):
        self.instant = instant
        self.timezone = SimpleNamespace(key=tz_key)
        self.locale = locale

    def now(self):
        return self.instant

    def advance(self, seconds):
        self.instant = self.instant + timedelta(seconds=seconds)


class TickingClock(FixedClock):
    """Moves one second forward after every read."""

    def __init__(self, instant, **kwargs):
        super().__init__(instant, **kwargs)
        self.reads = 0

    def now(self):
        self.reads += 1
        instant = self.instant
        self.advance(1)
        return instant


FIXED_INSTANT = datetime(2024, 3, 15, 14, 30, 45, tzinfo=timezone(timedelta(hours=2)))


def make_sources(**overrides):
    values = dict(
        identity=SimpleNamespace(
            user_agent="TestAgent/1.0",
            platform="Linux x86_64",
            language="en-US",
            cookie_enabled=True,
            on_line=True,
            hardware_concurrency=8,
            max_touch_points=0,
        ),
        location=SimpleNamespace(
            hostname="example.com",
            protocol="https:",
            port=8443,
            pathname="/status",
            origin="https://example.com:8443",
            href="https://example.com:8443/status",
        ),
        screen=SimpleNamespace(
            width=1920, height=1080, avail_width=1920, avail_height=1040, color_depth=24,
        ),
        viewport=SimpleNamespace(inner_width=1280, inner_height=720, device_pixel_ratio=2.0),
        performance=SimpleNamespace(memory=SimpleNamespace(
            used_heap_size=1536, total_heap_size=1048576, heap_size_limit=2 * 1024 ** 3,
        )),
        connection={"effective_type": "4g", "downlink": 10},
        storage=SimpleNamespace(local={}, session={}, indexed=True, legacy_sql=False),
        clock=FixedClock(FIXED_INSTANT),
    )
    values.update(overrides)
    return EnvironmentSources(**values)


@pytest.fixture
def sources():
    return make_sources()


@pytest.fixture
def empty_sources():
    return EnvironmentSources()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def timer():
    return ManualTimer()
