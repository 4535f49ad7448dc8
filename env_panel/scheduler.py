"""Update scheduler: drives re-collection from load, timer and host events."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, Iterator, Optional

from .collectors import collect_current_time, collect_online_status, collect_viewport_size
from .sink import PresentationSink, write_fields
from .snapshot import Snapshot, SnapshotOrchestrator

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000
REFRESH_FLOOR_MS = 500  # minimum visible busy time for a manual refresh


class SchedulerState(Enum):
    IDLE = "idle"
    REFRESHING = "refreshing"


class UpdateScheduler:
    """Routes each trigger to the smallest re-collection that serves it.

    ``timer`` needs tkinter's ``after(ms, func)`` and ``after_cancel(id)``;
    a Tk root works as is.
    """

    def __init__(
        self,
        orchestrator: SnapshotOrchestrator,
        sink: PresentationSink,
        timer: Any,
    ):
        self.orchestrator = orchestrator
        self.sink = sink
        self.timer = timer
        self._active = 0
        self._tick_id: Optional[Any] = None
        self._refresh_id: Optional[Any] = None

    @property
    def state(self) -> SchedulerState:
        return SchedulerState.REFRESHING if self._active else SchedulerState.IDLE

    @property
    def refresh_pending(self) -> bool:
        return self._refresh_id is not None

    @contextmanager
    def _refreshing(self) -> Iterator[None]:
        self._active += 1
        try:
            yield
        finally:
            self._active -= 1

    # ── Triggers ──
    def on_load(self) -> Snapshot:
        logger.debug("load: full refresh")
        snapshot = self._full_refresh()
        self._schedule_tick()
        return snapshot

    def on_tick(self):
        self._tick_id = None
        with self._refreshing():
            write_fields(self.sink, collect_current_time(self.orchestrator.sources))
        self._schedule_tick()

    def on_connectivity_change(self):
        logger.debug("connectivity changed")
        with self._refreshing():
            write_fields(self.sink, collect_online_status(self.orchestrator.sources))

    def on_resize(self):
        with self._refreshing():
            write_fields(self.sink, collect_viewport_size(self.orchestrator.sources))

    def request_refresh(self) -> bool:
        """Manual refresh with a busy floor. False if one is already pending."""
        if self._refresh_id is not None:
            return False
        logger.debug("manual refresh requested")
        self._active += 1
        self.sink.set_busy(True)
        self._refresh_id = self.timer.after(REFRESH_FLOOR_MS, self._finish_manual_refresh)
        return True

    def stop(self):
        was_pending = self.refresh_pending
        for attr in ("_tick_id", "_refresh_id"):
            after_id = getattr(self, attr)
            if after_id is not None:
                self.timer.after_cancel(after_id)
                setattr(self, attr, None)
        self._active = 0
        if was_pending:
            self.sink.set_busy(False)

    # ── Internals ──
    def _full_refresh(self) -> Snapshot:
        with self._refreshing():
            return self.orchestrator.refresh(self.sink)

    def _finish_manual_refresh(self):
        self._refresh_id = None
        try:
            self._full_refresh()
        finally:
            self._active -= 1
            self.sink.set_busy(False)

    def _schedule_tick(self):
        if self._tick_id is None:
            self._tick_id = self.timer.after(TICK_INTERVAL_MS, self.on_tick)
