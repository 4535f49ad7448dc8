"""Snapshot orchestration. Runs every collector in a fixed order."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterator, Optional

from .collectors import COLLECTORS, DisplayField, collect_last_updated, pin_clock
from .sink import PresentationSink, write_fields
from .sources import EnvironmentSources


@dataclass(frozen=True)
class Snapshot:
    """One complete, immutable set of DisplayFields."""
    fields: tuple[DisplayField, ...] = ()
    taken_at: datetime = field(default_factory=lambda: datetime.now().astimezone())

    def __iter__(self) -> Iterator[DisplayField]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def names(self) -> list[str]:
        return [f.name for f in self.fields]

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        for f in self.fields:
            if f.name == name:
                return f.value
        return default

    def as_dict(self) -> dict[str, str]:
        return {f.name: f.value for f in self.fields}


class SnapshotOrchestrator:
    """Builds whole snapshots from injected environment sources."""

    def __init__(
        self,
        sources: EnvironmentSources,
        collectors: tuple[tuple[str, Callable], ...] = COLLECTORS,
    ):
        self.sources = sources
        self.collectors = collectors

    def collect_all(self) -> Snapshot:
        # one clock read per pass so every time field agrees
        sources, instant = pin_clock(self.sources)
        fields: list[DisplayField] = []
        for _name, collector in self.collectors:
            fields.extend(collector(sources))
        fields.extend(collect_last_updated(sources, instant))
        return Snapshot(fields=tuple(fields), taken_at=instant)

    def refresh(self, sink: PresentationSink) -> Snapshot:
        """Collect a new snapshot and write all of it into ``sink``."""
        snapshot = self.collect_all()
        write_fields(sink, snapshot)
        return snapshot
