"""Presentation sink interface and the single writer that feeds it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from .sources import Emphasis


class PresentationSink(ABC):
    """Named text slots the engine writes into. Never read back."""

    @abstractmethod
    def set_text(self, name: str, text: str):
        ...

    @abstractmethod
    def set_emphasis(self, name: str, emphasis: Emphasis):
        """Success/danger styling; only the online-status slot uses it."""
        ...

    @abstractmethod
    def set_busy(self, busy: bool):
        """Show or clear the manual-refresh busy indicator."""
        ...


def write_fields(sink: PresentationSink, fields: Iterable) -> int:
    """Write every DisplayField into its slot. Returns the number written."""
    count = 0
    for field in fields:
        sink.set_text(field.name, field.value)
        if field.emphasis is not None:
            sink.set_emphasis(field.name, field.emphasis)
        count += 1
    return count
