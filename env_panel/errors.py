"""Error types for the Environment Panel."""

from __future__ import annotations


class AttributeUnavailable(Exception):
    """An environment attribute could not be read.

    Raised when a source is absent, a path segment is missing or a capability
    probe fails. Always recovered by the accessor or the collector that asked.
    """

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Attribute unavailable: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
