"""Safe attribute access against host-provided environment sources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import AttributeUnavailable


def _absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value)


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        return current[segment]
    return getattr(current, segment)


def lookup(source: Any, path: str) -> Any:
    """Walk ``path`` left to right and return the value it names.

    Segments are read as keys on mappings and as attributes on anything
    else. Raises AttributeUnavailable when the source or any value on the
    way is absent, or when reading a segment raises.
    """
    current = source
    for segment in path.split("."):
        if _absent(current):
            raise AttributeUnavailable(path, f"nothing before '{segment}'")
        try:
            current = _step(current, segment)
        except Exception as e:
            raise AttributeUnavailable(path, str(e) or type(e).__name__) from e
    if _absent(current):
        raise AttributeUnavailable(path, "empty value")
    return current


def resolve(source: Any, path: str, fallback: Any = "Not available") -> Any:
    """Return the value at ``path`` or ``fallback``. Never raises.

    Zero and False are real values here; fields where zero means
    "unavailable" must check for it themselves.
    """
    try:
        return lookup(source, path)
    except AttributeUnavailable:
        return fallback
