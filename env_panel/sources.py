"""Environment sources injected into the snapshot engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Emphasis(Enum):
    SUCCESS = "success"
    DANGER = "danger"


@dataclass(frozen=True)
class EnvironmentSources:
    """One handle per information domain. Any of them may be None.

    Sources are read-only objects or mappings whose shape is owned by the
    host. Attribute names the collectors read:

        identity     user_agent, platform, language, cookie_enabled, on_line,
                     hardware_concurrency, max_touch_points
        location     hostname, protocol, port, pathname, origin, href
        screen       width, height, avail_width, avail_height, color_depth
        viewport     inner_width, inner_height, device_pixel_ratio
        performance  memory.used_heap_size, memory.total_heap_size,
                     memory.heap_size_limit
        connection   effective_type, downlink
        storage      local, session, indexed, legacy_sql
        clock        now(), timezone, locale
    """
    identity: Any = None
    location: Any = None
    screen: Any = None
    viewport: Any = None
    performance: Any = None
    connection: Any = None
    storage: Any = None
    clock: Any = None
