"""Attribute collectors, one per information domain.

Each collector reads its sources through the safe accessor and returns a
tuple of DisplayFields. Collectors never write anywhere and never raise for
missing data: absence always becomes a sentinel string.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Iterator, Optional

from .accessor import lookup, resolve
from .errors import AttributeUnavailable
from .formatting import (
    CURRENT_TIME_STYLE,
    LAST_UPDATED_STYLE,
    format_boolean,
    format_bytes,
    format_datetime,
    format_number,
    format_utc_offset,
    locale_tag,
    minutes_west_of_utc,
    parse_locale,
)
from .sources import Emphasis, EnvironmentSources

UNKNOWN = "Unknown"
NOT_AVAILABLE = "Not available"
AVAILABLE = "Available"
AVAILABLE_DEPRECATED = "Available (Deprecated)"
PROBE_KEY = "__test__"
PROBE_VALUE = "test"


@dataclass(frozen=True)
class DisplayField:
    """A finished (name, text) pair ready for the presentation sink."""
    name: str
    value: str
    emphasis: Optional[Emphasis] = None

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise ValueError(f"DisplayField '{self.name}' needs a non-empty string value")


def _text(source: Any, path: str, fallback: str) -> str:
    return str(resolve(source, path, fallback))


def _pair(source: Any, width_path: str, height_path: str) -> str:
    width = resolve(source, width_path, None)
    height = resolve(source, height_path, None)
    if width is None or height is None:
        return UNKNOWN
    return f"{width} x {height}"


def current_instant(sources: EnvironmentSources) -> datetime:
    now = resolve(sources.clock, "now", None)
    if callable(now):
        try:
            instant = now()
        except Exception:
            instant = None
        if isinstance(instant, datetime):
            return instant if instant.tzinfo else instant.astimezone()
    return datetime.now().astimezone()


class PinnedClock:
    """Clock view whose ``now()`` always answers one fixed instant.

    Every other attribute is read from the wrapped clock.
    """

    def __init__(self, clock: Any, instant: datetime):
        self._clock = clock
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return lookup(self._clock, name)
        except AttributeUnavailable as e:
            raise AttributeError(name) from e


def pin_clock(sources: EnvironmentSources) -> tuple[EnvironmentSources, datetime]:
    """Read the clock once and return sources that keep answering that instant."""
    instant = current_instant(sources)
    return replace(sources, clock=PinnedClock(sources.clock, instant)), instant


def _language(sources: EnvironmentSources) -> Optional[str]:
    return resolve(sources.identity, "language", None)


# ── Identity ───────────────────────────────────────────────────────────
def collect_online_status(sources: EnvironmentSources) -> tuple[DisplayField, ...]:
    online = bool(resolve(sources.identity, "on_line", False))
    return (
        DisplayField(
            "online_status",
            format_boolean(online, "Online", "Offline"),
            Emphasis.SUCCESS if online else Emphasis.DANGER,
        ),
    )


def collect_identity(sources: EnvironmentSources) -> tuple[DisplayField, ...]:
    identity = sources.identity
    cookies = bool(resolve(identity, "cookie_enabled", False))
    return (
        DisplayField("user_agent", _text(identity, "user_agent", UNKNOWN)),
        DisplayField("platform", _text(identity, "platform", UNKNOWN)),
        DisplayField("language", _text(identity, "language", UNKNOWN)),
        DisplayField("cookies_enabled", format_boolean(cookies, "Yes", "No")),
    ) + collect_online_status(sources)


# ── Location ───────────────────────────────────────────────────────────
def collect_location(sources: EnvironmentSources) -> tuple[DisplayField, ...]:
    location = sources.location
    return (
        DisplayField("hostname", _text(location, "hostname", "localhost")),
        DisplayField("protocol", _text(location, "protocol", UNKNOWN)),
        DisplayField("port", _text(location, "port", "Default")),
        DisplayField("pathname", _text(location, "pathname", "/")),
        DisplayField("origin", _text(location, "origin", UNKNOWN)),
        DisplayField("full_url", _text(location, "href", UNKNOWN)),
    )


# ── Display ────────────────────────────────────────────────────────────
def collect_viewport_size(sources: EnvironmentSources) -> tuple[DisplayField, ...]:
    return (
        DisplayField("viewport_size", _pair(sources.viewport, "inner_width", "inner_height")),
    )


def collect_display(sources: EnvironmentSources) -> tuple[DisplayField, ...]:
    screen = sources.screen
    # zero depth or ratio means the host could not tell
    depth = resolve(screen, "color_depth", 0) or UNKNOWN
    ratio = resolve(sources.viewport, "device_pixel_ratio", 0) or 1
    if isinstance(ratio, (int, float)):
        ratio = format_number(ratio)
    return (
        DisplayField("screen_resolution", _pair(screen, "width", "height")),
        DisplayField("available_size", _pair(screen, "avail_width", "avail_height")),
        DisplayField("color_depth", str(depth)),
        DisplayField("pixel_ratio", str(ratio)),
    ) + collect_viewport_size(sources)


# ── Time ───────────────────────────────────────────────────────────────
def collect_current_time(
    sources: EnvironmentSources, now: Optional[datetime] = None,
) -> tuple[DisplayField, ...]:
    now = now or current_instant(sources)
    text = format_datetime(now, _language(sources), CURRENT_TIME_STYLE)
    return (DisplayField("current_time", text),)


def _zone_name(clock: Any) -> str:
    return str(resolve(clock, "timezone.key", None)
               or resolve(clock, "timezone.zone", UNKNOWN))


def _resolved_locale(clock: Any) -> str:
    locale = parse_locale(resolve(clock, "locale", None))
    return locale_tag(locale) if locale else UNKNOWN


def collect_time(sources: EnvironmentSources) -> tuple[DisplayField, ...]:
    clock = sources.clock
    now = current_instant(sources)
    return collect_current_time(sources, now) + (
        DisplayField("timezone", _zone_name(clock)),
        DisplayField("utc_offset", format_utc_offset(minutes_west_of_utc(now))),
        DisplayField("locale", _resolved_locale(clock)),
    )


def collect_last_updated(
    sources: EnvironmentSources, now: Optional[datetime] = None,
) -> tuple[DisplayField, ...]:
    now = now or current_instant(sources)
    text = format_datetime(now, _language(sources), LAST_UPDATED_STYLE)
    return (DisplayField("last_updated", text),)


# ── Performance ────────────────────────────────────────────────────────
def _bytes(memory: Any, path: str) -> str:
    value = resolve(memory, path, None)
    if value is None:
        return UNKNOWN
    try:
        return format_bytes(value)
    except (TypeError, ValueError, OverflowError):
        return UNKNOWN


def _memory_usage(performance: Any) -> str:
    memory = resolve(performance, "memory", None)
    if memory is None:
        return NOT_AVAILABLE
    used = _bytes(memory, "used_heap_size")
    total = _bytes(memory, "total_heap_size")
    limit = _bytes(memory, "heap_size_limit")
    return f"{used} / {total} (Limit: {limit})"


def _connection_type(connection: Any) -> str:
    if connection is None:
        return NOT_AVAILABLE
    effective = resolve(connection, "effective_type", UNKNOWN)
    downlink = resolve(connection, "downlink", 0)
    # zero downlink is reported as no figure at all
    speed = ""
    if isinstance(downlink, (int, float)) and downlink:
        speed = f"{format_number(downlink)} Mbps"
    return f"{effective} {speed}".strip()


def collect_performance(sources: EnvironmentSources) -> tuple[DisplayField, ...]:
    identity = sources.identity
    cores = resolve(identity, "hardware_concurrency", 0) or UNKNOWN
    touch_points = resolve(identity, "max_touch_points", 0) or 0
    return (
        DisplayField("memory_usage", _memory_usage(sources.performance)),
        DisplayField("connection_type", _connection_type(sources.connection)),
        DisplayField("hardware_concurrency", str(cores)),
        DisplayField("max_touch_points", str(touch_points)),
    )


# ── Storage ────────────────────────────────────────────────────────────
@contextmanager
def scoped_key(store: Any, key: str, value: str) -> Iterator[Any]:
    """Write ``key`` into ``store`` for the duration of the block.

    The key is removed on every exit path once the write succeeded.
    """
    if store is None:
        raise AttributeUnavailable(key, "no store")
    store[key] = value
    try:
        yield store
    finally:
        del store[key]


def probe_store(store: Any) -> str:
    """Write-then-delete probe: "Available" or "Not available"."""
    try:
        with scoped_key(store, PROBE_KEY, PROBE_VALUE) as probed:
            if probed[PROBE_KEY] != PROBE_VALUE:
                raise AttributeUnavailable(PROBE_KEY, "read back a different value")
    except Exception:
        return NOT_AVAILABLE
    return AVAILABLE


def collect_storage(sources: EnvironmentSources) -> tuple[DisplayField, ...]:
    storage = sources.storage
    indexed = bool(resolve(storage, "indexed", False))
    legacy_sql = bool(resolve(storage, "legacy_sql", False))
    return (
        DisplayField("local_storage", probe_store(resolve(storage, "local", None))),
        DisplayField("session_storage", probe_store(resolve(storage, "session", None))),
        DisplayField("indexed_db", format_boolean(indexed, AVAILABLE, NOT_AVAILABLE)),
        DisplayField("web_sql", format_boolean(legacy_sql, AVAILABLE_DEPRECATED, NOT_AVAILABLE)),
    )


# Fixed collection order; grouping only, collectors are independent.
COLLECTORS = (
    ("identity", collect_identity),
    ("location", collect_location),
    ("display", collect_display),
    ("time", collect_time),
    ("performance", collect_performance),
    ("storage", collect_storage),
)
