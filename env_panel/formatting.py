"""Display formatting for raw environment values."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from babel import Locale, UnknownLocaleError
from babel.dates import format_datetime as babel_format_datetime
from babel.dates import format_date, format_skeleton, get_datetime_format

DEFAULT_LOCALE = "en_US"
BYTE_UNITS = ("Bytes", "KB", "MB", "GB")


# ── Numbers ────────────────────────────────────────────────────────────
def _trim_number(value: float, decimals: int) -> str:
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_bytes(n: Union[int, float], decimals: int = 2) -> str:
    """Human readable byte count, e.g. ``1536 -> "1.5 KB"``.

    Values past the GB range stay in GB rather than leaving the unit table.
    """
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        raise TypeError(f"byte count must be a number, got {type(n).__name__}")
    if n < 0 or n != n:
        raise ValueError(f"byte count must be >= 0, got {n}")
    if n == 0:
        return "0 Bytes"
    dm = max(decimals, 0)
    try:
        value = float(n)
    except OverflowError:
        # beyond float range: whole GB in integer arithmetic
        return f"{n // 1024 ** (len(BYTE_UNITS) - 1)} {BYTE_UNITS[-1]}"
    unit = 0
    while value >= 1024 and unit < len(BYTE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{_trim_number(round(value, dm), dm)} {BYTE_UNITS[unit]}"


def format_number(value: Union[int, float]) -> str:
    """Render 2.0 as "2" and 1.25 as "1.25"."""
    return f"{value:g}"


def format_boolean(value: bool, true_label: str, false_label: str) -> str:
    return true_label if value else false_label


def format_utc_offset(minutes_west: Union[int, float]) -> str:
    """``GMT+H`` for zones at or ahead of UTC, ``GMT-H`` for zones behind it.

    ``minutes_west`` follows the host clock convention: positive west of UTC.
    """
    sign = "+" if minutes_west <= 0 else "-"
    return f"GMT{sign}{format_number(abs(minutes_west) / 60)}"


def minutes_west_of_utc(instant: datetime) -> int:
    offset = instant.utcoffset()
    if offset is None:
        return 0
    return -int(offset.total_seconds() // 60)


# ── Locales ────────────────────────────────────────────────────────────
def parse_locale(tag: Optional[str]) -> Optional[Locale]:
    """Parse a BCP 47 (``en-US``) or POSIX (``en_US``) tag, None if unknown."""
    if not tag or not isinstance(tag, str):
        return None
    try:
        return Locale.parse(tag.replace("-", "_").split(".")[0])
    except (UnknownLocaleError, ValueError, TypeError):
        return None


def resolve_locale(tag: Optional[str]) -> Locale:
    """Like parse_locale, but falls back to the default locale."""
    return parse_locale(tag) or Locale.parse(DEFAULT_LOCALE)


def locale_tag(locale: Locale) -> str:
    return str(locale).replace("_", "-")


# ── Date & time ────────────────────────────────────────────────────────
@dataclass(frozen=True)
class DateTimeStyle:
    """Which calendar and clock fields to render.

    year / day: "numeric" or None. month: "long", "short" or None.
    hour / minute / second: "2-digit", "numeric" or None.
    time_zone_name: "short" or None.
    """
    year: Optional[str] = "numeric"
    month: Optional[str] = "long"
    day: Optional[str] = "numeric"
    hour: Optional[str] = "2-digit"
    minute: Optional[str] = "2-digit"
    second: Optional[str] = "2-digit"
    time_zone_name: Optional[str] = None

    def date_skeleton(self) -> str:
        skeleton = ""
        if self.year:
            skeleton += "y"
        if self.month == "long":
            skeleton += "MMMM"
        elif self.month == "short":
            skeleton += "MMM"
        if self.day:
            skeleton += "d"
        return skeleton

    def time_skeleton(self, hour_symbol: str) -> str:
        skeleton = ""
        if self.hour:
            skeleton += hour_symbol * (2 if self.hour == "2-digit" else 1)
        if self.minute:
            skeleton += "mm" if self.minute == "2-digit" else "m"
        if self.second:
            skeleton += "ss" if self.second == "2-digit" else "s"
        return skeleton


CURRENT_TIME_STYLE = DateTimeStyle(month="long", time_zone_name="short")
LAST_UPDATED_STYLE = DateTimeStyle(month="short")


def _hour_symbol(locale: Locale) -> str:
    """'H' for 24-hour locales, 'h' for 12-hour ones."""
    pattern = locale.time_formats["short"].pattern
    return "H" if "H" in pattern else "h"


def format_datetime(instant: datetime, locale: Optional[str] = None,
                    style: DateTimeStyle = CURRENT_TIME_STYLE) -> str:
    """Render ``instant`` with the calendar and clock conventions of ``locale``.

    Unknown locales fall back to DEFAULT_LOCALE.
    """
    loc = resolve_locale(locale)
    date_part = ""
    time_part = ""

    date_skeleton = style.date_skeleton()
    if style.year and style.day and style.month in ("long", "short"):
        # full dates use the locale's own long/medium pattern
        width = "long" if style.month == "long" else "medium"
        date_part = format_date(instant, width, locale=loc)
    elif date_skeleton:
        date_part = format_skeleton(date_skeleton, instant, locale=loc)

    time_skeleton = style.time_skeleton(_hour_symbol(loc))
    if time_skeleton:
        time_part = format_skeleton(time_skeleton, instant, locale=loc)
    if style.time_zone_name == "short":
        zone = babel_format_datetime(instant, "z", locale=loc)
        time_part = f"{time_part} {zone}".strip()

    if date_part and time_part:
        width = "long" if style.month == "long" else "medium"
        pattern = get_datetime_format(width, locale=loc).replace("'", "")
        return pattern.replace("{0}", time_part).replace("{1}", date_part)
    return date_part or time_part
