"""
Tests for display formatting.

These tests verify:
1. Byte humanization and its unit table
2. UTC offset sign convention
3. Locale-aware date/time rendering and locale fallback
"""

from datetime import datetime, timedelta, timezone

import pytest

from env_panel.formatting import (
    BYTE_UNITS,
    CURRENT_TIME_STYLE,
    LAST_UPDATED_STYLE,
    DateTimeStyle,
    format_boolean,
    format_bytes,
    format_datetime,
    format_utc_offset,
    locale_tag,
    minutes_west_of_utc,
    parse_locale,
    resolve_locale,
)


INSTANT = datetime(2024, 3, 15, 14, 30, 45, tzinfo=timezone.utc)


# =============================================================================
# BYTES
# =============================================================================

class TestFormatBytes:

    def test_zero(self):
        assert format_bytes(0) == "0 Bytes"

    def test_kilobytes_with_fraction(self):
        assert format_bytes(1536) == "1.5 KB"

    def test_trailing_zeros_dropped(self):
        assert format_bytes(1024) == "1 KB"
        assert format_bytes(1024 ** 2) == "1 MB"

    def test_plain_bytes(self):
        assert format_bytes(1000) == "1000 Bytes"
        assert format_bytes(1) == "1 Bytes"

    def test_rounding_to_decimals(self):
        assert format_bytes(1234567) == "1.18 MB"
        assert format_bytes(1234567, decimals=0) == "1 MB"
        assert format_bytes(1234567, decimals=-3) == "1 MB"

    def test_gigabytes(self):
        assert format_bytes(3 * 1024 ** 3) == "3 GB"

    def test_beyond_gigabytes_stays_in_table(self):
        assert format_bytes(2 * 1024 ** 4) == "2048 GB"

    @pytest.mark.parametrize("n", [1, 7, 1023, 1024, 5000, 10 ** 6, 10 ** 9, 10 ** 12, 10 ** 15])
    def test_unit_always_from_table(self, n):
        text = format_bytes(n)
        assert text.split(" ")[1] in BYTE_UNITS
        assert text != "0 Bytes"

    def test_beyond_float_range(self):
        assert format_bytes(10 ** 400).endswith(" GB")
        assert format_bytes(1024 ** 3 * 10 ** 400) == f"{10 ** 400} GB"

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            format_bytes(-1)

    def test_non_number_rejected(self):
        with pytest.raises(TypeError):
            format_bytes("1024")


# =============================================================================
# SCALARS
# =============================================================================

class TestScalars:

    def test_boolean_labels(self):
        assert format_boolean(True, "Yes", "No") == "Yes"
        assert format_boolean(False, "Yes", "No") == "No"

    @pytest.mark.parametrize("minutes,expected", [
        (0, "GMT+0"),
        (-60, "GMT+1"),
        (-120, "GMT+2"),
        (300, "GMT-5"),
        (330, "GMT-5.5"),
        (-345, "GMT+5.75"),
    ])
    def test_utc_offset(self, minutes, expected):
        assert format_utc_offset(minutes) == expected

    @pytest.mark.parametrize("minutes", range(-720, 721, 15))
    def test_utc_offset_sign(self, minutes):
        assert format_utc_offset(minutes).startswith("GMT+") == (minutes <= 0)

    def test_minutes_west(self):
        ahead = datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=2)))
        behind = datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=-5)))
        assert minutes_west_of_utc(ahead) == -120
        assert minutes_west_of_utc(behind) == 300
        assert minutes_west_of_utc(datetime(2024, 1, 1)) == 0


# =============================================================================
# LOCALES
# =============================================================================

class TestLocales:

    def test_parse_bcp47_and_posix(self):
        assert str(parse_locale("en-US")) == "en_US"
        assert str(parse_locale("de_DE")) == "de_DE"
        assert str(parse_locale("fr_FR.UTF-8")) == "fr_FR"

    def test_unknown_locale(self):
        assert parse_locale("xx-YY") is None
        assert parse_locale("not a locale!") is None
        assert parse_locale(None) is None
        assert parse_locale("") is None

    def test_resolve_falls_back_to_default(self):
        assert str(resolve_locale("xx-YY")) == "en_US"

    def test_locale_tag(self):
        assert locale_tag(parse_locale("pt_BR")) == "pt-BR"


# =============================================================================
# DATE & TIME
# =============================================================================

class TestFormatDateTime:

    def test_current_time_style_english(self):
        text = format_datetime(INSTANT, "en-US", CURRENT_TIME_STYLE)
        assert "March" in text
        assert "15" in text
        assert "2024" in text
        assert "30" in text and "45" in text

    def test_last_updated_uses_short_month(self):
        text = format_datetime(INSTANT, "en-US", LAST_UPDATED_STYLE)
        assert "Mar" in text
        assert "March" not in text

    def test_locale_changes_rendering(self):
        english = format_datetime(INSTANT, "en-US", CURRENT_TIME_STYLE)
        german = format_datetime(INSTANT, "de-DE", CURRENT_TIME_STYLE)
        assert "März" in german
        assert english != german

    def test_unknown_locale_uses_default(self):
        fallback = format_datetime(INSTANT, "xx-YY", LAST_UPDATED_STYLE)
        default = format_datetime(INSTANT, "en_US", LAST_UPDATED_STYLE)
        assert fallback == default

    def test_date_only(self):
        style = DateTimeStyle(hour=None, minute=None, second=None)
        text = format_datetime(INSTANT, "en-US", style)
        assert "2024" in text
        assert ":" not in text

    def test_time_only(self):
        style = DateTimeStyle(year=None, month=None, day=None)
        text = format_datetime(INSTANT, "de-DE", style)
        assert text.startswith("14:30:45")
        assert "2024" not in text

    def test_never_empty(self):
        assert format_datetime(INSTANT, None, CURRENT_TIME_STYLE)
