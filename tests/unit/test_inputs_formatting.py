"""Tests for input sanitizing helpers and display formatting."""

import math

import pytest

from oepcalc.sdk import (
    clamp_non_negative,
    clamp_range,
    format_count,
    format_currency,
    format_percent,
    high_volume_warning,
    parse_float_or_default,
    parse_int_or_default,
)
from oepcalc.sdk.inputs import HIGH_VOLUME_WARNING, round_half_up


class TestClamp:

    @pytest.mark.parametrize("value,expected", [
        (8, 8.0),
        (0, 0.0),
        (-3, 0.0),
        ("4.5", 4.5),
        ("abc", 0.0),
        (None, 0.0),
        (math.nan, 0.0),
        (True, 0.0),
    ])
    def test_clamp_non_negative(self, value, expected):
        assert clamp_non_negative(value) == expected

    def test_clamp_range(self):
        assert clamp_range(150, 0, 100) == 100
        assert clamp_range(-1, 0, 100) == 0
        assert clamp_range(42, 0, 100) == 42
        assert clamp_range("junk", 1, 100) == 1


class TestRoundHalfUp:

    @pytest.mark.parametrize("value,expected", [
        (519.4, 519),
        (62.5, 63),
        (2.5, 3),
        (-2.5, -2),
        (741.9999999, 742),
        (0.49999999999999994, 0),
        (-0.5, 0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestParseIntOrDefault:
    """Form-style integer parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("60", 60),
        (" 42 ", 42),
        ("12abc", 12),
        ("7.9", 7),
        ("", 53),
        ("abc", 53),
        ("0", 53),
        (None, 53),
        (60, 60),
        (60.7, 60),
        ("-5", -5),
    ])
    def test_working_days(self, text, expected):
        assert parse_int_or_default(text, 53) == expected

    def test_apps_default_zero(self):
        assert parse_int_or_default("", 0) == 0
        assert parse_int_or_default("x", 0) == 0


class TestParseFloatOrDefault:

    @pytest.mark.parametrize("text,expected", [
        ("7.5", 7.5),
        ("8", 8.0),
        ("", 8.0),
        ("nope", 8.0),
        (None, 8.0),
        ("inf", 8.0),
        (6, 6.0),
    ])
    def test_hours(self, text, expected):
        assert parse_float_or_default(text, 8.0) == expected


class TestHighVolumeWarning:

    def test_at_threshold_no_warning(self):
        assert high_volume_warning(20) is None

    def test_above_threshold(self):
        assert high_volume_warning(21) == HIGH_VOLUME_WARNING


class TestFormatCurrency:

    @pytest.mark.parametrize("value,expected", [
        (17013, "$17,013"),
        (321, "$321"),
        (0, "$0"),
        (1484.4, "$1,484"),
        (1484.5, "$1,485"),
        (2077.6, "$2,078"),
        (1234567.89, "$1,234,568"),
        (-642, "-$642"),
        (-250.5, "-$251"),
    ])
    def test_whole_dollars(self, value, expected):
        assert format_currency(value) == expected


class TestFormatCountAndPercent:

    def test_count(self):
        assert format_count(1060) == "1,060"
        assert format_count(742) == "742"

    def test_percent(self):
        assert format_percent(70) == "70%"
        assert format_percent(100.0) == "100%"
        assert format_percent(72.5) == "72.5%"
