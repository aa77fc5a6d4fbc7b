"""Tests for currency and axis formatting."""

import pytest
from retire_sim import Theme, format_axis_tick, format_currency
from retire_sim.formatting import currency_code, currency_for, theme_color


class TestFormatCurrency:
    def test_yuan_default(self):
        assert format_currency(1234567) == "¥1,234,567"

    def test_negative(self):
        assert format_currency(-1900000) == "-¥1,900,000"

    def test_dollar(self):
        assert format_currency(12345, "$", "en-US") == "$12,345"

    def test_whole_units(self):
        assert format_currency(999.5, "$", "en-US") == "$1,000"
        assert format_currency(12.4) == "¥12"

    def test_tiny_negative_has_no_sign(self):
        assert format_currency(-0.4) == "¥0"

    def test_unknown_currency_is_usd(self):
        assert currency_code("€") == "USD"
        assert format_currency(10, "€", "en-US") == "$10"

    def test_locale_marks_foreign_currency(self):
        assert format_currency(1000, "¥", "en-US") == "CN¥1,000"
        assert format_currency(1000, "$", "zh-CN") == "US$1,000"
        assert format_currency(-1000, "¥", "en-US") == "-CN¥1,000"

    def test_unknown_locale_formats_like_en_us(self):
        assert format_currency(1000, "$", "de-DE") == "$1,000"


class TestFormatAxisTick:
    @pytest.mark.parametrize("value,expected", [
        (0, "0"),
        (5000, "5000"),
        (50000, "5万"),
        (2400000, "240万"),
        (150000000, "1.5亿"),
    ])
    def test_yuan(self, value, expected):
        assert format_axis_tick(value, "¥") == expected

    @pytest.mark.parametrize("value,expected", [
        (999, "999"),
        (25000, "25k"),
        (2500000, "2.5M"),
    ])
    def test_dollar(self, value, expected):
        assert format_axis_tick(value, "$") == expected

    def test_negative_not_abbreviated(self):
        assert format_axis_tick(-50000, "¥") == "-50000"


class TestLanguages:
    def test_presets(self):
        assert currency_for("zh") == ("¥", "zh-CN")
        assert currency_for("en") == ("$", "en-US")

    def test_unknown_falls_back(self):
        assert currency_for("fr") == ("¥", "zh-CN")

    def test_every_theme_has_color(self):
        for theme in Theme:
            assert theme_color(theme).startswith("#")
