"""
Tests for free-text numeric normalization.
"""

import pytest

from propmatch.matching.normalization import (
    extract_single_number,
    normalize_price,
    normalize_yield,
    parse_int_prefix,
    parse_price_range,
    parse_rent,
    parse_yield_percent,
    round_half_up,
)


class TestNormalizePrice:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("$520,000", 520000.0),
            ("Over $500,000", 500000.0),
            ("$480/w", 480.0),
            ("1,250,000", 1250000.0),
            (520000, 520000.0),
            (499999.5, 499999.5),
        ],
    )
    def test_extracts_first_number(self, raw, expected):
        assert normalize_price(raw) == expected

    @pytest.mark.parametrize(
        "raw", [None, "", "Contact agent", ",,,", True, ["$500,000"], {"value": 1}]
    )
    def test_unparseable_returns_none(self, raw):
        assert normalize_price(raw) is None

    def test_output_as_string_round_trips(self):
        """A normalized price written back as text parses to the same number."""
        first = normalize_price("$520,000")
        assert normalize_price(f"{first:,.0f}") == first
        assert normalize_price(str(int(first))) == first

    def test_does_not_interpret_ranges(self):
        assert normalize_price("$500,000 - $550,000") == 500000.0


class TestNormalizeYield:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("5.2%", 5.2),
            ("Yield: 4.75 %", 4.75),
            ("6", 6.0),
            ("5.2.1", 5.2),
            (5.5, 5.5),
        ],
    )
    def test_extracts_first_float(self, raw, expected):
        assert normalize_yield(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", [None, "n/a", "...", False])
    def test_unparseable_returns_none(self, raw):
        assert normalize_yield(raw) is None


class TestParseIntPrefix:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1995", 1995),
            ("  1995 approx", 1995),
            ("2010s", 2010),
            (1998.7, 1998),
            (2001, 2001),
        ],
    )
    def test_leading_integer(self, raw, expected):
        assert parse_int_prefix(raw) == expected

    @pytest.mark.parametrize("raw", ["circa 1990", "", None, "unknown"])
    def test_no_leading_integer(self, raw):
        assert parse_int_prefix(raw) is None


class TestRoundHalfUp:

    @pytest.mark.parametrize(
        "value, expected",
        [(7.5, 8), (2.5, 3), (0.5, 1), (7.49, 7), (9.95, 10), (-506.67, -507), (-2.5, -2)],
    )
    def test_halves_round_up(self, value, expected):
        assert round_half_up(value) == expected


class TestListingParsers:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Over $500,000", (500000.0, None)),
            ("Under $600,000", (None, 600000.0)),
            ("Offers up to $600,000", (None, 600000.0)),
            ("From $500,000", (500000.0, None)),
            ("From $500,000 to $550,000", (500000.0, 550000.0)),
            ("$500,000 - $550,000", (500000.0, 550000.0)),
            ("$520,000", (520000.0, 520000.0)),
            ("Contact agent", (None, None)),
            (None, (None, None)),
        ],
    )
    def test_parse_price_range(self, text, expected):
        assert parse_price_range(text) == expected

    def test_parse_rent(self):
        assert parse_rent("$1,050 per week") == 1050.0
        assert parse_rent("TBC") is None
        assert parse_rent(None) is None

    def test_parse_yield_percent_requires_percent_sign(self):
        assert parse_yield_percent("Gross yield 5.2%") == 5.2
        assert parse_yield_percent("5.2") is None

    def test_extract_single_number(self):
        assert extract_single_number("650 m2") == 650.0
        assert extract_single_number("Built 1995") == 1995.0
        assert extract_single_number("$1,250.50") == 1250.5
        assert extract_single_number("") is None
        assert extract_single_number("none") is None


class TestOverflow:

    HUGE_TEXT = "$" + "9" * 400

    @pytest.mark.parametrize(
        "parse", [normalize_price, normalize_yield, parse_rent, extract_single_number]
    )
    def test_huge_text_is_unparseable(self, parse):
        assert parse(self.HUGE_TEXT) is None

    def test_huge_integer_is_unparseable(self):
        assert normalize_price(10**400) is None
        assert parse_int_prefix(10**400) is None

    def test_huge_price_range(self):
        assert parse_price_range(self.HUGE_TEXT) == (None, None)
