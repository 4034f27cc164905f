import math

import pytest

from logics.computation import MAX_SAFE_INTEGER
from logics.display_format import count_digits, number_to_text, renormalize, text_to_number


class TestTextToNumber:
    @pytest.mark.parametrize("text, expected", [
        ("123", 123),
        ("1,234", 1234),
        ("1,234,567", 1234567),
        ("123.45", 123.45),
        ("-123", -123),
        ("0", 0),
        ("1,234.56", 1234.56),
        ("1.", 1),
        (".5", 0.5),
        ("-0.25", -0.25),
    ])
    def test_parses_numerals(self, text, expected):
        assert text_to_number(text) == expected

    @pytest.mark.parametrize("text", ["", "-", ".", "Error", "abc", "1.2.3", "12a", "--1", "1e5"])
    def test_non_numerals_are_nan(self, text):
        assert math.isnan(text_to_number(text))

    def test_sentinels_parse_back(self):
        assert text_to_number("∞") == math.inf
        assert text_to_number("-∞") == -math.inf
        assert math.isnan(text_to_number("NaN"))


class TestNumberToText:
    @pytest.mark.parametrize("value, expected", [
        (123, "123"),
        (1234, "1,234"),
        (1234567, "1,234,567"),
        (0, "0"),
        (-123, "-123"),
        (-1234567, "-1,234,567"),
        (123.45, "123.45"),
        (1234.56, "1,234.56"),
        (0.5, "0.5"),
        (0.001, "0.001"),
        (-123.45, "-123.45"),
        (0.0000001, "0.0000001"),
        (0.123456789, "0.123456789"),
        (3.0, "3"),
    ])
    def test_formats(self, value, expected):
        assert number_to_text(value) == expected

    def test_fraction_capped_at_ten_digits(self):
        result = number_to_text(1.123456789012345)
        assert len(result.split(".")[1]) <= 10

    def test_fraction_rounds_at_last_digit(self):
        assert number_to_text(2 / 3) == "0.6666666667"

    def test_float_noise_is_trimmed(self):
        assert number_to_text(0.1 + 0.2) == "0.3"

    def test_negative_zero(self):
        assert number_to_text(-0.0) == "0"
        assert number_to_text(-1e-12) == "0"

    def test_special_values(self):
        assert number_to_text(math.inf) == "∞"
        assert number_to_text(-math.inf) == "-∞"
        assert number_to_text(math.nan) == "NaN"

    def test_safe_integer_bounds(self):
        assert number_to_text(MAX_SAFE_INTEGER) == "9,007,199,254,740,991"
        assert number_to_text(-MAX_SAFE_INTEGER) == "-9,007,199,254,740,991"


@pytest.mark.parametrize("n", [0, 1, -1, 7, 999, 1000, -1000, 123456789, 10 ** 15, MAX_SAFE_INTEGER, -MAX_SAFE_INTEGER])
def test_safe_integers_round_trip(n):
    assert text_to_number(number_to_text(n)) == n


def test_decimal_round_trip():
    assert text_to_number(number_to_text(12345.67)) == 12345.67


class TestRenormalize:
    @pytest.mark.parametrize("text, expected", [
        ("123", "123"),
        ("1234", "1,234"),
        ("123.45", "123.45"),
        ("1234.56", "1,234.56"),
        ("0", "0"),
        ("-1234", "-1,234"),
        ("123.00", "123"),
        ("1,234", "1,234"),
        ("1,23", "123"),
    ])
    def test_renormalize(self, text, expected):
        assert renormalize(text) == expected

    @pytest.mark.parametrize("text", ["0", "5", "1,234", "-1,234,567", "0.5", "12,345.6789", "0.6666666667", "∞", "NaN"])
    def test_idempotent(self, text):
        once = renormalize(text)
        assert renormalize(once) == once


def test_count_digits_ignores_formatting():
    assert count_digits("-1,234.56") == 6
    assert count_digits("0") == 1
    assert count_digits("Error") == 0
