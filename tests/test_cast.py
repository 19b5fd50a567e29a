"""Tests for value coercion and comparison."""

import math

import pytest

from blox.runtime._cast import (
    LIST_ALL,
    LIST_INVALID,
    compare,
    is_whitespace,
    strict_equals,
    to_list_index,
    to_number,
    to_string,
)


# ---------------------------------------------------------------------------
# to_number
# ---------------------------------------------------------------------------

class TestToNumber:
    def test_int_passthrough(self):
        assert to_number(42) == 42

    def test_float_passthrough(self):
        assert to_number(2.5) == 2.5

    def test_nan_is_zero(self):
        assert to_number(math.nan) == 0

    def test_bool(self):
        assert to_number(True) == 1
        assert to_number(False) == 0

    def test_integer_string(self):
        assert to_number("123") == 123
        assert isinstance(to_number("123"), int)

    def test_padded_string(self):
        assert to_number("  -7 ") == -7

    def test_float_string(self):
        assert to_number("3.25") == pytest.approx(3.25)
        assert to_number(".5") == pytest.approx(0.5)
        assert to_number("1e3") == pytest.approx(1000.0)

    def test_empty_string_is_zero(self):
        assert to_number("") == 0
        assert to_number("   ") == 0

    def test_hex_string(self):
        assert to_number("0x1F") == 31

    def test_binary_and_octal(self):
        assert to_number("0b101") == 5
        assert to_number("0o17") == 15

    def test_infinity(self):
        assert to_number("Infinity") == math.inf
        assert to_number("-Infinity") == -math.inf

    def test_garbage_is_zero(self):
        assert to_number("apple") == 0
        assert to_number("12abc") == 0
        assert to_number("1_000") == 0

    def test_python_spellings_rejected(self):
        assert to_number("inf") == 0
        assert to_number("nan") == 0

    def test_non_ascii_digits_rejected(self):
        assert to_number("\u0663") == 0
        assert to_number("\uff11") == 0
        assert to_number("1\u0663.5") == 0

    def test_trims_only_js_whitespace(self):
        assert to_number("\u00a07\u3000") == 7
        assert to_number("\x1c7") == 0

    def test_none_is_zero(self):
        assert to_number(None) == 0


# ---------------------------------------------------------------------------
# to_string
# ---------------------------------------------------------------------------

class TestToString:
    def test_integral_float(self):
        assert to_string(3.0) == "3"

    def test_fractional_float(self):
        assert to_string(0.5) == "0.5"

    def test_bool(self):
        assert to_string(True) == "true"
        assert to_string(False) == "false"

    def test_infinity(self):
        assert to_string(math.inf) == "Infinity"
        assert to_string(-math.inf) == "-Infinity"

    def test_string_passthrough(self):
        assert to_string("abc") == "abc"

    def test_small_float_fixed_notation(self):
        assert to_string(0.00001) == "0.00001"
        assert to_string(-0.000015) == "-0.000015"
        assert to_string(0.000001) == "0.000001"

    def test_tiny_float_unpadded_exponent(self):
        assert to_string(1.5e-7) == "1.5e-7"
        assert to_string(1e-7) == "1e-7"

    def test_huge_float_exponent(self):
        assert to_string(1e21) == "1e+21"
        assert to_string(2.5e25) == "2.5e+25"


class TestHelpers:
    def test_is_whitespace(self):
        assert is_whitespace("\u00a0\ufeff")
        assert not is_whitespace("\x1f")
        assert is_whitespace(" \t")
        assert is_whitespace(None)
        assert not is_whitespace("a")
        assert not is_whitespace(0)

    def test_strict_equals_numbers(self):
        assert strict_equals(1, 1.0)
        assert not strict_equals(1, "1")
        assert not strict_equals(1, True)

    def test_strict_equals_nan(self):
        assert not strict_equals(math.nan, math.nan)


# ---------------------------------------------------------------------------
# compare
# ---------------------------------------------------------------------------

class TestCompare:
    def test_number_and_numeric_string_equal(self):
        assert compare(123, "123") == 0

    def test_numeric_ordering(self):
        assert compare(2, "10") < 0
        assert compare("10", 2) > 0

    def test_case_insensitive_strings(self):
        assert compare("Apple", "apple") == 0

    def test_string_ordering(self):
        assert compare("a", "b") < 0

    def test_blank_is_not_zero(self):
        assert compare("", 0) != 0
        assert compare(0, " ") != 0

    def test_bool_and_string(self):
        assert compare(True, "true") == 0

    def test_infinities(self):
        assert compare("Infinity", math.inf) == 0
        assert compare(-math.inf, "-Infinity") == 0


# ---------------------------------------------------------------------------
# to_list_index
# ---------------------------------------------------------------------------

class TestToListIndex:
    def test_in_range(self):
        assert to_list_index(2, 3) == 2

    def test_string_number(self):
        assert to_list_index("3", 3) == 3

    def test_floors(self):
        assert to_list_index(2.9, 3) == 2

    def test_zero_invalid(self):
        assert to_list_index(0, 3) is LIST_INVALID

    def test_past_end_invalid(self):
        assert to_list_index(4, 3) is LIST_INVALID

    def test_non_numeric_invalid(self):
        assert to_list_index("apple", 3) is LIST_INVALID

    def test_infinity_invalid(self):
        assert to_list_index(math.inf, 3) is LIST_INVALID

    def test_last(self):
        assert to_list_index("last", 5) == 5
        assert to_list_index("last", 0) is LIST_INVALID

    def test_random(self):
        for _ in range(20):
            assert 1 <= to_list_index("random", 4) <= 4
        assert to_list_index("any", 0) is LIST_INVALID

    def test_all_requires_accept_all(self):
        assert to_list_index("all", 3) is LIST_INVALID
        assert to_list_index("all", 3, accept_all=True) is LIST_ALL
