"""
Unit tests for DecimalNumber.

Verifies:
- Validated construction from float, int, str and Decimal
- Exact addition, subtraction and multiplication
- Half-away-from-zero rounding and single-step division
- Canonical plain string output and radix output
- Comparison, min/max tie-breaking and aggregation
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from money_kernel.domain.decimal_number import DecimalNumber
from money_kernel.domain.precision import default_scale
from money_kernel.exceptions import (
    DivisionByZeroError,
    EmptySequenceError,
    InvalidFormatError,
    InvalidNumberError,
    InvalidRadixError,
    InvalidScaleError,
    InvalidTypeError,
)


class TestConstruction:
    """Tests for the three input shapes and their validation."""

    def test_from_int(self):
        assert DecimalNumber(42).to_string() == "42"

    def test_from_float_uses_shortest_repr(self):
        """0.1 is taken as written, not as its binary expansion."""
        assert DecimalNumber(0.1).to_string() == "0.1"
        assert DecimalNumber(100.5).to_string() == "100.5"

    def test_from_string(self):
        assert DecimalNumber("100.50").to_string() == "100.5"
        assert DecimalNumber("-3").to_string() == "-3"

    def test_from_string_exponent(self):
        assert DecimalNumber("1e3").to_string() == "1000"
        assert DecimalNumber("1.5E-3").to_string() == "0.0015"

    def test_from_string_leading_sign_and_bare_fraction(self):
        assert DecimalNumber("+7").to_string() == "7"
        assert DecimalNumber(".5").to_string() == "0.5"

    def test_from_decimal(self):
        assert DecimalNumber(Decimal("1.10")).to_string() == "1.1"

    def test_of_is_construction(self):
        assert DecimalNumber.of("2.5") == DecimalNumber(2.5)

    def test_copy_from_decimal_number(self):
        original = DecimalNumber("9.99")
        assert DecimalNumber(original) == original

    def test_large_value_keeps_every_digit(self):
        text = "123456789012345678901234567890.123456789"
        assert DecimalNumber(text).to_string() == text

    def test_negative_zero_normalized(self):
        assert DecimalNumber(-0.0).to_string() == "0"
        assert DecimalNumber("-0.00").to_string() == "0"
        assert not DecimalNumber("-0").is_negative

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_rejected(self, value):
        with pytest.raises(InvalidNumberError):
            DecimalNumber(value)

    def test_non_finite_decimal_rejected(self):
        with pytest.raises(InvalidNumberError):
            DecimalNumber(Decimal("NaN"))

    @pytest.mark.parametrize(
        "value", ["", "abc", "1.2.3", "NaN", "Infinity", " 1", "1 ", "1_000", "--1", "0x10"]
    )
    def test_bad_string_rejected(self, value):
        with pytest.raises(InvalidFormatError) as exc_info:
            DecimalNumber(value)
        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", [None, True, [], {}, object()])
    def test_unsupported_type_rejected(self, value):
        with pytest.raises(InvalidTypeError):
            DecimalNumber(value)

    def test_immutable(self):
        number = DecimalNumber(1)
        with pytest.raises(FrozenInstanceError):
            number.value = Decimal(2)


class TestArithmetic:
    """Tests for exact arithmetic."""

    def test_add_exact(self):
        result = DecimalNumber("100.123456789").add(DecimalNumber("50.987654321"))
        assert result.to_string() == "151.11111111"

    def test_add_float_operands_without_binary_error(self):
        assert DecimalNumber(0.1).add(0.2).to_string() == "0.3"

    def test_subtract(self):
        assert DecimalNumber("10").subtract(DecimalNumber("0.01")).to_string() == "9.99"

    def test_multiply_exact(self):
        assert DecimalNumber("1.5").multiply(3).to_string() == "4.5"
        assert DecimalNumber("0.0001").multiply(Decimal("0.0001")).to_string() == "0.00000001"

    def test_operands_are_not_mutated(self):
        a = DecimalNumber("1.1")
        b = DecimalNumber("2.2")
        a.add(b)
        assert a.to_string() == "1.1"
        assert b.to_string() == "2.2"

    def test_string_operand_rejected(self):
        with pytest.raises(InvalidTypeError):
            DecimalNumber(1).multiply("2")

    def test_operators(self):
        assert DecimalNumber(1) + 2 == DecimalNumber(3)
        assert 2 + DecimalNumber(1) == DecimalNumber(3)
        assert DecimalNumber(5) - DecimalNumber(7) == DecimalNumber(-2)
        assert -DecimalNumber(1) == DecimalNumber(-1)
        assert abs(DecimalNumber("-1.5")) == DecimalNumber("1.5")

    def test_operator_with_unsupported_type(self):
        with pytest.raises(TypeError):
            DecimalNumber(1) + "x"


class TestRounding:
    """Tests for rounding and division."""

    @pytest.mark.parametrize(
        "value, scale, expected",
        [
            ("104.45", 1, "104.5"),
            ("-104.45", 1, "-104.5"),
            ("2.5", 0, "3"),
            ("-2.5", 0, "-3"),
            ("1.005", 2, "1.01"),
            ("1.004", 2, "1"),
            ("1.5", 4, "1.5"),
        ],
    )
    def test_round_half_away_from_zero(self, value, scale, expected):
        assert DecimalNumber(value).round_to(scale).to_string() == expected

    def test_round_uses_default_scale(self):
        with default_scale(1):
            assert DecimalNumber("0.25").round_to().to_string() == "0.3"

    @pytest.mark.parametrize("scale", [-1, 1.5, True, "2"])
    def test_invalid_scale(self, scale):
        with pytest.raises(InvalidScaleError):
            DecimalNumber(1).round_to(scale)

    def test_divide_then_round(self):
        assert DecimalNumber(10).divide_then_round_to(3, 2).to_string() == "3.33"
        assert DecimalNumber(2).divide_then_round_to(3, 2).to_string() == "0.67"
        assert DecimalNumber(-2).divide_then_round_to(3, 2).to_string() == "-0.67"

    def test_divide_no_double_rounding(self):
        """The exact quotient is rounded once, never via an intermediate scale."""
        assert DecimalNumber("1.0049999").divide_then_round_to(1, 2).to_string() == "1"

    def test_divide_uses_default_scale(self):
        assert DecimalNumber(1).divide(3).to_string() == "0." + "3" * 20
        with default_scale(2):
            assert DecimalNumber(1).divide(3).to_string() == "0.33"

    def test_divide_exact_result(self):
        assert DecimalNumber("7.5").divide(Decimal("2.5")).to_string() == "3"

    @pytest.mark.parametrize("divisor", [0, 0.0, -0.0, Decimal("0.000")])
    def test_divide_by_zero(self, divisor):
        with pytest.raises(DivisionByZeroError) as exc_info:
            DecimalNumber(5).divide_then_round_to(divisor, 2)
        assert exc_info.value.dividend == "5"

    def test_multiply_then_round(self):
        assert DecimalNumber("19.99").multiply_then_round_to(Decimal("0.0825"), 2).to_string() == "1.65"


class TestComparison:
    """Tests for equality, ordering and min/max."""

    def test_equality_by_value(self):
        assert DecimalNumber("1.50") == DecimalNumber("1.5")
        assert hash(DecimalNumber("1.50")) == hash(DecimalNumber("1.5"))

    def test_is_equal_is_total(self):
        number = DecimalNumber(1)
        assert number.is_equal(1)
        assert number.is_equal(1.0)
        assert not number.is_equal("1")
        assert not number.is_equal(None)
        assert not number.is_equal(float("nan"))

    def test_ordering(self):
        small, large = DecimalNumber("1.1"), DecimalNumber("1.2")
        assert small.is_less_than(large)
        assert small.is_less_than_or_equal(small)
        assert large.is_greater_than(small)
        assert large.is_greater_than_or_equal(large)
        assert small < large <= large
        assert sorted([large, small]) == [small, large]

    def test_min_max_return_receiver_on_ties(self):
        a = DecimalNumber("1.0")
        b = DecimalNumber("1")
        assert a.min(b) is a
        assert a.max(b) is a

    def test_min_max(self):
        a, b = DecimalNumber(1), DecimalNumber(2)
        assert a.max(b) is b
        assert b.min(a) is a


class TestAggregation:
    """Tests for sum_of, min_of, max_of."""

    def test_sum_of(self):
        total = DecimalNumber.sum_of(DecimalNumber("0.1"), DecimalNumber("0.2"), DecimalNumber("0.3"))
        assert total.to_string() == "0.6"

    def test_single_operand_identity(self):
        only = DecimalNumber("4.2")
        assert DecimalNumber.sum_of(only) == only
        assert DecimalNumber.min_of(only) is only
        assert DecimalNumber.max_of(only) is only

    def test_first_extreme_wins_on_ties(self):
        a, b, c = DecimalNumber("2"), DecimalNumber("2.0"), DecimalNumber("1")
        assert DecimalNumber.max_of(a, b, c) is a
        assert DecimalNumber.min_of(c, a, DecimalNumber("1.00")) is c

    @pytest.mark.parametrize("method", ["sum_of", "min_of", "max_of"])
    def test_empty_rejected(self, method):
        with pytest.raises(EmptySequenceError):
            getattr(DecimalNumber, method)()

    def test_non_number_operand_rejected(self):
        with pytest.raises(InvalidTypeError):
            DecimalNumber.sum_of(DecimalNumber(1), 2)


class TestConversions:
    """Tests for string, float and radix output."""

    def test_plain_string_for_small_values(self):
        assert DecimalNumber("0.0000001").to_string() == "0.0000001"

    def test_plain_string_for_large_exponent(self):
        assert DecimalNumber("1E+25").to_string() == "1" + "0" * 25

    def test_string_round_trip(self):
        for text in ["0", "-1.25", "100.5", "0.0000001", "99999999999999999999.99"]:
            assert DecimalNumber(DecimalNumber(text).to_string()) == DecimalNumber(text)

    def test_to_number(self):
        assert DecimalNumber("100.5").to_number() == 100.5
        assert float(DecimalNumber("2.25")) == 2.25

    def test_to_decimal(self):
        assert DecimalNumber("3.14").to_decimal() == Decimal("3.14")

    def test_radix(self):
        assert DecimalNumber(255).to_string(16) == "ff"
        assert DecimalNumber(-255).to_string(2) == "-11111111"
        assert DecimalNumber("0.5").to_string(2) == "0.1"
        assert DecimalNumber(35).to_string(36) == "z"

    @pytest.mark.parametrize("radix", [1, 37, 0, "16", True])
    def test_invalid_radix(self, radix):
        with pytest.raises(InvalidRadixError):
            DecimalNumber(1).to_string(radix)

    def test_str_and_repr(self):
        assert str(DecimalNumber("1.50")) == "1.5"
        assert repr(DecimalNumber("1.50")) == "DecimalNumber('1.5')"
