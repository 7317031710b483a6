"""
DecimalNumber -- Immutable, validated arbitrary-precision decimal.

Responsibility:
    The numeric primitive under every monetary amount: validated
    construction from three input shapes, exact addition, subtraction and
    multiplication, half-away-from-zero rounding to a fixed number of
    fractional digits, total-order comparison and variadic aggregation.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Depends only on money_kernel.domain.precision (default scale) and
    money_kernel.exceptions.

Invariants enforced:
    - A constructed DecimalNumber is always finite and never NaN.
    - Negative zero is normalized to zero at construction.
    - Addition, subtraction and multiplication never lose digits: they run
      under an unbounded-precision decimal context.
    - Division and explicit rounding round half away from zero
      (ROUND_HALF_UP) at the requested scale, or at the default scale read
      from money_kernel.domain.precision at call time.
    - to_string() output is canonical and plain (no exponent, no trailing
      fractional zeros) and always parses back to an equal value.

Failure modes:
    - InvalidNumberError: float or Decimal input is NaN or infinite.
    - InvalidFormatError: string input is not a finite decimal literal.
    - InvalidTypeError: input is none of the accepted shapes.
    - DivisionByZeroError: divisor is zero.
    - InvalidScaleError / InvalidRadixError: bad rounding scale or radix.
    - EmptySequenceError: sum_of / min_of / max_of with no operands.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import Any, TypeAlias

from money_kernel.domain.precision import get_default_scale, resolve_scale
from money_kernel.exceptions import (
    DivisionByZeroError,
    EmptySequenceError,
    InvalidFormatError,
    InvalidNumberError,
    InvalidRadixError,
    InvalidTypeError,
    NumberError,
)

# Unbounded context: +, -, * are exact. Never used for an inexact division.
_EXACT = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_UP,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_RADIX_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

Operand: TypeAlias = "DecimalNumber | Decimal | float | int"
NumberLike: TypeAlias = "DecimalNumber | Decimal | float | int | str"


def _from_float(value: float) -> Decimal:
    if not math.isfinite(value):
        raise InvalidNumberError(value)
    # Shortest digit string that round-trips to the same float
    return Decimal(repr(value))


def _from_str(value: str) -> Decimal:
    if not _DECIMAL_LITERAL.fullmatch(value):
        raise InvalidFormatError(value)
    try:
        parsed = Decimal(value)
    except (InvalidOperation, ValueError, OverflowError) as e:
        raise InvalidFormatError(value) from e
    if not parsed.is_finite():
        raise InvalidFormatError(value)
    return parsed


def _from_decimal(value: Decimal) -> Decimal:
    if not value.is_finite():
        raise InvalidNumberError(value)
    return value


def _coerce(value: Any) -> Decimal:
    """Validate any accepted construction input into a finite Decimal."""
    if isinstance(value, DecimalNumber):
        return value.value
    if isinstance(value, bool):
        raise InvalidTypeError(value)
    if isinstance(value, float):
        return _from_float(value)
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, str):
        return _from_str(value)
    if isinstance(value, Decimal):
        return _from_decimal(value)
    raise InvalidTypeError(value)


def _coerce_operand(value: Any) -> Decimal:
    """Validate a multiplier, divisor or comparison operand (no strings)."""
    if isinstance(value, DecimalNumber):
        return value.value
    if isinstance(value, str) or isinstance(value, bool):
        raise InvalidTypeError(value, "int, float, Decimal or DecimalNumber")
    if isinstance(value, (float, int, Decimal)):
        return _coerce(value)
    raise InvalidTypeError(value, "int, float, Decimal or DecimalNumber")


def _require_number(value: Any) -> DecimalNumber:
    if not isinstance(value, DecimalNumber):
        raise InvalidTypeError(value, "DecimalNumber")
    return value


def _quantize(value: Decimal, scale: int) -> Decimal:
    """Round half away from zero to *scale* fractional digits."""
    if value.as_tuple().exponent >= -scale:
        return value
    return value.quantize(Decimal((0, (1,), -scale)), rounding=ROUND_HALF_UP, context=_EXACT)


def _round_ratio(numerator: int, denominator: int, scale: int) -> Decimal:
    """Round numerator/denominator (denominator > 0) half away from zero."""
    quotient, remainder = divmod(abs(numerator) * 10**scale, denominator)
    if 2 * remainder >= denominator:
        quotient += 1
    if numerator < 0:
        quotient = -quotient
    return Decimal(quotient).scaleb(-scale, _EXACT)


def _divide(dividend: Decimal, divisor: Decimal, scale: int) -> Decimal:
    if divisor.is_zero():
        raise DivisionByZeroError(str(dividend))
    numerator, denominator = dividend.as_integer_ratio()
    divisor_numerator, divisor_denominator = divisor.as_integer_ratio()
    numerator *= divisor_denominator
    denominator *= divisor_numerator
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    return _round_ratio(numerator, denominator, scale)


def _format_plain(value: Decimal) -> str:
    if value.is_zero():
        return "0"
    return format(value.normalize(_EXACT), "f")


def _int_to_radix(number: int, radix: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, digit = divmod(number, radix)
        digits.append(_RADIX_DIGITS[digit])
    return "".join(reversed(digits))


def _format_radix(value: Decimal, radix: int, places: int) -> str:
    numerator, denominator = value.copy_abs().as_integer_ratio()
    unit = radix**places
    scaled, remainder = divmod(numerator * unit, denominator)
    if 2 * remainder >= denominator:
        scaled += 1
    integer_part, fraction = divmod(scaled, unit)
    text = _int_to_radix(integer_part, radix)
    if fraction:
        text += "." + _int_to_radix(fraction, radix).rjust(places, "0").rstrip("0")
    if value < 0 and scaled:
        text = "-" + text
    return text


@dataclass(frozen=True, slots=True, eq=False)
class DecimalNumber:
    """
    Arbitrary-precision signed decimal value object.

    Contract:
        Wraps a finite decimal.Decimal. Accepts a native float, an int, a
        decimal string, a decimal.Decimal or another DecimalNumber on
        construction; everything else is rejected immediately.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - value is always a finite Decimal, never NaN, never -0
        - Every operation returns a new instance
        - Equality and ordering are by mathematical value (1.50 == 1.5)

    Non-goals:
        - Does NOT provide transcendental functions
        - Does NOT format for display or locale
    """

    value: Decimal

    def __post_init__(self) -> None:
        coerced = _coerce(self.value)
        if coerced.is_zero() and coerced.is_signed():
            coerced = coerced.copy_abs()
        object.__setattr__(self, "value", coerced)

    @classmethod
    def of(cls, value: NumberLike) -> DecimalNumber:
        """
        Validated construction from a float, int, str, Decimal or DecimalNumber.

        Raises:
            InvalidNumberError: float/Decimal is NaN or infinite.
            InvalidFormatError: string is not a finite decimal literal.
            InvalidTypeError: any other input shape.
        """
        return cls(value)

    @classmethod
    def zero(cls) -> DecimalNumber:
        return cls(Decimal(0))

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    @classmethod
    def sum_of(cls, *values: DecimalNumber) -> DecimalNumber:
        """Exact sum of one or more values."""
        if not values:
            raise EmptySequenceError("sum")
        total = _require_number(values[0]).value
        for item in values[1:]:
            total = _EXACT.add(total, _require_number(item).value)
        return cls(total)

    @classmethod
    def min_of(cls, *values: DecimalNumber) -> DecimalNumber:
        """Smallest value; the first one encountered on ties."""
        if not values:
            raise EmptySequenceError("min")
        smallest = _require_number(values[0])
        for item in values[1:]:
            if _require_number(item).value < smallest.value:
                smallest = item
        return smallest

    @classmethod
    def max_of(cls, *values: DecimalNumber) -> DecimalNumber:
        """Largest value; the first one encountered on ties."""
        if not values:
            raise EmptySequenceError("max")
        largest = _require_number(values[0])
        for item in values[1:]:
            if _require_number(item).value > largest.value:
                largest = item
        return largest

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.value.is_zero()

    @property
    def is_positive(self) -> bool:
        return self.value > 0

    @property
    def is_negative(self) -> bool:
        return self.value < 0

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Operand) -> DecimalNumber:
        """Exact addition."""
        return DecimalNumber(_EXACT.add(self.value, _coerce_operand(other)))

    def subtract(self, other: Operand) -> DecimalNumber:
        """Exact subtraction."""
        return DecimalNumber(_EXACT.subtract(self.value, _coerce_operand(other)))

    def multiply(self, multiplier: Operand) -> DecimalNumber:
        """Exact multiplication."""
        return DecimalNumber(_EXACT.multiply(self.value, _coerce_operand(multiplier)))

    def divide(self, divisor: Operand) -> DecimalNumber:
        """
        Division, rounded half away from zero to the current default scale.

        Raises:
            DivisionByZeroError: If divisor is zero.
        """
        return self.divide_then_round_to(divisor)

    # ------------------------------------------------------------------
    # Rounding
    # ------------------------------------------------------------------

    def round_to(self, scale: int | None = None) -> DecimalNumber:
        """
        Round half away from zero to *scale* fractional digits.

        Postconditions:
            - Uses the default scale current at call time when scale is None.
            - 104.45 -> 104.5 and -104.45 -> -104.5 at scale 1.
        """
        return DecimalNumber(_quantize(self.value, resolve_scale(scale)))

    def multiply_then_round_to(self, multiplier: Operand, scale: int | None = None) -> DecimalNumber:
        resolved = resolve_scale(scale)
        product = _EXACT.multiply(self.value, _coerce_operand(multiplier))
        return DecimalNumber(_quantize(product, resolved))

    def divide_then_round_to(self, divisor: Operand, scale: int | None = None) -> DecimalNumber:
        """
        Divide and round half away from zero in a single exact step.

        The quotient is never materialized at a higher precision first, so
        there is no double rounding.

        Raises:
            DivisionByZeroError: If divisor is (positive or negative) zero.
        """
        resolved = resolve_scale(scale)
        return DecimalNumber(_divide(self.value, _coerce_operand(divisor), resolved))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def is_equal(self, other: Any) -> bool:
        """Value equality. Unsupported or non-finite operands compare unequal."""
        try:
            return self.value == _coerce_operand(other)
        except NumberError:
            return False

    def is_less_than(self, other: Operand) -> bool:
        return self.value < _coerce_operand(other)

    def is_less_than_or_equal(self, other: Operand) -> bool:
        return self.value <= _coerce_operand(other)

    def is_greater_than(self, other: Operand) -> bool:
        return self.value > _coerce_operand(other)

    def is_greater_than_or_equal(self, other: Operand) -> bool:
        return self.value >= _coerce_operand(other)

    def min(self, other: Operand) -> DecimalNumber:
        """The smaller of self and other; self on ties."""
        candidate = other if isinstance(other, DecimalNumber) else DecimalNumber(_coerce_operand(other))
        return candidate if candidate.value < self.value else self

    def max(self, other: Operand) -> DecimalNumber:
        """The larger of self and other; self on ties."""
        candidate = other if isinstance(other, DecimalNumber) else DecimalNumber(_coerce_operand(other))
        return candidate if candidate.value > self.value else self

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_number(self) -> float:
        """Nearest native float. Lossy beyond float precision."""
        return float(self.value)

    def to_decimal(self) -> Decimal:
        return self.value

    def to_string(self, radix: int = 10) -> str:
        """
        Canonical string form.

        Base 10 is exact and plain ("100.5", "0.0000001", "-3"). Other
        radixes (2..36) render the fraction rounded to the default scale.

        Raises:
            InvalidRadixError: If radix is not an int in 2..36.
        """
        if isinstance(radix, bool) or not isinstance(radix, int) or not 2 <= radix <= 36:
            raise InvalidRadixError(radix)
        if radix == 10:
            return _format_plain(self.value)
        return _format_radix(self.value, radix, get_default_scale())

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: Operand) -> bool:
        try:
            return self.is_less_than(other)
        except InvalidTypeError:
            return NotImplemented

    def __le__(self, other: Operand) -> bool:
        try:
            return self.is_less_than_or_equal(other)
        except InvalidTypeError:
            return NotImplemented

    def __gt__(self, other: Operand) -> bool:
        try:
            return self.is_greater_than(other)
        except InvalidTypeError:
            return NotImplemented

    def __ge__(self, other: Operand) -> bool:
        try:
            return self.is_greater_than_or_equal(other)
        except InvalidTypeError:
            return NotImplemented

    def __add__(self, other: Operand) -> DecimalNumber:
        try:
            return self.add(other)
        except InvalidTypeError:
            return NotImplemented

    def __radd__(self, other: Operand) -> DecimalNumber:
        return self.__add__(other)

    def __sub__(self, other: Operand) -> DecimalNumber:
        try:
            return self.subtract(other)
        except InvalidTypeError:
            return NotImplemented

    def __neg__(self) -> DecimalNumber:
        return DecimalNumber(self.value.copy_negate())

    def __abs__(self) -> DecimalNumber:
        return DecimalNumber(self.value.copy_abs())

    def __float__(self) -> float:
        return self.to_number()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DecimalNumber({self.to_string()!r})"
