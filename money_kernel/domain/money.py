"""
Money -- Immutable, currency-tagged decimal amount.

Responsibility:
    Pairs a DecimalNumber with a recognized currency code and exposes the
    arithmetic, rounding, comparison, aggregation and conversion operations
    a monetary amount needs, all of them refusing to mix currencies.

Architecture position:
    Kernel > Domain -- pure functional core. The only I/O is a warning log
    line when a transfer record is rejected.
    Depends on decimal_number (all numeric work), currency (registry),
    transfer (record shape) and money_kernel.exceptions.

Invariants enforced:
    - currency_code is always a member of CurrencyRegistry.
    - value is always a finite DecimalNumber.
    - Every binary operation, comparison and aggregation requires matching
      currency codes; the result carries the same code.
    - Rounding and division behave exactly as the Decimal Core does,
      including the default scale read at call time.

Failure modes:
    - InvalidCurrencyError on construction with an unrecognized code
      (checked before the value).
    - Decimal Core errors (InvalidNumberError, InvalidFormatError,
      InvalidTypeError, DivisionByZeroError, InvalidScaleError) propagate
      unchanged.
    - CurrencyMismatchError when operands carry different codes.
    - EmptySequenceError from sum_of / min_of / max_of with no operands.
    - InvalidCentsError / InvalidRecordError from the conversions.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TypeGuard

from money_kernel.domain.currency import CurrencyRegistry
from money_kernel.domain.decimal_number import DecimalNumber, NumberLike, Operand
from money_kernel.domain.transfer import MoneyRecord
from money_kernel.exceptions import (
    CurrencyMismatchError,
    EmptySequenceError,
    InvalidCentsError,
    InvalidRecordError,
    InvalidTypeError,
    MoneyKernelError,
)
from money_kernel.logging_config import LogContext, get_logger

logger = get_logger("domain.money")


def is_money(value: Any) -> TypeGuard[Money]:
    """True if *value* is a Money instance."""
    return isinstance(value, Money)


def _require_money(value: Any) -> Money:
    if not isinstance(value, Money):
        raise InvalidTypeError(value, "Money")
    return value


def _record_currency(record: Any) -> str | None:
    if isinstance(record, MoneyRecord):
        currency = record.currency
    elif isinstance(record, Mapping):
        currency = record.get("currency")
    else:
        return None
    return currency if isinstance(currency, str) else None


@dataclass(frozen=True, slots=True, eq=False)
class Money:
    """
    Monetary amount value object.

    Contract:
        Pairs a DecimalNumber with its currency code -- they are NEVER
        separated. Construction validates the currency first and then the
        value; the first failure is raised as is.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - value is always a DecimalNumber
        - currency_code is always a recognized code
        - No silent currency mixing in arithmetic, comparison or aggregation

    Non-goals:
        - Does NOT perform currency conversion
        - Does NOT format for display or locale
    """

    value: DecimalNumber
    currency_code: str

    def __post_init__(self) -> None:
        CurrencyRegistry.validate(self.currency_code)
        if not isinstance(self.value, DecimalNumber):
            object.__setattr__(self, "value", DecimalNumber(self.value))

    @classmethod
    def create(cls, value: NumberLike, currency_code: str) -> Money:
        """
        Validated construction.

        Preconditions:
            - currency_code is a recognized code.
            - value is a float, int, decimal string, Decimal or DecimalNumber.

        Raises:
            InvalidCurrencyError: Unrecognized currency code.
            InvalidNumberError / InvalidFormatError / InvalidTypeError: Bad value.
        """
        return cls(value, currency_code)

    @classmethod
    def zero(cls, currency_code: str) -> Money:
        """Create a zero amount in the given currency."""
        CurrencyRegistry.validate(currency_code)
        return cls(DecimalNumber.zero(), currency_code)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.value.is_zero

    @property
    def is_positive(self) -> bool:
        return self.value.is_positive

    @property
    def is_negative(self) -> bool:
        return self.value.is_negative

    def _check_currency(self, other: Money, operation: str) -> None:
        if self.currency_code != other.currency_code:
            raise CurrencyMismatchError(self.currency_code, other.currency_code, operation)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Money) -> Money:
        """
        Exact addition of two amounts in the same currency.

        Raises:
            CurrencyMismatchError: If the currency codes differ.
        """
        self._check_currency(_require_money(other), "add")
        return Money(self.value.add(other.value), self.currency_code)

    def subtract(self, other: Money) -> Money:
        """
        Exact subtraction of two amounts in the same currency.

        Raises:
            CurrencyMismatchError: If the currency codes differ.
        """
        self._check_currency(_require_money(other), "subtract")
        return Money(self.value.subtract(other.value), self.currency_code)

    def multiply_then_round(self, multiplier: Operand, scale: int | None = None) -> Money:
        return Money(self.value.multiply_then_round_to(multiplier, scale), self.currency_code)

    def divide_then_round(self, divisor: Operand, scale: int | None = None) -> Money:
        """
        Divide and round half away from zero to *scale* fractional digits.

        Postconditions:
            - Money.create(10, "USD").divide_then_round(3, 2) is 3.33 USD.

        Raises:
            DivisionByZeroError: If divisor is zero.
        """
        return Money(self.value.divide_then_round_to(divisor, scale), self.currency_code)

    def round(self, scale: int | None = None) -> Money:
        """Round half away from zero; the default scale applies when scale is None."""
        return Money(self.value.round_to(scale), self.currency_code)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def is_equal(self, other: Any) -> bool:
        """Same currency and same value. Never raises."""
        if not isinstance(other, Money):
            return False
        return self.currency_code == other.currency_code and self.value.is_equal(other.value)

    def is_less_than(self, other: Money) -> bool:
        self._check_currency(_require_money(other), "compare")
        return self.value.is_less_than(other.value)

    def is_less_than_or_equal(self, other: Money) -> bool:
        self._check_currency(_require_money(other), "compare")
        return self.value.is_less_than_or_equal(other.value)

    def is_greater_than(self, other: Money) -> bool:
        self._check_currency(_require_money(other), "compare")
        return self.value.is_greater_than(other.value)

    def is_greater_than_or_equal(self, other: Money) -> bool:
        self._check_currency(_require_money(other), "compare")
        return self.value.is_greater_than_or_equal(other.value)

    def min(self, other: Money) -> Money:
        """The smaller of the two instances; the receiver on ties."""
        return other if self.is_greater_than(other) else self

    def max(self, other: Money) -> Money:
        """The larger of the two instances; the receiver on ties."""
        return other if self.is_less_than(other) else self

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    @staticmethod
    def _common_currency(items: tuple[Money, ...], operation: str, empty: str) -> str:
        if not items:
            raise EmptySequenceError(empty)
        code = _require_money(items[0]).currency_code
        for item in items[1:]:
            if _require_money(item).currency_code != code:
                raise CurrencyMismatchError(code, item.currency_code, operation)
        return code

    @classmethod
    def sum_of(cls, *items: Money) -> Money:
        """
        Exact total of one or more amounts in one currency.

        Raises:
            EmptySequenceError: No operands.
            CurrencyMismatchError: Operands carry different codes ("sum").
        """
        code = cls._common_currency(items, "sum", "sum")
        return cls(DecimalNumber.sum_of(*(item.value for item in items)), code)

    @classmethod
    def min_of(cls, *items: Money) -> Money:
        """Smallest amount; the first one encountered on ties."""
        cls._common_currency(items, "compare", "min")
        smallest = items[0]
        for item in items[1:]:
            if item.value.is_less_than(smallest.value):
                smallest = item
        return smallest

    @classmethod
    def max_of(cls, *items: Money) -> Money:
        """Largest amount; the first one encountered on ties."""
        cls._common_currency(items, "compare", "max")
        largest = items[0]
        for item in items[1:]:
            if item.value.is_greater_than(largest.value):
                largest = item
        return largest

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_cents(self) -> int:
        """
        Integer count of minor units: value x 100 rounded half away from zero.

        Computed in decimal arithmetic only, so 100.005 -> 10001 and
        100.125 -> 10013.
        """
        return int(self.value.multiply(100).round_to(0).to_decimal())

    @classmethod
    def from_cents(cls, cents: int | float, currency_code: str) -> Money:
        """
        Amount from an integral count of minor units (cents / 100, exact).

        Raises:
            InvalidCurrencyError: Unrecognized currency code.
            InvalidCentsError: cents is not an integral, finite number.
        """
        CurrencyRegistry.validate(currency_code)
        if isinstance(cents, bool):
            raise InvalidCentsError(cents)
        if isinstance(cents, float):
            if not math.isfinite(cents) or not cents.is_integer():
                raise InvalidCentsError(cents)
            cents = int(cents)
        elif not isinstance(cents, int):
            raise InvalidCentsError(cents)
        return cls(DecimalNumber(cents).divide_then_round_to(100, 2), currency_code)

    def to_record(self) -> MoneyRecord:
        return MoneyRecord(amount=self.to_string(), currency=self.currency_code)

    @classmethod
    def from_record(cls, record: MoneyRecord | Mapping[str, Any]) -> Money:
        """
        Rebuild Money from a transfer record or its plain mapping form.

        The amount is parsed with the decimal string constructor and the
        currency is re-validated, so a record that skipped structural
        validation is still checked here.

        Raises:
            InvalidRecordError: Mapping is missing a key or amount is not a string.
            InvalidCurrencyError: Unrecognized currency code.
            InvalidFormatError: amount does not parse as a decimal.
        """
        with LogContext.bind(operation="from_record", currency=_record_currency(record)):
            try:
                if not isinstance(record, MoneyRecord):
                    record = MoneyRecord.from_dict(record)
                elif not isinstance(record.amount, str):
                    raise InvalidRecordError([{"field": "amount", "message": "must be a string"}])
                return cls.create(record.amount, record.currency)
            except MoneyKernelError as e:
                logger.warning(
                    "money_record_rejected",
                    extra={"error_code": e.code, "reason": str(e)},
                )
                raise

    def to_number(self) -> float:
        return self.value.to_number()

    def to_decimal(self) -> Decimal:
        return self.value.to_decimal()

    def to_string(self, radix: int = 10) -> str:
        """Canonical string form of the amount, without the currency code."""
        return self.value.to_string(radix)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash((self.value, self.currency_code))

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_less_than(other)

    def __le__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_less_than_or_equal(other)

    def __gt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_greater_than_or_equal(other)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Money:
        return Money(-self.value, self.currency_code)

    def __abs__(self) -> Money:
        return Money(abs(self.value), self.currency_code)

    def __str__(self) -> str:
        return f"{self.to_string()} {self.currency_code}"

    def __repr__(self) -> str:
        return f"Money({self.to_string()!r}, {self.currency_code!r})"
