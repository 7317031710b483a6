"""
Typed Exception Hierarchy for the Money Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Monetary code must handle errors precisely. Generic exceptions like
ValueError force callers to parse error messages, which is fragile and
hard to test. Every failure raised by this package therefore:

  1. Has a TYPED exception class (catch by type, not message)
  2. Has a CODE class attribute (machine-readable, API-safe)
  3. Carries structured DATA as attributes (not just a message string)

Example:
    try:
        total = Money.sum_of(*line_amounts)
    except CurrencyMismatchError as e:
        log.warning("mixed currencies", extra={"currencies": [e.currency1, e.currency2]})
        api_response(code=e.code, operation=e.operation)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from MoneyKernelError:

    MoneyKernelError (base)
    |
    +-- NumberError
    |   +-- InvalidNumberError
    |   +-- InvalidFormatError
    |   +-- InvalidTypeError
    |   +-- DivisionByZeroError
    |   +-- InvalidScaleError
    |   +-- InvalidRadixError
    |
    +-- CurrencyError
    |   +-- InvalidCurrencyError
    |   +-- CurrencyMismatchError
    |
    +-- AggregationError
    |   +-- EmptySequenceError
    |
    +-- ConversionError
        +-- InvalidCentsError
        +-- InvalidRecordError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                 | When Raised
----------------|----------------------|-----------------------------------------
Number          | INVALID_NUMBER       | Float/Decimal input is NaN or infinite
                | INVALID_FORMAT       | String does not parse to a finite decimal
                | INVALID_TYPE         | Input is none of the accepted shapes
                | DIVISION_BY_ZERO     | Divisor is (positive or negative) zero
                | INVALID_SCALE        | Rounding scale is not a non-negative int
                | INVALID_RADIX        | Radix outside 2..36
----------------|----------------------|-----------------------------------------
Currency        | INVALID_CURRENCY     | Code is outside the recognized set
                | CURRENCY_MISMATCH    | Multi-operand operation mixes currencies
----------------|----------------------|-----------------------------------------
Aggregation     | EMPTY_SEQUENCE       | sum/min/max over zero operands
----------------|----------------------|-----------------------------------------
Conversion      | INVALID_CENTS        | Cents value is not integral and finite
                | INVALID_RECORD       | Transfer record fails structural checks

===============================================================================
DESIGN DECISIONS
===============================================================================

1. Exceptions inherit from Exception, not ValueError/TypeError, so that
   domain errors are catchable as one group and never confused with
   programming errors.

2. `code` is a class attribute: it is static per exception type and can be
   read without instantiation.

3. Money never wraps a NumberError raised while building its DecimalNumber.
   The caller sees the original exception type.

===============================================================================
"""

from typing import Any


class MoneyKernelError(Exception):
    """
    Base exception for all money kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "MONEY_KERNEL_ERROR"


# Number-related exceptions


class NumberError(MoneyKernelError):
    """Base exception for decimal number construction and arithmetic errors."""

    code: str = "NUMBER_ERROR"


class InvalidNumberError(NumberError):
    """Native float (or Decimal) input is NaN or infinite."""

    code: str = "INVALID_NUMBER"

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid number value: must be finite and not NaN, got {value!r}")


class InvalidFormatError(NumberError):
    """String input does not parse to a finite decimal."""

    code: str = "INVALID_FORMAT"

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid decimal string format: {value!r}")


class InvalidTypeError(NumberError):
    """Input is none of the accepted shapes."""

    code: str = "INVALID_TYPE"

    def __init__(self, value: Any, expected: str = "float, int, str or DecimalNumber"):
        self.value = value
        self.type_name = type(value).__name__
        self.expected = expected
        super().__init__(
            f"Invalid input type {self.type_name}: must be {expected}"
        )


class DivisionByZeroError(NumberError):
    """Divisor is zero."""

    code: str = "DIVISION_BY_ZERO"

    def __init__(self, dividend: str):
        self.dividend = dividend
        super().__init__(f"Division by zero: {dividend} / 0")


class InvalidScaleError(NumberError):
    """Rounding scale is not a non-negative integer."""

    code: str = "INVALID_SCALE"

    def __init__(self, scale: Any):
        self.scale = scale
        super().__init__(f"Scale must be a non-negative integer, got {scale!r}")


class InvalidRadixError(NumberError):
    """Radix for string output is outside 2..36."""

    code: str = "INVALID_RADIX"

    def __init__(self, radix: Any):
        self.radix = radix
        super().__init__(f"Radix must be an integer between 2 and 36, got {radix!r}")


# Currency-related exceptions


class CurrencyError(MoneyKernelError):
    """Base exception for currency-related errors."""

    code: str = "CURRENCY_ERROR"


class InvalidCurrencyError(CurrencyError):
    """Currency code is not a member of the recognized set."""

    code: str = "INVALID_CURRENCY"

    def __init__(self, currency: Any):
        self.currency = currency
        super().__init__(f"Invalid currency code: {currency!r}")


class CurrencyMismatchError(CurrencyError):
    """
    Attempted a multi-operand operation on mismatched currencies.

    `operation` names what was attempted ("add", "subtract", "sum",
    "compare") so callers can tell a failed aggregation from a failed
    comparison without parsing the message.
    """

    code: str = "CURRENCY_MISMATCH"

    _MESSAGES = {
        "add": "Cannot add money with different currency codes",
        "subtract": "Cannot subtract money with different currency codes",
        "sum": "Cannot sum Money instances with different currencies",
        "compare": "Cannot compare Money instances with different currencies",
    }

    def __init__(self, currency1: str, currency2: str, operation: str = "compare"):
        self.currency1 = currency1
        self.currency2 = currency2
        self.operation = operation
        prefix = self._MESSAGES.get(operation, f"Cannot {operation} different currencies")
        super().__init__(f"{prefix}: {currency1} vs {currency2}")


# Aggregation exceptions


class AggregationError(MoneyKernelError):
    """Base exception for variadic aggregation errors."""

    code: str = "AGGREGATION_ERROR"


class EmptySequenceError(AggregationError):
    """Variadic aggregation received zero operands."""

    code: str = "EMPTY_SEQUENCE"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation} empty sequence")


# Conversion exceptions


class ConversionError(MoneyKernelError):
    """Base exception for minor-unit and transfer record conversions."""

    code: str = "CONVERSION_ERROR"


class InvalidCentsError(ConversionError):
    """Cents value is not an integral, finite number."""

    code: str = "INVALID_CENTS"

    def __init__(self, cents: Any):
        self.cents = cents
        super().__init__(f"Cents must be an integer, got {cents!r}")


class InvalidRecordError(ConversionError):
    """Transfer record failed structural validation."""

    code: str = "INVALID_RECORD"

    def __init__(self, field_errors: list[dict[str, str]]):
        self.field_errors = field_errors
        details = "; ".join(f"{e['field']}: {e['message']}" for e in field_errors)
        super().__init__(f"Invalid money record: {details}")
