"""Tests for the typed exception hierarchy and its machine-readable codes."""

import pytest

from money_kernel.exceptions import (
    AggregationError,
    ConversionError,
    CurrencyError,
    CurrencyMismatchError,
    DivisionByZeroError,
    EmptySequenceError,
    InvalidCentsError,
    InvalidCurrencyError,
    InvalidFormatError,
    InvalidNumberError,
    InvalidRadixError,
    InvalidRecordError,
    InvalidScaleError,
    InvalidTypeError,
    MoneyKernelError,
    NumberError,
)


class TestHierarchy:

    @pytest.mark.parametrize(
        "exc, base, code",
        [
            (InvalidNumberError(float("nan")), NumberError, "INVALID_NUMBER"),
            (InvalidFormatError("x"), NumberError, "INVALID_FORMAT"),
            (InvalidTypeError(None), NumberError, "INVALID_TYPE"),
            (DivisionByZeroError("1"), NumberError, "DIVISION_BY_ZERO"),
            (InvalidScaleError(-1), NumberError, "INVALID_SCALE"),
            (InvalidRadixError(1), NumberError, "INVALID_RADIX"),
            (InvalidCurrencyError("XXX"), CurrencyError, "INVALID_CURRENCY"),
            (CurrencyMismatchError("USD", "EUR"), CurrencyError, "CURRENCY_MISMATCH"),
            (EmptySequenceError("sum"), AggregationError, "EMPTY_SEQUENCE"),
            (InvalidCentsError(1.5), ConversionError, "INVALID_CENTS"),
            (InvalidRecordError([]), ConversionError, "INVALID_RECORD"),
        ],
    )
    def test_codes_and_bases(self, exc, base, code):
        assert isinstance(exc, base)
        assert isinstance(exc, MoneyKernelError)
        assert exc.code == code

    def test_base_codes(self):
        assert MoneyKernelError.code == "MONEY_KERNEL_ERROR"
        assert NumberError.code == "NUMBER_ERROR"
        assert CurrencyError.code == "CURRENCY_ERROR"
        assert AggregationError.code == "AGGREGATION_ERROR"
        assert ConversionError.code == "CONVERSION_ERROR"


class TestStructuredAttributes:

    def test_invalid_type_records_type_name(self):
        exc = InvalidTypeError([1], "Money")
        assert exc.type_name == "list"
        assert exc.expected == "Money"
        assert "list" in str(exc)

    def test_division_by_zero_message(self):
        assert str(DivisionByZeroError("10")) == "Division by zero: 10 / 0"

    def test_empty_sequence_message(self):
        assert str(EmptySequenceError("sum")) == "Cannot sum empty sequence"

    @pytest.mark.parametrize(
        "operation, prefix",
        [
            ("add", "Cannot add money with different currency codes"),
            ("subtract", "Cannot subtract money with different currency codes"),
            ("sum", "Cannot sum Money instances with different currencies"),
            ("compare", "Cannot compare Money instances with different currencies"),
        ],
    )
    def test_mismatch_messages(self, operation, prefix):
        exc = CurrencyMismatchError("USD", "EUR", operation)
        assert str(exc) == f"{prefix}: USD vs EUR"
        assert exc.operation == operation

    def test_record_error_lists_fields(self):
        exc = InvalidRecordError([
            {"field": "amount", "message": "must be a string"},
            {"field": "currency", "message": "unrecognized currency code 'X'"},
        ])
        assert "amount: must be a string" in str(exc)
        assert "currency:" in str(exc)
        assert len(exc.field_errors) == 2
