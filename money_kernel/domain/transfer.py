"""
Transfer record -- the plain {amount, currency} pair moved across process
boundaries.

The amount travels as a string because a float intermediate would lose
precision. Structural validation here is deliberately stricter than the
DecimalNumber string constructor: exponent notation, a leading plus sign and
bare fractions (".5") are rejected so every producer and consumer agrees on
one plain decimal shape.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from money_kernel.domain.currency import CurrencyRegistry
from money_kernel.exceptions import InvalidRecordError

AMOUNT_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")


@dataclass(frozen=True, slots=True)
class MoneyRecord:
    """Serialized Money: amount as a plain decimal string plus currency code."""

    amount: str
    currency: str

    def field_errors(self) -> list[dict[str, str]]:
        """Structural problems with this record; empty when valid."""
        errors: list[dict[str, str]] = []
        if not isinstance(self.amount, str):
            errors.append({"field": "amount", "message": "must be a string"})
        elif not AMOUNT_PATTERN.fullmatch(self.amount):
            errors.append(
                {"field": "amount", "message": f"must match {AMOUNT_PATTERN.pattern}, got {self.amount!r}"}
            )
        if not CurrencyRegistry.is_valid(self.currency):
            errors.append(
                {"field": "currency", "message": f"unrecognized currency code {self.currency!r}"}
            )
        return errors

    def validate(self) -> MoneyRecord:
        """
        Enforce the structural contract and return self.

        Raises:
            InvalidRecordError: With every failing field listed.
        """
        errors = self.field_errors()
        if errors:
            raise InvalidRecordError(errors)
        return self

    @property
    def is_valid(self) -> bool:
        return not self.field_errors()

    def to_dict(self) -> dict[str, str]:
        return {"amount": self.amount, "currency": self.currency}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MoneyRecord:
        """
        Build a record from a plain mapping.

        Raises:
            InvalidRecordError: If data is not a mapping, a key is missing or
                amount is not a string.
        """
        if not isinstance(data, Mapping):
            raise InvalidRecordError([{"field": "record", "message": "must be a mapping"}])
        errors = [
            {"field": key, "message": "is required"}
            for key in ("amount", "currency")
            if key not in data
        ]
        if "amount" in data and not isinstance(data["amount"], str):
            errors.append({"field": "amount", "message": "must be a string"})
        if errors:
            raise InvalidRecordError(errors)
        return cls(amount=data["amount"], currency=data["currency"])
