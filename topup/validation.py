"""Checks on bank codes and source account numbers for bank transfers."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class _Bank(Enum):
    """Banks accepted as the source of a transfer, keyed by clearing code."""

    BCA = "014"
    BNI = "009"
    MANDIRI = "008"
    BRI = "002"


_ACCOUNT_HOLDERS = MappingProxyType(
    dict(
        [
            ("1234567890", "JOHN DOE"),
            ("9876543210", "JANE DOE"),
        ]
    )
)

ACCOUNT_LENGTH_RANGE = range(10, 16)


class ValidationError(ValueError):
    """A bank code or account number was rejected."""


def validate_bank(bank_code: str) -> str:
    """Return the bank name for ``bank_code``."""
    try:
        return _Bank(bank_code).name
    except ValueError:
        raise ValidationError("Invalid bank code") from None


def validate_account_number(account_number: str) -> str:
    """Return the holder name for ``account_number``."""
    if len(account_number.encode("utf-8")) not in ACCOUNT_LENGTH_RANGE:
        raise ValidationError("Invalid account number length")
    holder = _ACCOUNT_HOLDERS.get(account_number)
    if holder is None:
        raise ValidationError("Account number not found")
    return holder