"""Data records for users, wallets, transactions and request bodies."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional


class TransactionType(str, Enum):
    """How a wallet was topped up."""

    DIRECT = "DIRECT"
    BANK = "BANK"


def _parse_time(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _format_time(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _load_object(data: Any) -> Mapping[str, Any]:
    """Decode a JSON request body into a mapping, raising ValueError if it is not one."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    if isinstance(data, str):
        data = json.loads(data)
    if not isinstance(data, Mapping):
        raise ValueError("request body must be a JSON object")
    return data


def _int_field(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _str_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass
class User:
    """A wallet owner."""

    id: Optional[int]
    first_name: str
    last_name: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        return cls(id=row["id"], first_name=row["first_name"], last_name=row["last_name"])

    def to_dict(self) -> dict:
        return {"id": self.id, "first_name": self.first_name, "last_name": self.last_name}


@dataclass
class Wallet:
    """A user's balance and the virtual account that receives bank transfers."""

    id: Optional[int]
    balance: int
    virtual_account: int
    user_id: int
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Wallet":
        return cls(
            id=row["id"],
            balance=row["balance"],
            virtual_account=row["virtual_account"],
            user_id=row["user_id"],
            updated_at=_parse_time(row["updated_at"]),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "balance": self.balance,
            "virtual_account": self.virtual_account,
            "updated_at": _format_time(self.updated_at),
            "user_id": self.user_id,
        }


@dataclass
class Transaction:
    """A single top-up of a wallet."""

    id: Optional[int] = None
    amount: int = 0
    type: TransactionType = TransactionType.DIRECT
    wallet_id: int = 0
    recipient_bank: str = ""
    recipient_name: str = ""
    description: str = ""
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Transaction":
        return cls(
            id=row["id"],
            amount=row["amount"],
            type=TransactionType(row["type"]),
            wallet_id=row["wallet_id"],
            recipient_bank=row["recipient_bank"] or "",
            recipient_name=row["recipient_name"] or "",
            description=row["description"] or "",
            created_at=_parse_time(row["created_at"]),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "amount": self.amount,
            "created_at": _format_time(self.created_at),
            "type": self.type.value,
            "recipient_bank": self.recipient_bank,
            "recipient_name": self.recipient_name,
            "description": self.description,
            "wallet_id": self.wallet_id,
        }


@dataclass(frozen=True)
class BankTransactionRequest:
    """Body of a bank-transfer top-up."""

    bank_code: str = ""
    amount: int = 0
    account_number: str = ""
    description: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "BankTransactionRequest":
        """Build from a JSON text, bytes or mapping; raise ValueError if malformed."""
        obj = _load_object(data)
        return cls(
            bank_code=_str_field(obj, "bank_code"),
            amount=_int_field(obj, "amount"),
            account_number=_str_field(obj, "account_number"),
            description=_str_field(obj, "description"),
        )


@dataclass(frozen=True)
class TransactionAmount:
    """Body of a direct top-up."""

    amount: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "TransactionAmount":
        """Build from a JSON text, bytes or mapping; raise ValueError if malformed."""
        return cls(amount=_int_field(_load_object(data), "amount"))