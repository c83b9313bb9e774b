from datetime import datetime

import pytest

from topup.models import (
    BankTransactionRequest,
    Transaction,
    TransactionAmount,
    TransactionType,
    User,
    Wallet,
)


def test_transaction_type_values():
    assert TransactionType.DIRECT.value == "DIRECT"
    assert TransactionType.BANK.value == "BANK"
    assert TransactionType("BANK") is TransactionType.BANK


def test_user_round_trip():
    user = User(id=1, first_name="John", last_name="Doe")
    data = user.to_dict()
    assert data == {"id": 1, "first_name": "John", "last_name": "Doe"}
    assert User.from_row(data) == user


def test_wallet_round_trip():
    stamp = datetime(2024, 5, 15, 10, 30, 0)
    wallet = Wallet(id=2, balance=5000000, virtual_account=9876543210, user_id=2, updated_at=stamp)
    data = wallet.to_dict()
    assert data["virtual_account"] == 9876543210
    assert data["balance"] == 5000000
    assert Wallet.from_row(data) == wallet


def test_transaction_round_trip():
    stamp = datetime(2024, 5, 15, 8, 0, 0, 123456)
    tx = Transaction(
        id=7,
        amount=50000,
        type=TransactionType.BANK,
        wallet_id=1,
        recipient_bank="BCA",
        recipient_name="JOHN DOE",
        description="salary",
        created_at=stamp,
    )
    data = tx.to_dict()
    assert data["type"] == "BANK"
    assert data["recipient_bank"] == "BCA"
    assert Transaction.from_row(data) == tx


def test_transaction_from_row_blank_optional_fields():
    row = {
        "id": 1,
        "amount": 1000,
        "type": "DIRECT",
        "wallet_id": 3,
        "recipient_bank": None,
        "recipient_name": None,
        "description": None,
        "created_at": None,
    }
    tx = Transaction.from_row(row)
    assert tx.recipient_bank == ""
    assert tx.description == ""
    assert tx.type is TransactionType.DIRECT


def test_transaction_amount_from_text_and_bytes():
    assert TransactionAmount.from_json('{"amount": 50000}').amount == 50000
    assert TransactionAmount.from_json(b'{"amount": 500}').amount == 500
    assert TransactionAmount.from_json({}).amount == 0


@pytest.mark.parametrize(
    "body",
    ['{"amount": "abc"}', '{"amount": 1.5}', '{"amount": true}', "[1, 2]", "not json"],
)
def test_transaction_amount_rejects_malformed(body):
    with pytest.raises(ValueError):
        TransactionAmount.from_json(body)


def test_bank_request_from_json():
    body = '{"account_number": "1234567890", "amount": 50000, "bank_code": "014", "description": "x"}'
    req = BankTransactionRequest.from_json(body)
    assert req == BankTransactionRequest(
        bank_code="014", amount=50000, account_number="1234567890", description="x"
    )


def test_bank_request_missing_fields_default():
    req = BankTransactionRequest.from_json({"amount": 1000})
    assert req.bank_code == ""
    assert req.account_number == ""
    assert req.amount == 1000


def test_bank_request_rejects_wrong_types():
    with pytest.raises(ValueError):
        BankTransactionRequest.from_json({"bank_code": 14})