"""Operations behind the HTTP API: look up users and wallets, and top up wallets."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Any, Optional

from topup.database import insert_transaction
from topup.limits import LimitError, check_daily_limit, check_min_max_top_up, check_monthly_limit
from topup.models import (
    BankTransactionRequest,
    Transaction,
    TransactionAmount,
    TransactionType,
    User,
    Wallet,
)
from topup.validation import ValidationError, validate_account_number, validate_bank

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


class ApiError(Exception):
    """A request failed; carries the HTTP status and the message for the client."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


def _to_int(value: Any) -> int:
    """Read a path parameter as an integer, falling back to 0 when it is not one."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value)
    digits = text[1:] if text[:1] in "+-" else text
    if not digits.isdigit():
        return 0
    return int(text)


def _first_wallet(conn: sqlite3.Connection, column: str, value: Any) -> Optional[Wallet]:
    row = conn.execute(
        f"SELECT * FROM wallets WHERE {column} = ? ORDER BY id LIMIT 1", (value,)
    ).fetchone()
    return Wallet.from_row(row) if row is not None else None


def _wallet_or_404(conn: sqlite3.Connection, column: str, value: Any, message: str) -> Wallet:
    try:
        wallet = _first_wallet(conn, column, value)
    except sqlite3.Error:
        wallet = None
    if wallet is None:
        raise ApiError(404, message)
    return wallet


def get_all_users(conn: sqlite3.Connection) -> dict:
    """Return every user; 404 if there are none."""
    try:
        rows = conn.execute("SELECT * FROM users ORDER BY id").fetchall()
    except sqlite3.Error:
        raise ApiError(500, "Error retrieving users") from None
    if not rows:
        raise ApiError(404, "No users found")
    return {"users": [User.from_row(row).to_dict() for row in rows]}


def get_user_by_id(conn: sqlite3.Connection, user_id: Any) -> dict:
    """Return one user by id."""
    try:
        row = conn.execute(
            "SELECT * FROM users WHERE id = ? ORDER BY id LIMIT 1", (user_id,)
        ).fetchone()
    except sqlite3.Error:
        row = None
    if row is None:
        raise ApiError(404, "User not found")
    return {"user": User.from_row(row).to_dict()}


def get_all_wallets(conn: sqlite3.Connection) -> dict:
    """Return every wallet, possibly none."""
    try:
        rows = conn.execute("SELECT * FROM wallets ORDER BY id").fetchall()
    except sqlite3.Error:
        raise ApiError(500, "Error retrieving wallets") from None
    return {"wallets": [Wallet.from_row(row).to_dict() for row in rows]}


def get_wallet_by_id(conn: sqlite3.Connection, wallet_id: Any) -> dict:
    """Return one wallet by its id."""
    wallet = _wallet_or_404(conn, "id", wallet_id, "Wallet not found")
    return {"wallet": wallet.to_dict()}


def get_wallet_by_user_id(conn: sqlite3.Connection, user_id: Any) -> dict:
    """Return the wallet owned by a user."""
    wallet = _wallet_or_404(conn, "user_id", user_id, "Wallet not found")
    return {"wallet": wallet.to_dict()}


def get_virtual_account_by_wallet_id(conn: sqlite3.Connection, wallet_id: Any) -> dict:
    """Return the virtual account number of a wallet."""
    wallet = _wallet_or_404(conn, "id", wallet_id, "Wallet not found")
    return {"virtual_account": wallet.virtual_account}


def get_transactions_by_wallet_id(conn: sqlite3.Connection, wallet_id: Any) -> dict:
    """Return all transactions of a wallet."""
    try:
        rows = conn.execute(
            "SELECT * FROM transactions WHERE wallet_id = ? ORDER BY id", (wallet_id,)
        ).fetchall()
    except sqlite3.Error:
        raise ApiError(404, "Wallet not found") from None
    return {"transactions": [Transaction.from_row(row).to_dict() for row in rows]}


def _apply_top_up(conn: sqlite3.Connection, wallet: Wallet, transaction: Transaction) -> dict:
    try:
        check_min_max_top_up(transaction.amount)
        check_daily_limit(conn, transaction.amount, transaction.wallet_id)
        check_monthly_limit(conn, transaction.amount, transaction.wallet_id)
    except LimitError as exc:
        raise ApiError(400, str(exc)) from None

    try:
        transaction = insert_transaction(conn, transaction)
    except sqlite3.Error:
        raise ApiError(500, "Error creating transaction") from None

    updated_at = datetime.now()
    try:
        with conn:
            conn.execute(
                "UPDATE wallets SET balance = ?, updated_at = ? WHERE id = ?",
                (wallet.balance + transaction.amount, updated_at.strftime(_TIME_FORMAT), wallet.id),
            )
    except sqlite3.Error:
        raise ApiError(500, "Error updating wallet") from None
    return {"transaction": transaction.to_dict()}


def top_up_direct(conn: sqlite3.Connection, wallet_id: Any, body: Any) -> dict:
    """Top up a wallet directly by the amount in ``body``."""
    wallet_id = _to_int(wallet_id)
    try:
        request = TransactionAmount.from_json(body)
    except ValueError:
        raise ApiError(400, "Invalid request") from None

    wallet = _wallet_or_404(conn, "id", wallet_id, "Wallet not found")
    transaction = Transaction(
        amount=request.amount, type=TransactionType.DIRECT, wallet_id=wallet_id
    )
    return _apply_top_up(conn, wallet, transaction)


def top_up_bank(conn: sqlite3.Connection, virtual_account: Any, body: Any) -> dict:
    """Top up the wallet behind ``virtual_account`` by a bank transfer described in ``body``."""
    try:
        request = BankTransactionRequest.from_json(body)
    except ValueError:
        raise ApiError(400, "Invalid request") from None

    wallet = _wallet_or_404(conn, "virtual_account", virtual_account, "Virtual account not found")

    try:
        bank = validate_bank(request.bank_code)
        holder = validate_account_number(request.account_number)
    except ValidationError as exc:
        raise ApiError(400, str(exc)) from None

    transaction = Transaction(
        amount=request.amount,
        type=TransactionType.BANK,
        wallet_id=wallet.id,
        recipient_bank=bank,
        recipient_name=holder,
        description=request.description,
    )
    return _apply_top_up(conn, wallet, transaction)