"""SQLite storage for users, wallets and transactions."""

from __future__ import annotations

import sqlite3
from dataclasses import replace
from datetime import datetime

from topup.models import Transaction, User, Wallet

DEFAULT_DSN = "ewallet.db"

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS wallets (
    id INTEGER PRIMARY KEY,
    balance INTEGER NOT NULL,
    virtual_account INTEGER NOT NULL,
    updated_at TEXT,
    user_id INTEGER NOT NULL REFERENCES users(id)
);
CREATE TABLE IF NOT EXISTS transactions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    amount INTEGER NOT NULL,
    created_at TEXT,
    type TEXT NOT NULL,
    recipient_bank TEXT,
    recipient_name TEXT,
    description TEXT,
    wallet_id INTEGER NOT NULL REFERENCES wallets(id)
);
"""


def _to_db_time(value: datetime) -> str:
    return value.strftime(_TIME_FORMAT)


def connect(dsn: str = DEFAULT_DSN) -> sqlite3.Connection:
    """Open the SQLite database at ``dsn`` with rows addressable by column name."""
    conn = sqlite3.connect(dsn, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def migrate(conn: sqlite3.Connection) -> None:
    """Create the tables if they do not exist yet."""
    with conn:
        conn.executescript(_SCHEMA)


def insert_user(conn: sqlite3.Connection, user: User) -> User:
    """Store a user and return it with its id."""
    with conn:
        cur = conn.execute(
            "INSERT INTO users (id, first_name, last_name) VALUES (?, ?, ?)",
            (user.id, user.first_name, user.last_name),
        )
    return replace(user, id=cur.lastrowid)


def insert_wallet(conn: sqlite3.Connection, wallet: Wallet) -> Wallet:
    """Store a wallet, stamping its update time if unset, and return it."""
    updated_at = wallet.updated_at or datetime.now()
    with conn:
        cur = conn.execute(
            "INSERT INTO wallets (id, balance, virtual_account, updated_at, user_id)"
            " VALUES (?, ?, ?, ?, ?)",
            (wallet.id, wallet.balance, wallet.virtual_account, _to_db_time(updated_at), wallet.user_id),
        )
    return replace(wallet, id=cur.lastrowid, updated_at=updated_at)


def insert_transaction(conn: sqlite3.Connection, transaction: Transaction) -> Transaction:
    """Store a transaction, stamping its creation time if unset, and return it with its id."""
    created_at = transaction.created_at or datetime.now()
    with conn:
        cur = conn.execute(
            "INSERT INTO transactions (id, amount, created_at, type, recipient_bank,"
            " recipient_name, description, wallet_id) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            (
                transaction.id,
                transaction.amount,
                _to_db_time(created_at),
                transaction.type.value,
                transaction.recipient_bank,
                transaction.recipient_name,
                transaction.description,
                transaction.wallet_id,
            ),
        )
    return replace(transaction, id=cur.lastrowid, created_at=created_at)