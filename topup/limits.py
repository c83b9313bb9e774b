"""Per-transaction, daily and monthly top-up limits."""

from __future__ import annotations

import sqlite3
from datetime import date, timedelta
from typing import Optional

MIN_TOP_UP = 1_000
MAX_TOP_UP = 2_000_000
DAILY_LIMIT = 5_000_000
MONTHLY_LIMIT = 20_000_000


class LimitError(ValueError):
    """A top-up breaks one of the limits, or the limit could not be computed."""


def check_min_max_top_up(amount: int) -> None:
    """Reject amounts outside the per-transaction range."""
    if amount < MIN_TOP_UP:
        raise LimitError("Amount is less than the minimum top up limit of Rp 1,000")
    if amount > MAX_TOP_UP:
        raise LimitError("Amount exceeds the maximum top up limit of Rp 2,000,000")


def _total_between(conn: sqlite3.Connection, wallet_id: int, start: date, end: date) -> int:
    row = conn.execute(
        "SELECT COALESCE(SUM(amount), 0) FROM transactions"
        " WHERE wallet_id = ? AND created_at >= ? AND created_at < ?",
        (wallet_id, start.isoformat(), end.isoformat()),
    ).fetchone()
    return int(row[0])


def check_daily_limit(
    conn: sqlite3.Connection, amount: int, wallet_id: int, today: Optional[date] = None
) -> int:
    """Return the day's total including ``amount``, raising if it exceeds the daily limit."""
    today = today or date.today()
    try:
        total = _total_between(conn, wallet_id, today, today + timedelta(days=1))
    except sqlite3.Error:
        raise LimitError("Failed to calculate daily limit") from None
    total += amount
    if total > DAILY_LIMIT:
        raise LimitError(
            "Total daily transaction exceeds/will exceed the daily limit of Rp 5,000,000"
        )
    return total


def check_monthly_limit(
    conn: sqlite3.Connection, amount: int, wallet_id: int, today: Optional[date] = None
) -> int:
    """Return the month's total including ``amount``, raising if it exceeds the monthly limit."""
    today = today or date.today()
    start = today.replace(day=1)
    # The window ends before the last day of the month; that day is not counted.
    end = (start + timedelta(days=32)).replace(day=1) - timedelta(days=1)
    try:
        total = _total_between(conn, wallet_id, start, end)
    except sqlite3.Error:
        raise LimitError("Failed to calculate monthly limit") from None
    total += amount
    if total > MONTHLY_LIMIT:
        raise LimitError(
            "Total monthly transaction exceeds/will exceed the monthly limit of Rp 20,000,000"
        )
    return total