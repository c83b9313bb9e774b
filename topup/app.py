"""HTTP application exposing users, wallets and top-ups under /api."""

from __future__ import annotations

import argparse
import sqlite3
from typing import Any, Callable, Optional, Sequence

from flask import Flask, jsonify, request

from topup import handlers
from topup.database import DEFAULT_DSN, connect, migrate
from topup.handlers import ApiError
from topup.spec import swagger_spec

DEFAULT_PORT = 3000


def _respond(call: Callable[[], Any]):
    try:
        payload = call()
    except ApiError as exc:
        return jsonify(success=False, message=exc.message), exc.status
    return jsonify(success=True, payload=payload)


def _json_body() -> bytes:
    if not request.is_json:
        raise ApiError(400, "Invalid request")
    return request.get_data()


def create_app(conn: sqlite3.Connection) -> Flask:
    """Build the application serving requests from the database ``conn``."""
    app = Flask(__name__)

    @app.get("/api/users")
    def all_users():
        return _respond(lambda: handlers.get_all_users(conn))

    @app.get("/api/users/<id>")
    def user_by_id(id):
        return _respond(lambda: handlers.get_user_by_id(conn, id))

    @app.get("/api/wallets")
    def all_wallets():
        return _respond(lambda: handlers.get_all_wallets(conn))

    @app.get("/api/wallets/<id>")
    def wallet_by_id(id):
        return _respond(lambda: handlers.get_wallet_by_id(conn, id))

    @app.get("/api/wallets/user/<id>")
    def wallet_by_user_id(id):
        return _respond(lambda: handlers.get_wallet_by_user_id(conn, id))

    @app.get("/api/wallets/va/<id>")
    def virtual_account_by_wallet_id(id):
        return _respond(lambda: handlers.get_virtual_account_by_wallet_id(conn, id))

    @app.get("/api/transactions/wallet/<id>")
    def transactions_by_wallet_id(id):
        return _respond(lambda: handlers.get_transactions_by_wallet_id(conn, id))

    @app.post("/api/transactions/topup/direct/<id>")
    def top_up_direct(id):
        return _respond(lambda: handlers.top_up_direct(conn, id, _json_body()))

    @app.post("/api/transactions/topup/bank/<va>")
    def top_up_bank(va):
        return _respond(lambda: handlers.top_up_bank(conn, va, _json_body()))

    @app.get("/swagger/doc.json")
    def swagger_doc():
        return jsonify(swagger_spec())

    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve the API on port 3000 from the wallet database."""
    parser = argparse.ArgumentParser(description="Run the top-up API server.")
    parser.add_argument("--db", default=DEFAULT_DSN, help="SQLite database file")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument(
        "--migrate", action="store_true", help="create the tables if they are missing"
    )
    args = parser.parse_args(argv)

    conn = connect(args.db)
    try:
        if args.migrate:
            migrate(conn)
        create_app(conn).run(host=args.host, port=args.port)
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())