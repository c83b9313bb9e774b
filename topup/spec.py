"""OpenAPI (Swagger 2.0) description of the HTTP API."""

from __future__ import annotations

DEFAULT_HOST = "localhost:3000"
DEFAULT_BASE_PATH = "/api"

_REASONS = {
    200: "OK",
    400: "Bad Request",
    404: "Not Found",
    500: "Internal Server Error",
}


def _responses(*codes: int) -> dict:
    return {
        str(code): {"description": _REASONS[code], "schema": {"type": "string"}}
        for code in codes
    }


def _path_param(name: str, description: str) -> dict:
    return {
        "type": "integer",
        "description": description,
        "name": name,
        "in": "path",
        "required": True,
    }


def _body_param(name: str, description: str, definition: str) -> dict:
    return {
        "description": description,
        "name": name,
        "in": "body",
        "required": True,
        "schema": {"$ref": f"#/definitions/{definition}"},
    }


def _get(summary: str, tag: str, parameters: list, codes: tuple) -> dict:
    operation = {
        "description": summary,
        "produces": ["application/json"],
        "tags": [tag],
        "summary": summary,
    }
    if parameters:
        operation["parameters"] = parameters
    operation["responses"] = _responses(*codes)
    return {"get": operation}


def _post(summary: str, tag: str, parameters: list, codes: tuple) -> dict:
    return {
        "post": {
            "description": summary,
            "consumes": ["application/json"],
            "produces": ["application/json"],
            "tags": [tag],
            "summary": summary,
            "parameters": parameters,
            "responses": _responses(*codes),
        }
    }


def _definitions() -> dict:
    return {
        "models.BankTransactionRequest": {
            "type": "object",
            "properties": {
                "account_number": {"type": "string"},
                "amount": {"type": "integer"},
                "bank_code": {"type": "string"},
                "description": {"type": "string"},
            },
        },
        "models.TransactionAmount": {
            "type": "object",
            "properties": {"amount": {"type": "integer"}},
        },
    }


def swagger_spec(host: str = DEFAULT_HOST, base_path: str = DEFAULT_BASE_PATH) -> dict:
    """Return the API description as a JSON-serialisable mapping."""
    wallet_id = _path_param("id", "Wallet ID")
    user_id = _path_param("id", "User ID")
    paths = {
        "/transactions/topup/bank/{va}": _post(
            "Top up wallet via bank transfer",
            "transactions",
            [
                _path_param("va", "Virtual Account Number"),
                _body_param("bank", "Bank transaction request", "models.BankTransactionRequest"),
            ],
            (200, 400, 404, 500),
        ),
        "/transactions/topup/direct/{id}": _post(
            "Top up wallet directly",
            "transactions",
            [
                dict(wallet_id),
                _body_param("amount", "Amount to top up", "models.TransactionAmount"),
            ],
            (200, 400, 404, 500),
        ),
        "/transactions/wallet/{id}": _get(
            "Get transactions by wallet ID", "transactions", [dict(wallet_id)], (200, 404, 500)
        ),
        "/users": _get("Get all users", "users", [], (200, 404, 500)),
        "/users/{id}": _get("Get user by ID", "users", [dict(user_id)], (200, 404)),
        "/wallets": _get("Get all wallets", "wallets", [], (200, 404, 500)),
        "/wallets/user/{id}": _get(
            "Get wallet by User ID", "wallets", [dict(user_id)], (200, 404)
        ),
        "/wallets/va/{id}": _get(
            "Get virtual account by Wallet ID", "wallets", [dict(wallet_id)], (200, 404)
        ),
        "/wallets/{id}": _get("Get wallet by ID", "wallets", [dict(wallet_id)], (200, 404)),
    }
    return {
        "schemes": [],
        "swagger": "2.0",
        "info": {
            "description": "This is a sample top-up system server.",
            "title": "Top Up System API",
            "contact": {},
            "version": "1.0",
        },
        "host": host,
        "basePath": base_path,
        "paths": paths,
        "definitions": _definitions(),
    }