# topup

A small e-wallet top-up service backed by SQLite. Users own wallets. Each
wallet has a balance and a virtual account number. There are two ways to top up
a wallet:

* **directly**, by wallet ID, or
* **by bank transfer** to the wallet's virtual account, from a known bank
  account at an accepted bank.

Every accepted top-up is stored as a transaction, and the amount is added to the
wallet's balance. Each top-up is checked against these limits:

| Limit                 | Value           |
|-----------------------|-----------------|
| Minimum per top-up    | Rp 1,000        |
| Maximum per top-up    | Rp 2,000,000    |
| Daily total           | Rp 5,000,000    |
| Monthly total         | Rp 20,000,000   |

The daily total counts the wallet's transactions made on the current calendar
day. The monthly total counts the transactions from the first day of the current
month up to the last day of the month. Transactions on the last day itself are
not counted.

Bank transfers are accepted from the bank codes `014` (BCA), `009` (BNI),
`008` (MANDIRI) and `002` (BRI). The source account number must be 10 to 15
characters long and must be one of the account holders the package knows.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Running the server

```
topup-server --migrate
```

Options:

* `--db PATH`: the SQLite database file. The default is `ewallet.db`.
* `--host ADDR`: the address to listen on. The default is `0.0.0.0`.
* `--port N`: the port to listen on. The default is `3000`.
* `--migrate`: create the `users`, `wallets` and `transactions` tables if they
  are missing.

The server serves this JSON API under `/api`:

| Method | Path                                    | Purpose                               |
|--------|-----------------------------------------|---------------------------------------|
| GET    | `/api/users`                            | all users (404 if there are none)     |
| GET    | `/api/users/<id>`                       | one user                              |
| GET    | `/api/wallets`                          | all wallets (possibly an empty list)  |
| GET    | `/api/wallets/<id>`                     | one wallet                            |
| GET    | `/api/wallets/user/<id>`                | the wallet of a user                  |
| GET    | `/api/wallets/va/<id>`                  | the virtual account of a wallet       |
| GET    | `/api/transactions/wallet/<id>`         | the transactions of a wallet          |
| POST   | `/api/transactions/topup/direct/<id>`   | direct top-up, body `{"amount": ...}` |
| POST   | `/api/transactions/topup/bank/<va>`     | bank transfer top-up                  |

The two POST routes need a `Content-Type: application/json` request. A bank
transfer body looks like this:

```json
{"bank_code": "014", "account_number": "...", "amount": 50000, "description": "rent"}
```

Every response is a JSON object. On success it holds `"success": true` and a
`"payload"`. On failure it holds `"success": false` and a `"message"`, and the
status is 400, 404 or 500.

The API description, in Swagger 2.0 form, is served as JSON at
`/swagger/doc.json`.

## Sending a bank top-up from the command line

```
topup-bank
```

The command asks for the virtual account number, the amount and an optional
description. Only the first word of the description is kept. It then posts the
transfer to the server, from a fixed source account at BCA (`014`). Use
`--base-url` to point it at a server other than `http://localhost:3000/api`.

The command prints `Successfully transferred` once the server answers with a
JSON object, even when that answer is a rejection. It exits with status 1 only
when the request cannot be made at all.

## Using it from Python

```python
from topup.database import connect, migrate
from topup.app import create_app

conn = connect("ewallet.db")
migrate(conn)
app = create_app(conn)
```

Users, wallets and transactions can be stored with
`topup.database.insert_user`, `insert_wallet` and `insert_transaction`. These
take the records from `topup.models` (`User`, `Wallet`, `Transaction`).

You can also call the handlers directly. They return plain data and raise
`topup.handlers.ApiError` (with `status` and `message`) when a request fails.
The request body can be a mapping, JSON text or bytes:

```python
from topup import handlers

handlers.top_up_direct(conn, 1, {"amount": 50000})
handlers.get_transactions_by_wallet_id(conn, 1)
```

The checks are also available on their own.
`topup.limits.check_min_max_top_up`, `check_daily_limit` and
`check_monthly_limit` raise `topup.limits.LimitError`. The daily and monthly
checks return the new total.
`topup.validation.validate_bank` returns the bank name, and
`validate_account_number` returns the account holder. Both raise
`topup.validation.ValidationError`.

`topup.spec.swagger_spec` returns the API description as a dictionary.

## What it does not do

* The HTTP API has no routes to create, change or delete users or wallets. The
  database starts empty. Add users and wallets with the `topup.database`
  functions.
* The server publishes the API description as JSON only. It has no interactive
  documentation page.
* The set of accepted source accounts is fixed in `topup.validation`. No real
  bank is contacted.

## Tests

```
pytest
```