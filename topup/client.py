"""Command-line client that tops up a wallet by a BCA bank transfer."""

from __future__ import annotations

import argparse
import json
import urllib.error
import urllib.request
from typing import Optional, Sequence

DEFAULT_BASE_URL = "http://localhost:3000/api"
SOURCE_ACCOUNT = "1234567890"
BANK_CODE = "014"


class ClientError(Exception):
    """The top-up request could not be made or its answer not read."""


def build_request_body(amount: int, description: str) -> dict:
    """Return the JSON body of a bank top-up from the fixed source account."""
    return {
        "account_number": SOURCE_ACCOUNT,
        "amount": amount,
        "bank_code": BANK_CODE,
        "description": description,
    }


def top_up_bank(
    virtual_account: int,
    amount: int,
    description: str = "",
    base_url: str = DEFAULT_BASE_URL,
) -> dict:
    """Send a bank top-up for ``virtual_account`` and return the decoded response."""
    endpoint = f"{base_url.rstrip('/')}/transactions/topup/bank/{virtual_account}"
    data = json.dumps(build_request_body(amount, description)).encode("utf-8")
    request = urllib.request.Request(
        endpoint, data=data, headers={"Content-Type": "application/json"}, method="POST"
    )
    try:
        with urllib.request.urlopen(request) as response:
            raw = response.read()
    except urllib.error.HTTPError as exc:
        raw = exc.read()
    except (urllib.error.URLError, OSError) as exc:
        raise ClientError(f"Error making request: {exc}") from exc

    try:
        result = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as exc:
        raise ClientError(f"Error decoding response: {exc}") from exc
    if not isinstance(result, dict):
        raise ClientError("Error decoding response: expected a JSON object")
    return result


def _read_int(prompt: str) -> int:
    text = input(prompt).strip()
    try:
        return int(text.split()[0]) if text else 0
    except ValueError:
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for a virtual account, amount and description, then send the top-up."""
    parser = argparse.ArgumentParser(description="Top up a wallet by bank transfer.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL")
    args = parser.parse_args(argv)

    virtual_account = _read_int("Enter virtual account number: ")
    amount = _read_int("Enter amount to transfer: ")
    description = input("Enter description (leave blank for empty): ").strip()
    description = description.split()[0] if description else ""

    try:
        top_up_bank(virtual_account, amount, description, args.base_url)
    except ClientError as exc:
        print(exc)
        return 1 if str(exc).startswith("Error making request") else 0

    print("Successfully transferred")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())