import re
from datetime import datetime, timedelta

import pytest

from topup.app import create_app
from topup.database import connect, insert_transaction, insert_user, insert_wallet, migrate
from topup.models import Transaction, TransactionType, User, Wallet
from topup.spec import swagger_spec


@pytest.fixture
def conn():
    c = connect(":memory:")
    migrate(c)
    yield c
    c.close()


@pytest.fixture
def seeded(conn):
    insert_user(conn, User(id=1, first_name="John", last_name="Doe"))
    insert_user(conn, User(id=2, first_name="Jane", last_name="Smith"))
    insert_user(conn, User(id=3, first_name="Alice", last_name="Johnson"))
    insert_wallet(conn, Wallet(id=1, balance=0, virtual_account=1234567890, user_id=1))
    insert_wallet(conn, Wallet(id=2, balance=5000000, virtual_account=9876543210, user_id=2))
    insert_wallet(conn, Wallet(id=3, balance=20000000, virtual_account=1122334455, user_id=3))
    insert_transaction(
        conn, Transaction(amount=5000000, type=TransactionType.DIRECT, wallet_id=2)
    )
    insert_transaction(
        conn,
        Transaction(
            amount=20000000,
            type=TransactionType.DIRECT,
            wallet_id=3,
            created_at=datetime.now() - timedelta(days=1),
        ),
    )
    return conn


@pytest.fixture
def client(seeded):
    return create_app(seeded).test_client()


def _direct(client, wallet_id, amount):
    return client.post(f"/api/transactions/topup/direct/{wallet_id}", json={"amount": amount})


def test_successful_direct_top_up(client):
    resp = _direct(client, 1, 50000)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["payload"]["transaction"]["amount"] == 50000
    assert body["payload"]["transaction"]["type"] == "DIRECT"

    wallet = client.get("/api/wallets/1").get_json()["payload"]["wallet"]
    assert wallet["balance"] == 50000

    transactions = client.get("/api/transactions/wallet/1").get_json()["payload"]["transactions"]
    assert [t["amount"] for t in transactions] == [50000]
    assert transactions[0]["type"] == "DIRECT"


def test_direct_wallet_not_found(client):
    resp = _direct(client, 999, 50000)
    assert resp.status_code == 404
    body = resp.get_json()
    assert body["success"] is False
    assert body["message"] == "Wallet not found"


@pytest.mark.parametrize(
    "wallet_id, amount, message",
    [
        (1, 500, "Amount is less than the minimum top up limit of Rp 1,000"),
        (1, 3000000, "Amount exceeds the maximum top up limit of Rp 2,000,000"),
        (2, 1000000, "Total daily transaction exceeds/will exceed the daily limit of Rp 5,000,000"),
        (
            3,
            1000000,
            "Total monthly transaction exceeds/will exceed the monthly limit of Rp 20,000,000",
        ),
    ],
)
def test_direct_limits(client, wallet_id, amount, message):
    resp = _direct(client, wallet_id, amount)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert body["message"] == message


def test_direct_invalid_body(client):
    resp = client.post(
        "/api/transactions/topup/direct/1", data="not json", content_type="application/json"
    )
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid request"


def test_bank_top_up_success(client):
    resp = client.post(
        "/api/transactions/topup/bank/1234567890",
        json={"account_number": "1234567890", "amount": 50000, "bank_code": "014"},
    )
    assert resp.status_code == 200
    transaction = resp.get_json()["payload"]["transaction"]
    assert transaction["recipient_bank"] == "BCA"
    assert transaction["recipient_name"] == "JOHN DOE"
    assert transaction["type"] == "BANK"
    assert transaction["wallet_id"] == 1
    wallet = client.get("/api/wallets/1").get_json()["payload"]["wallet"]
    assert wallet["balance"] == 50000


def test_bank_invalid_bank_code(client):
    resp = client.post(
        "/api/transactions/topup/bank/1234567890",
        json={"account_number": "1234567890", "amount": 50000, "bank_code": "999"},
    )
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid bank code"


def test_bank_unknown_virtual_account(client):
    resp = client.post(
        "/api/transactions/topup/bank/1",
        json={"account_number": "1234567890", "amount": 50000, "bank_code": "014"},
    )
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Virtual account not found"


def test_users(client):
    users = client.get("/api/users").get_json()["payload"]["users"]
    assert [u["first_name"] for u in users] == ["John", "Jane", "Alice"]
    user = client.get("/api/users/2").get_json()["payload"]["user"]
    assert user["last_name"] == "Smith"
    resp = client.get("/api/users/999")
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "User not found"


def test_no_users(conn):
    resp = create_app(conn).test_client().get("/api/users")
    assert resp.status_code == 404
    assert resp.get_json() == {"success": False, "message": "No users found"}


def test_wallet_lookups(client):
    wallets = client.get("/api/wallets").get_json()["payload"]["wallets"]
    assert [w["id"] for w in wallets] == [1, 2, 3]
    by_user = client.get("/api/wallets/user/3").get_json()["payload"]["wallet"]
    assert by_user["id"] == 3
    va = client.get("/api/wallets/va/2").get_json()["payload"]["virtual_account"]
    assert va == 9876543210
    assert client.get("/api/wallets/va/999").status_code == 404


def test_swagger_document(client):
    resp = client.get("/swagger/doc.json")
    assert resp.status_code == 200
    assert resp.get_json() == swagger_spec()


def test_every_documented_path_is_routed(seeded):
    app = create_app(seeded)
    rules = {
        (rule.rule, method)
        for rule in app.url_map.iter_rules()
        for method in rule.methods
    }
    spec = swagger_spec()
    for path, operations in spec["paths"].items():
        flask_path = spec["basePath"] + re.sub(r"\{(\w+)\}", r"<\1>", path)
        for method in operations:
            assert (flask_path, method.upper()) in rules