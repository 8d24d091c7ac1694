from fastapi.testclient import TestClient
from sqlalchemy import exc as sa_exc
from sqlmodel import Session


def _open(client: TestClient, first_name: str, last_name: str, balance: int) -> dict:
    response = client.post(
        "/accounts",
        json={"first_name": first_name, "last_name": last_name, "balance": balance},
    )
    assert response.status_code == 201
    return response.json()


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_create_deposit_withdraw_scenario(client: TestClient) -> None:
    account = _open(client, "Ada", "Lovelace", 100)
    number = account["account_number"]
    assert account["first_name"] == "Ada"
    assert account["last_name"] == "Lovelace"
    assert account["balance"] == 100

    overdraft = client.post(f"/accounts/{number}/withdraw", json={"amount": 150})
    assert overdraft.status_code == 409
    assert overdraft.json()["detail"] == "Overdraft attempt, balance: 100, amount: 150"
    assert client.get(f"/accounts/{number}").json()["balance"] == 100

    deposit = client.post(f"/accounts/{number}/deposit", json={"amount": 50})
    assert deposit.status_code == 200
    assert deposit.json()["balance"] == 150

    withdraw = client.post(f"/accounts/{number}/withdraw", json={"amount": 150})
    assert withdraw.status_code == 200
    assert withdraw.json()["balance"] == 0


def test_find_unknown_account_returns_404(client: TestClient) -> None:
    response = client.get("/accounts/4242")
    assert response.status_code == 404
    assert response.json()["detail"] == "No account with number 4242"


def test_deposit_to_unknown_account_returns_404(client: TestClient) -> None:
    response = client.post("/accounts/4242/deposit", json={"amount": 10})
    assert response.status_code == 404


def test_withdraw_from_unknown_account_returns_404(client: TestClient) -> None:
    response = client.post("/accounts/4242/withdraw", json={"amount": 10})
    assert response.status_code == 404


def test_negative_opening_balance_is_accepted(client: TestClient) -> None:
    account = _open(client, "Charles", "Babbage", -25)
    assert account["balance"] == -25


def test_account_numbers_are_unique(client: TestClient) -> None:
    first = _open(client, "Grace", "Hopper", 0)
    second = _open(client, "Grace", "Hopper", 0)
    assert first["account_number"] != second["account_number"]


def test_non_integer_amount_is_rejected(client: TestClient) -> None:
    number = _open(client, "Alan", "Turing", 10)["account_number"]
    response = client.post(f"/accounts/{number}/deposit", json={"amount": "lots"})
    assert response.status_code == 422


def _failing_commit(error: Exception):
    def _raise(self, *args, **kwargs):
        raise error

    return _raise


def test_storage_unavailable_maps_to_503(client: TestClient, monkeypatch) -> None:
    number = _open(client, "Edsger", "Dijkstra", 10)["account_number"]
    failure = sa_exc.OperationalError("UPDATE account", {}, Exception("database is down"))
    monkeypatch.setattr(Session, "commit", _failing_commit(failure))

    response = client.post(f"/accounts/{number}/deposit", json={"amount": 5})
    assert response.status_code == 503
    assert "database is down" in response.json()["detail"]

    monkeypatch.undo()
    assert client.get(f"/accounts/{number}").json()["balance"] == 10


def test_storage_timeout_maps_to_504(client: TestClient, monkeypatch) -> None:
    number = _open(client, "Barbara", "Liskov", 10)["account_number"]
    failure = sa_exc.TimeoutError("QueuePool limit of size 5 overflow 10 reached")
    monkeypatch.setattr(Session, "commit", _failing_commit(failure))

    response = client.post(f"/accounts/{number}/withdraw", json={"amount": 5})
    assert response.status_code == 504
    assert "QueuePool limit" in response.json()["detail"]

    monkeypatch.undo()
    assert client.get(f"/accounts/{number}").json()["balance"] == 10


def test_oversized_opening_balance_maps_to_500(client: TestClient) -> None:
    response = client.post(
        "/accounts",
        json={"first_name": "Ada", "last_name": "Lovelace", "balance": 10**20},
    )
    assert response.status_code == 500
    assert "too large" in response.json()["detail"]


def test_oversized_deposit_maps_to_500(client: TestClient) -> None:
    number = _open(client, "Ada", "Lovelace", 100)["account_number"]

    response = client.post(f"/accounts/{number}/deposit", json={"amount": 10**20})
    assert response.status_code == 500
    assert response.json()["detail"]

    assert client.get(f"/accounts/{number}").json()["balance"] == 100
