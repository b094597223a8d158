"""HTTP surface tests against an isolated app per test."""

import pytest
from fastapi.testclient import TestClient

from wallet_registry.main import create_app
from wallet_registry.modules.wallets import ASSETS, WalletService

EMPTY_BALANCES = {symbol: 0 for symbol in ASSETS}


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Wallet backend running"


def test_cors_allows_any_origin(client):
    response = client.get("/", headers={"Origin": "https://example.org"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_list_assets(client):
    assert client.get("/assets").json() == {"success": True, "assets": list(ASSETS)}


class TestRegister:
    def test_register_with_name(self, client):
        response = client.post("/register", json={"name": "Khush"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        wallet = body["wallet"]
        assert wallet["name"] == "Khush"
        assert wallet["address"].startswith("WALLET_")
        assert wallet["balances"] == EMPTY_BALANCES
        assert wallet["transactions"] == []

    @pytest.mark.parametrize("kwargs", [{"json": {}}, {"json": {"name": ""}}, {"json": {"name": None}}, {}])
    def test_register_defaults_name(self, client, kwargs):
        response = client.post("/register", **kwargs)
        assert response.status_code == 200
        assert response.json()["wallet"]["name"] == "Unnamed"

    @pytest.mark.parametrize("name", [42, True, ["Khush"], {"first": "Khush"}])
    def test_register_non_string_name_falls_back_to_default(self, client, name):
        response = client.post("/register", json={"name": name})
        assert response.status_code == 200
        assert response.json()["wallet"]["name"] == "Unnamed"

    def test_registered_wallets_are_listed(self, client, register):
        first = register("a")
        second = register()
        body = client.get("/wallets").json()
        assert body["total"] == 2
        assert body["wallets"] == [
            {"address": first, "name": "a"},
            {"address": second, "name": "Unnamed"},
        ]


class TestGetWallet:
    def test_unknown_wallet(self, client):
        response = client.get("/wallet/WALLET_NOPE")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Wallet not found"}

    def test_repeated_reads_are_identical(self, client, register, credit):
        address = register()
        credit(address, 3, "ETH")

        first = client.get(f"/wallet/{address}").json()
        second = client.get(f"/wallet/{address}").json()
        assert first == second
        assert len(first["wallet"]["transactions"]) == 1

    def test_transactions_endpoint(self, client, register, credit):
        address = register()
        credit(address, "2.5", "SOL")

        body = client.get(f"/wallet/{address}/transactions").json()
        assert body["success"] is True
        assert body["address"] == address
        [record] = body["transactions"]
        assert record["type"] == "ADMIN_CREDIT"
        assert record["amount"] == 2.5
        assert record["from"] == "ADMIN"
        assert record["to"] == address

    def test_transactions_endpoint_unknown_wallet(self, client):
        response = client.get("/wallet/WALLET_NOPE/transactions")
        assert response.status_code == 404
        assert response.json()["error"] == "Wallet not found"


class TestAdminCredit:
    def test_credit(self, client, register):
        address = register()
        response = client.post("/admin/credit", json={"address": address, "asset": "BTC", "amount": 100})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "wallet": {"address": address, "balances": {**EMPTY_BALANCES, "BTC": 100}},
        }
        [record] = client.get(f"/wallet/{address}").json()["wallet"]["transactions"]
        assert record["type"] == "ADMIN_CREDIT"
        assert record["asset"] == "BTC"
        assert record["amount"] == 100
        assert record["from"] == "ADMIN"
        assert record["to"] == address
        assert record["time"].endswith("Z")

    def test_unknown_wallet(self, client):
        response = client.post("/admin/credit", json={"address": "WALLET_NOPE", "asset": "BTC", "amount": 1})
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Wallet not found"}

    def test_empty_body_is_wallet_not_found(self, client):
        response = client.post("/admin/credit")
        assert response.status_code == 404

    @pytest.mark.parametrize(
        "asset, amount, error",
        [
            ("XRP", 1, "Unknown asset symbol"),
            ("btc", 1, "Unknown asset symbol"),
            (None, 1, "Unknown asset symbol"),
            ("BTC", 0, "Invalid amount"),
            ("BTC", -3, "Invalid amount"),
            ("BTC", "ten", "Invalid amount"),
            ("BTC", None, "Invalid amount"),
            ("BTC", True, "Invalid amount"),
        ],
    )
    def test_rejected_credit(self, client, register, asset, amount, error):
        address = register()
        response = client.post("/admin/credit", json={"address": address, "asset": asset, "amount": amount})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": error}
        wallet = client.get(f"/wallet/{address}").json()["wallet"]
        assert wallet["balances"] == EMPTY_BALANCES
        assert wallet["transactions"] == []

    @pytest.mark.parametrize("amount", ["1e999999", "1e999999999", "1000000000000000000", 1e18])
    def test_huge_amount_is_rejected(self, client, register, amount):
        address = register()
        response = client.post("/admin/credit", json={"address": address, "asset": "BTC", "amount": amount})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid amount"}
        wallet = client.get(f"/wallet/{address}").json()["wallet"]
        assert wallet["balances"] == EMPTY_BALANCES
        assert wallet["transactions"] == []

    def test_large_and_tiny_credits_add_exactly(self, client, register):
        address = register()
        client.post("/admin/credit", json={"address": address, "asset": "BTC", "amount": "999999999999999999"})
        response = client.post("/admin/credit", json={"address": address, "asset": "BTC", "amount": "0.00000001"})

        assert response.status_code == 200
        body = client.get(f"/wallet/{address}/transactions").json()
        assert [tx["amount"] for tx in body["transactions"]] == [999999999999999999, 1e-08]

    def test_trailing_zeros_are_not_excess_precision(self, client, register):
        address = register()
        response = client.post("/admin/credit", json={"address": address, "asset": "ETH", "amount": "5.0000000000"})
        assert response.status_code == 200
        assert response.json()["wallet"]["balances"]["ETH"] == 5

    def test_fractional_balances_serialise_as_numbers(self, client, register):
        address = register()
        client.post("/admin/credit", json={"address": address, "asset": "USDC", "amount": "0.1"})
        response = client.post("/admin/credit", json={"address": address, "asset": "USDC", "amount": 0.2})
        assert response.json()["wallet"]["balances"]["USDC"] == 0.3


class TestSend:
    def test_send(self, client, register, credit):
        sender = register("Khush")
        recipient = register()
        credit(sender, 100)

        response = client.post("/send", json={"from": sender, "to": recipient, "asset": "BTC", "amount": 40})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "fromWallet": {"address": sender, "balances": {**EMPTY_BALANCES, "BTC": 60}},
            "toWallet": {"address": recipient, "balances": {**EMPTY_BALANCES, "BTC": 40}},
        }
        sent = client.get(f"/wallet/{sender}").json()["wallet"]["transactions"][-1]
        [received] = client.get(f"/wallet/{recipient}").json()["wallet"]["transactions"]
        assert sent["type"] == "SEND"
        assert received["type"] == "RECEIVE"
        sent.pop("type")
        received.pop("type")
        assert sent == received
        assert sent["from"] == sender
        assert sent["to"] == recipient

    @pytest.mark.parametrize(
        "payload, error",
        [
            ({"from": "WALLET_NOPE", "to": "WALLET_NOPE", "asset": "BTC", "amount": 1}, "Sender wallet not found"),
            ({}, "Sender wallet not found"),
        ],
    )
    def test_unknown_sender(self, client, payload, error):
        response = client.post("/send", json=payload)
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": error}

    def test_unknown_recipient(self, client, register, credit):
        sender = register()
        credit(sender, 5)
        response = client.post("/send", json={"from": sender, "to": "WALLET_NOPE", "asset": "BTC", "amount": 1})
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Recipient wallet not found"}
        assert client.get(f"/wallet/{sender}").json()["wallet"]["balances"]["BTC"] == 5

    @pytest.mark.parametrize(
        "asset, amount, error",
        [
            ("XRP", 1, "Unknown asset symbol"),
            ("BTC", 0, "Invalid amount"),
            ("BTC", "-1", "Invalid amount"),
            ("BTC", "abc", "Invalid amount"),
            ("BTC", 11, "Insufficient balance"),
            ("ETH", 1, "Insufficient balance"),
        ],
    )
    def test_rejected_send_leaves_state_unchanged(self, client, register, credit, asset, amount, error):
        sender = register()
        recipient = register()
        credit(sender, 10)
        before = (client.get(f"/wallet/{sender}").json(), client.get(f"/wallet/{recipient}").json())

        response = client.post("/send", json={"from": sender, "to": recipient, "asset": asset, "amount": amount})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": error}
        after = (client.get(f"/wallet/{sender}").json(), client.get(f"/wallet/{recipient}").json())
        assert after == before

    def test_self_transfer(self, client, register, credit):
        address = register()
        credit(address, 7, "BNB")

        response = client.post("/send", json={"from": address, "to": address, "asset": "BNB", "amount": 7})

        assert response.status_code == 200
        assert response.json()["fromWallet"]["balances"]["BNB"] == 7
        types = [tx["type"] for tx in client.get(f"/wallet/{address}").json()["wallet"]["transactions"]]
        assert types == ["ADMIN_CREDIT", "SEND", "RECEIVE"]


def test_demo_scenario(client):
    a1 = client.post("/register", json={"name": "Khush"}).json()["wallet"]["address"]
    credited = client.post("/admin/credit", json={"address": a1, "asset": "BTC", "amount": 100}).json()
    assert credited["wallet"]["balances"]["BTC"] == 100

    a2_wallet = client.post("/register", json={}).json()["wallet"]
    a2 = a2_wallet["address"]
    assert a2_wallet["name"] == "Unnamed"
    assert a1 != a2

    sent = client.post("/send", json={"from": a1, "to": a2, "asset": "BTC", "amount": 40}).json()
    assert sent["fromWallet"]["balances"]["BTC"] == 60
    assert sent["toWallet"]["balances"]["BTC"] == 40
    assert len(client.get(f"/wallet/{a1}").json()["wallet"]["transactions"]) == 2
    assert len(client.get(f"/wallet/{a2}").json()["wallet"]["transactions"]) == 1

    rejected = client.post("/send", json={"from": a1, "to": a2, "asset": "BTC", "amount": 1000})
    assert rejected.status_code == 400
    assert rejected.json() == {"success": False, "error": "Insufficient balance"}
    assert client.get(f"/wallet/{a1}").json()["wallet"]["balances"]["BTC"] == 60
    assert client.get(f"/wallet/{a2}").json()["wallet"]["balances"]["BTC"] == 40


class TestErrors:
    def test_malformed_json(self, client):
        response = client.post("/send", content=b"{not json", headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid request body"}

    def test_unknown_route(self, client):
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Not Found"}

    def test_unexpected_error_maps_to_500(self, container, monkeypatch):
        async def boom(self, name=None):
            raise RuntimeError("boom")

        monkeypatch.setattr(WalletService, "register", boom)
        with TestClient(create_app(container), raise_server_exceptions=False) as client:
            response = client.post("/register", json={})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}


def test_apps_do_not_share_registries(container, settings, register):
    from wallet_registry.core.container import ApplicationContainer

    address = register()
    with TestClient(create_app(ApplicationContainer.build(settings))) as other:
        assert other.get(f"/wallet/{address}").status_code == 404
