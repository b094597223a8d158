import pytest
from fastapi.testclient import TestClient

from wallet_registry.core.config import Settings
from wallet_registry.core.container import ApplicationContainer
from wallet_registry.main import create_app
from wallet_registry.modules.wallets import WalletService


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, environment="test")


@pytest.fixture
def service(settings) -> WalletService:
    return WalletService.in_memory(settings.wallet)


@pytest.fixture
def container(settings) -> ApplicationContainer:
    return ApplicationContainer.build(settings)


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register a wallet over HTTP and return its address."""

    def _register(name=None):
        body = {} if name is None else {"name": name}
        response = client.post("/register", json=body)
        assert response.status_code == 200
        return response.json()["wallet"]["address"]

    return _register


@pytest.fixture
def credit(client):
    def _credit(address, amount, asset="BTC"):
        response = client.post("/admin/credit", json={"address": address, "asset": asset, "amount": amount})
        assert response.status_code == 200, response.json()
        return response.json()

    return _credit
