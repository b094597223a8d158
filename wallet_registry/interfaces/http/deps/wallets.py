"""Wallet related dependency providers."""

from fastapi import Depends, Request

from wallet_registry.core.container import ApplicationContainer
from wallet_registry.modules.wallets import WalletService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_wallet_service(container: ApplicationContainer = Depends(get_container)) -> WalletService:
    return container.wallet_service


__all__ = [
    "get_container",
    "get_wallet_service",
]
