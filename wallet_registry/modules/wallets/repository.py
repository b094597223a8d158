"""Repository protocol for wallet storage."""

from __future__ import annotations

from typing import AsyncContextManager, Protocol, Sequence

from .models import Wallet


class WalletRepository(Protocol):
    def get_wallet(self, address: str) -> Wallet | None:
        ...

    def add_wallet(self, wallet: Wallet) -> Wallet:
        ...

    def contains(self, address: str) -> bool:
        ...

    def list_wallets(self) -> Sequence[Wallet]:
        ...

    def lock(self, *addresses: str) -> AsyncContextManager[None]:
        """Hold the mutation locks of every given address."""
        ...
