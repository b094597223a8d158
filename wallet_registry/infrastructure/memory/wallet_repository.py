"""In-memory implementation of the wallet repository."""

from __future__ import annotations

import asyncio
from contextlib import AsyncExitStack, asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

if TYPE_CHECKING:
    from wallet_registry.modules.wallets.models import Wallet


class InMemoryWalletRepository:
    """Wallet registry keyed by address, held for the lifetime of the process.

    Mutations are serialised per address through ``lock``; locks for several
    addresses are always taken in sorted order so opposite transfers between the
    same pair of wallets cannot deadlock.
    """

    def __init__(self) -> None:
        self._wallets: dict[str, Wallet] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def get_wallet(self, address: str) -> Wallet | None:
        return self._wallets.get(address)

    def add_wallet(self, wallet: Wallet) -> Wallet:
        if wallet.address in self._wallets:
            raise ValueError(f"address already registered: {wallet.address}")
        self._wallets[wallet.address] = wallet
        self._locks[wallet.address] = asyncio.Lock()
        return wallet

    def contains(self, address: str) -> bool:
        return address in self._wallets

    def list_wallets(self) -> list[Wallet]:
        return list(self._wallets.values())

    def __len__(self) -> int:
        return len(self._wallets)

    @asynccontextmanager
    async def lock(self, *addresses: str) -> AsyncIterator[None]:
        async with AsyncExitStack() as stack:
            for address in sorted(set(addresses)):
                await stack.enter_async_context(self._locks[address])
            yield
