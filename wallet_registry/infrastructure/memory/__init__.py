"""Process-local storage backends."""

from .wallet_repository import InMemoryWalletRepository

__all__ = ["InMemoryWalletRepository"]
