"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from wallet_registry.core.config import Settings, get_settings
from wallet_registry.modules.wallets import WalletService


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    wallet_service: WalletService

    @classmethod
    def build(cls, settings: Settings | None = None) -> "ApplicationContainer":
        """Create a container with its own, empty wallet registry."""
        settings = settings or get_settings()
        return cls(settings=settings, wallet_service=WalletService.in_memory(settings.wallet))


@lru_cache()
def get_container() -> ApplicationContainer:
    return ApplicationContainer.build()


__all__ = ["ApplicationContainer", "get_container"]
