"""Wallet domain service"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

from wallet_registry.core.config import WalletSettings
from wallet_registry.infrastructure.memory import InMemoryWalletRepository

from .exceptions import InsufficientBalanceError, WalletNotFoundError
from .models import (
    ADMIN_SENDER,
    TransactionRecord,
    TransactionType,
    TransferResult,
    Wallet,
    WalletBalances,
    WalletSnapshot,
    amount_context,
    apply_delta,
    parse_amount,
    parse_asset,
    utc_timestamp,
)
from .repository import WalletRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WalletService:
    repository: WalletRepository
    settings: WalletSettings = field(default_factory=WalletSettings)

    @classmethod
    def in_memory(cls, settings: WalletSettings | None = None) -> "WalletService":
        return cls(InMemoryWalletRepository(), settings or WalletSettings())

    async def register(self, name: Optional[str] = None) -> WalletSnapshot:
        wallet = Wallet(address=self._new_address(), name=name or self.settings.default_name)
        self.repository.add_wallet(wallet)
        logger.info("Registered wallet %s (%s)", wallet.address, wallet.name)
        return WalletSnapshot.of(wallet)

    async def get_wallet(self, address: str) -> WalletSnapshot:
        return WalletSnapshot.of(self._require(address, "wallet"))

    async def list_wallets(self) -> list[WalletSnapshot]:
        return [WalletSnapshot.of(wallet) for wallet in self.repository.list_wallets()]

    async def list_transactions(self, address: str) -> list[TransactionRecord]:
        return list(self._require(address, "wallet").transactions)

    async def admin_credit(self, address: Any, asset: Any, amount: Any) -> WalletBalances:
        wallet = self._require(address, "wallet")
        symbol = parse_asset(asset)
        value = self._parse_amount(amount)

        async with self.repository.lock(wallet.address):
            wallet.balances[symbol] = apply_delta(wallet.balances[symbol], value, self._context())
            wallet.transactions.append(
                TransactionRecord(
                    type=TransactionType.ADMIN_CREDIT,
                    asset=symbol,
                    amount=value,
                    from_address=ADMIN_SENDER,
                    to_address=wallet.address,
                    time=utc_timestamp(),
                )
            )
            logger.info("Credited %s %s to %s", value, symbol, wallet.address)
            return WalletBalances.of(wallet)

    async def send(self, from_address: Any, to_address: Any, asset: Any, amount: Any) -> TransferResult:
        sender = self._require(from_address, "sender")
        recipient = self._require(to_address, "recipient")
        symbol = parse_asset(asset)
        value = self._parse_amount(amount)

        async with self.repository.lock(sender.address, recipient.address):
            if sender.balances[symbol] < value:
                logger.warning(
                    "Rejected transfer of %s %s from %s: balance %s",
                    value,
                    symbol,
                    sender.address,
                    sender.balances[symbol],
                )
                raise InsufficientBalanceError()

            context = self._context()
            debited = apply_delta(sender.balances[symbol], -value, context)
            # Self-transfer credits the debited balance back, leaving it unchanged.
            credited = apply_delta(debited if sender is recipient else recipient.balances[symbol], value, context)
            sender.balances[symbol] = debited
            recipient.balances[symbol] = credited

            time = utc_timestamp()
            sender.transactions.append(self._transfer_record(TransactionType.SEND, sender, recipient, symbol, value, time))
            recipient.transactions.append(
                self._transfer_record(TransactionType.RECEIVE, sender, recipient, symbol, value, time)
            )
            if sender is recipient:
                logger.info("Self-transfer of %s %s on %s", value, symbol, sender.address)
            else:
                logger.info("Transferred %s %s from %s to %s", value, symbol, sender.address, recipient.address)
            return TransferResult(from_wallet=WalletBalances.of(sender), to_wallet=WalletBalances.of(recipient))

    def _parse_amount(self, amount: Any):
        return parse_amount(amount, self.settings.amount_decimals, self.settings.max_amount_digits)

    def _context(self):
        return amount_context(self.settings.amount_decimals, self.settings.max_amount_digits)

    def _require(self, address: Any, role: str) -> Wallet:
        wallet = self.repository.get_wallet(address) if isinstance(address, str) else None
        if wallet is None:
            raise WalletNotFoundError(address, role)
        return wallet

    def _new_address(self) -> str:
        while True:
            token = uuid.uuid4().hex[: self.settings.address_length].upper()
            address = f"{self.settings.address_prefix}{token}"
            if not self.repository.contains(address):
                return address

    @staticmethod
    def _transfer_record(
        type: TransactionType,
        sender: Wallet,
        recipient: Wallet,
        asset: str,
        amount,
        time: str,
    ) -> TransactionRecord:
        return TransactionRecord(
            type=type,
            asset=asset,
            amount=amount,
            from_address=sender.address,
            to_address=recipient.address,
            time=time,
        )
