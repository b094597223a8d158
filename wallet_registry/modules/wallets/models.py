"""Domain models for wallet operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Context, Decimal, DecimalException, Inexact, InvalidOperation, Overflow, Rounded
from enum import Enum
from typing import Any, Mapping

from .exceptions import InvalidAmountError, UnknownAssetError

ADMIN_SENDER = "ADMIN"


class AssetSymbol(str, Enum):
    BTC = "BTC"
    ETH = "ETH"
    USDT = "USDT"
    SOL = "SOL"
    BNB = "BNB"
    DOGE = "DOGE"
    LTC = "LTC"
    USDC = "USDC"


ASSETS: tuple[str, ...] = tuple(asset.value for asset in AssetSymbol)


class TransactionType(str, Enum):
    ADMIN_CREDIT = "ADMIN_CREDIT"
    SEND = "SEND"
    RECEIVE = "RECEIVE"


@dataclass(slots=True, frozen=True)
class TransactionRecord:
    type: TransactionType
    asset: str
    amount: Decimal
    from_address: str
    to_address: str
    time: str


def empty_balances() -> dict[str, Decimal]:
    return {symbol: Decimal(0) for symbol in ASSETS}


@dataclass(slots=True)
class Wallet:
    address: str
    name: str
    balances: dict[str, Decimal] = field(default_factory=empty_balances)
    transactions: list[TransactionRecord] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class WalletSnapshot:
    """Point-in-time copy of a wallet, safe to hand out of the registry."""

    address: str
    name: str
    balances: Mapping[str, Decimal]
    transactions: tuple[TransactionRecord, ...]

    @classmethod
    def of(cls, wallet: Wallet) -> "WalletSnapshot":
        return cls(
            address=wallet.address,
            name=wallet.name,
            balances=dict(wallet.balances),
            transactions=tuple(wallet.transactions),
        )


@dataclass(slots=True, frozen=True)
class WalletBalances:
    address: str
    balances: Mapping[str, Decimal]

    @classmethod
    def of(cls, wallet: Wallet) -> "WalletBalances":
        return cls(address=wallet.address, balances=dict(wallet.balances))


@dataclass(slots=True, frozen=True)
class TransferResult:
    from_wallet: WalletBalances
    to_wallet: WalletBalances


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_asset(value: Any) -> str:
    if not isinstance(value, str) or value not in ASSETS:
        raise UnknownAssetError()
    return value


def amount_context(decimals: int = 8, max_digits: int = 18) -> Context:
    """Balance arithmetic context: results are exact or the operation raises, never rounded."""
    return Context(prec=max_digits + decimals + 2, traps=[InvalidOperation, Overflow, Inexact, Rounded])


def parse_amount(value: Any, decimals: int = 8, max_digits: int = 18) -> Decimal:
    """Convert a JSON number or numeric string into a positive fixed-point amount.

    The result is quantized to ``decimals`` fractional digits. Rejects booleans,
    non-numeric text, NaN/infinity, values <= 0, values of ``max_digits`` or more
    integer digits and values that need more than ``decimals`` fractional digits.
    """
    if value is None or isinstance(value, bool):
        raise InvalidAmountError()
    if isinstance(value, (int, Decimal)):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidAmountError() from None
    else:
        raise InvalidAmountError()

    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError()
    if amount.adjusted() >= max_digits:
        raise InvalidAmountError()

    # Trailing zeros are fine; only digits that quantizing would drop are not.
    fixed = amount.quantize(Decimal(1).scaleb(-decimals), context=Context(prec=max_digits + decimals + 2))
    if fixed != amount:
        raise InvalidAmountError()
    return fixed


def apply_delta(balance: Decimal, delta: Decimal, context: Context) -> Decimal:
    """``balance + delta`` under ``context``; a result that cannot be held exactly is rejected."""
    try:
        return context.add(balance, delta)
    except DecimalException:
        raise InvalidAmountError() from None
