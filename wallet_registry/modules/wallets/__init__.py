"""Wallet domain exports"""

from .exceptions import (
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidInputError,
    UnknownAssetError,
    WalletError,
    WalletNotFoundError,
)
from .models import (
    ADMIN_SENDER,
    ASSETS,
    AssetSymbol,
    TransactionRecord,
    TransactionType,
    TransferResult,
    Wallet,
    WalletBalances,
    WalletSnapshot,
)
from .service import WalletService

__all__ = [
    "ADMIN_SENDER",
    "ASSETS",
    "AssetSymbol",
    "InsufficientBalanceError",
    "InvalidAmountError",
    "InvalidInputError",
    "TransactionRecord",
    "TransactionType",
    "TransferResult",
    "UnknownAssetError",
    "Wallet",
    "WalletBalances",
    "WalletError",
    "WalletNotFoundError",
    "WalletService",
    "WalletSnapshot",
]
