"""Pydantic schemas used across the project."""
from decimal import Decimal
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from wallet_registry.modules.wallets import (
    TransactionRecord,
    TransferResult,
    WalletBalances,
    WalletSnapshot,
)


def _amount_to_number(value: Decimal) -> Union[int, float]:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Balances and amounts are fixed-point internally and plain JSON numbers on the wire.
Amount = Annotated[Decimal, PlainSerializer(_amount_to_number, return_type=Union[int, float])]


class RegisterRequest(BaseModel):
    name: Any = None

    @property
    def label(self) -> Optional[str]:
        """The name when it is a string; anything else falls back to the default name."""
        return self.name if isinstance(self.name, str) else None


class AdminCreditRequest(BaseModel):
    address: Any = None
    asset: Any = None
    amount: Any = None


class SendRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_address: Any = Field(default=None, alias="from")
    to_address: Any = Field(default=None, alias="to")
    asset: Any = None
    amount: Any = None


class TransactionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str
    asset: str
    amount: Amount
    from_address: str = Field(..., alias="from")
    to_address: str = Field(..., alias="to")
    time: str

    @classmethod
    def from_record(cls, record: TransactionRecord) -> "TransactionResponse":
        return cls(
            type=record.type.value,
            asset=record.asset,
            amount=record.amount,
            from_address=record.from_address,
            to_address=record.to_address,
            time=record.time,
        )


class WalletBalancesResponse(BaseModel):
    address: str
    balances: dict[str, Amount]

    @classmethod
    def from_domain(cls, wallet: WalletBalances) -> "WalletBalancesResponse":
        return cls(address=wallet.address, balances=dict(wallet.balances))


class WalletDetail(WalletBalancesResponse):
    name: str
    transactions: list[TransactionResponse] = Field(default_factory=list)

    @classmethod
    def from_snapshot(cls, wallet: WalletSnapshot) -> "WalletDetail":
        return cls(
            address=wallet.address,
            name=wallet.name,
            balances=dict(wallet.balances),
            transactions=[TransactionResponse.from_record(record) for record in wallet.transactions],
        )


class WalletSummary(BaseModel):
    address: str
    name: str


class WalletResponse(BaseModel):
    success: bool = True
    wallet: WalletDetail


class AdminCreditResponse(BaseModel):
    success: bool = True
    wallet: WalletBalancesResponse


class SendResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    from_wallet: WalletBalancesResponse = Field(..., alias="fromWallet")
    to_wallet: WalletBalancesResponse = Field(..., alias="toWallet")

    @classmethod
    def from_result(cls, result: TransferResult) -> "SendResponse":
        return cls(
            from_wallet=WalletBalancesResponse.from_domain(result.from_wallet),
            to_wallet=WalletBalancesResponse.from_domain(result.to_wallet),
        )


class WalletListResponse(BaseModel):
    success: bool = True
    total: int
    wallets: list[WalletSummary]


class TransactionListResponse(BaseModel):
    success: bool = True
    address: str
    transactions: list[TransactionResponse]


class AssetListResponse(BaseModel):
    success: bool = True
    assets: list[str]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
