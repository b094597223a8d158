"""Wallet domain specific exceptions."""


class WalletError(Exception):
    """Base class for wallet domain errors."""

    message = "Wallet error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @property
    def detail(self) -> str:
        return str(self)


class WalletNotFoundError(WalletError):
    """Raised when a wallet address is not present in the registry."""

    _messages = {
        "wallet": "Wallet not found",
        "sender": "Sender wallet not found",
        "recipient": "Recipient wallet not found",
    }

    def __init__(self, address: str | None, role: str = "wallet") -> None:
        self.address = address
        self.role = role
        super().__init__(self._messages.get(role, self._messages["wallet"]))


class InvalidInputError(WalletError):
    """Raised when a request carries an unusable asset or amount."""

    message = "Invalid input"


class UnknownAssetError(InvalidInputError):
    message = "Unknown asset symbol"


class InvalidAmountError(InvalidInputError):
    message = "Invalid amount"


class InsufficientBalanceError(InvalidInputError):
    message = "Insufficient balance"
