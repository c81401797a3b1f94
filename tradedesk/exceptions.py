# tradedesk/exceptions.py
from typing import List


class TradeDeskError(Exception):
    """Base exception for all service errors."""


class MissingInputError(TradeDeskError):
    """Raised when an upload request carries no file or text body."""

    def __init__(self, message: str = "No file provided"):
        super().__init__(message)


class EmptyCSVError(TradeDeskError):
    """Raised when the CSV text has no header plus data row."""

    def __init__(self, message: str = "CSV file is empty or invalid"):
        super().__init__(message)


class TradeValidationError(TradeDeskError):
    """Raised when a single submitted trade fails validation."""

    def __init__(self, errors: List[str]):
        super().__init__("Invalid trade data")
        self.errors = errors


class StoreError(TradeDeskError):
    """Raised when the key-value store rejects a read or write."""
