"""Error types for the pricing engine."""

from typing import Optional


class errmsg:
    """Error message constants."""

    TARGET_REQUIRED = "Target name is required"
    PERCENT_RANGE = "Percent must be between 0 and 1"
    AMOUNT_NEGATIVE = "Amount cannot be negative"
    PRICE_NEGATIVE = "Price cannot be negative"
    UNIT_PRICE_NEGATIVE = "Unit price cannot be negative"
    WEIGHT_POSITIVE = "Weight must be positive"
    GROUP_SIZE_MIN = "Group size must be at least 2"
    GROUP_REQUIRED = "Group must name at least one item"
    TRANSACTION_FINALIZED = "Transaction is already finalized"
    UNKNOWN_SCHEME = "Unknown scheme type"
    MISSING_KEY = "Missing scheme setting"
    CATALOG_INVALID = "Scheme catalog must contain a 'schemes' list"


class PricingError(Exception):
    """Base class for pricing errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class ConfigurationError(PricingError):
    """An item or scheme was built with settings it cannot honour."""


class TransactionFinalizedError(PricingError):
    """A finalized transaction was asked to change."""

    def __init__(self) -> None:
        super().__init__(errmsg.TRANSACTION_FINALIZED)
