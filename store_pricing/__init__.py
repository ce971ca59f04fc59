"""Point-of-sale pricing engine: items, schemes, transactions and the register."""

__version__ = "0.1.0"

from .errors import (
    ConfigurationError,
    PricingError,
    TransactionFinalizedError,
    errmsg,
)
from .items import Item, PricedItem, WeightedItem, round_half_away
from .adjustment import Adjustment
from .receipt_formatter import format_cents, format_receipt, receipt_lines
from .transaction import Receipt, Transaction
from .schemes import (
    AmountOffScheme,
    CouponScheme,
    GroupedScheme,
    MultiBuyScheme,
    PricingScheme,
    RainCheckScheme,
    TwoForOneScheme,
)
from .register import Register
from .config import (
    configure_logging,
    load_schemes,
    load_schemes_from_env,
    scheme_from_config,
    schemes_from_config,
)

__all__ = [
    "__version__",
    # Errors
    "PricingError",
    "ConfigurationError",
    "TransactionFinalizedError",
    "errmsg",
    # Items
    "PricedItem",
    "Item",
    "WeightedItem",
    "round_half_away",
    "Adjustment",
    # Transactions
    "Transaction",
    "Receipt",
    "format_cents",
    "format_receipt",
    "receipt_lines",
    # Schemes
    "PricingScheme",
    "MultiBuyScheme",
    "TwoForOneScheme",
    "GroupedScheme",
    "CouponScheme",
    "AmountOffScheme",
    "RainCheckScheme",
    # Register
    "Register",
    # Configuration
    "configure_logging",
    "load_schemes",
    "load_schemes_from_env",
    "scheme_from_config",
    "schemes_from_config",
]
