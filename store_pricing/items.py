"""Scannable items.

Every item has a ``name`` and a ``price()`` in integer cents. Schemes match
on ``name`` verbatim, so two items are "the same product" only when their
names are identical.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .errors import errmsg
from .validation import require_non_negative, require_positive


def round_half_away(value: Decimal) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


class PricedItem(ABC):
    """Anything that can be scanned into a transaction."""

    name: str

    @abstractmethod
    def price(self) -> int:
        """Price in cents."""


@dataclass(frozen=True)
class Item(PricedItem):
    """An item sold at a fixed price each."""

    name: str
    price_each: int

    def price(self) -> int:
        return self.price_each


@dataclass(frozen=True)
class WeightedItem(PricedItem):
    """An item sold by weight.

    The price is ``unit_price * weight`` rounded half away from zero, so
    150 cents/lb at 0.75 lb is 113 cents, not 112.
    """

    name: str
    unit_price: int
    weight: float

    def __post_init__(self) -> None:
        require_non_negative(self.unit_price, errmsg.UNIT_PRICE_NEGATIVE)
        require_positive(self.weight, errmsg.WEIGHT_POSITIVE)

    def price(self) -> int:
        return round_half_away(Decimal(str(self.weight)) * self.unit_price)
