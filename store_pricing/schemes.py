"""Pricing schemes (promotions).

A scheme reads a transaction's items and appends zero or more adjustments
through ``Transaction.add_adjustment``. Schemes never touch the item list,
and a scheme whose target was not scanned adds nothing.

"First match" always means first in scan order; later items with the same
name are left alone unless the scheme aggregates (multi-buy, grouped).
Percentage discounts truncate toward zero.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection
from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal
from typing import TYPE_CHECKING, Optional, Union

from .errors import errmsg
from .items import PricedItem
from .validation import (
    require_at_least,
    require_fraction,
    require_names,
    require_non_negative,
    require_not_empty,
)

if TYPE_CHECKING:
    from .transaction import Transaction


def first_match(transaction: Transaction, name: str) -> Optional[PricedItem]:
    """Return the first scanned item called ``name``, or None."""
    for item in transaction.items():
        if item.name == name:
            return item
    return None


def percent_of(percent: float, cents: int) -> int:
    """``percent`` of ``cents``, truncated toward zero."""
    amount = Decimal(str(percent)) * cents
    return int(amount.quantize(Decimal(1), rounding=ROUND_DOWN))


def percent_label(percent: float) -> str:
    """Format a fraction as a percentage label: 0.1 -> "10", 0.125 -> "12.5"."""
    return format((Decimal(str(percent)) * 100).normalize(), "f")


def _name_set(names: Union[str, Collection[str]]) -> frozenset[str]:
    # A bare string is one name, not a set of letters.
    if isinstance(names, str):
        return frozenset([names])
    return frozenset(names)


class PricingScheme(ABC):
    """A promotion applied to a whole transaction at checkout."""

    @abstractmethod
    def apply(self, transaction: Transaction) -> None:
        """Append this scheme's adjustments to ``transaction``."""


@dataclass(frozen=True)
class MultiBuyScheme(PricingScheme):
    """Buy ``group_size`` of an item, pay for one fewer.

    Every complete group of matching items earns one item's price off.
    Items sharing a name are assumed to share a price, so the first
    match's price is used for every group.
    """

    target_name: str
    group_size: int = 3

    def __post_init__(self) -> None:
        require_not_empty(self.target_name, errmsg.TARGET_REQUIRED)
        require_at_least(self.group_size, 2, errmsg.GROUP_SIZE_MIN)

    def apply(self, transaction: Transaction) -> None:
        matches = [item for item in transaction.items() if item.name == self.target_name]
        groups = len(matches) // self.group_size
        if groups == 0:
            return

        transaction.add_adjustment(
            f"{self.target_name} {self.group_size}-for-{self.group_size - 1}",
            -groups * matches[0].price(),
        )


# The two-for-one promotion is the default multi-buy: three for the price of two.
TwoForOneScheme = MultiBuyScheme


@dataclass(frozen=True)
class GroupedScheme(PricingScheme):
    """Percentage off items bought together from two groups.

    Each item from ``group_a`` pairs with one from ``group_b``. With
    ``pairs = min(count_a, count_b)``, the first ``2 * pairs`` items in scan
    order that belong to either group are discounted individually, one
    adjustment each. Items past that cutoff pay full price.
    """

    group_a: Collection[str]
    group_b: Collection[str]
    discount_percent: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "group_a", _name_set(self.group_a))
        object.__setattr__(self, "group_b", _name_set(self.group_b))
        require_names(self.group_a, errmsg.GROUP_REQUIRED)
        require_names(self.group_b, errmsg.GROUP_REQUIRED)
        require_fraction(self.discount_percent, errmsg.PERCENT_RANGE)

    def apply(self, transaction: Transaction) -> None:
        items = transaction.items()
        count_a = sum(1 for item in items if item.name in self.group_a)
        count_b = sum(1 for item in items if item.name in self.group_b)
        pairs = min(count_a, count_b)
        if pairs == 0:
            return

        eligible = [
            item for item in items
            if item.name in self.group_a or item.name in self.group_b
        ]
        label = percent_label(self.discount_percent)
        for item in eligible[:pairs * 2]:
            transaction.add_adjustment(
                f"{item.name} combo {label}% off",
                -percent_of(self.discount_percent, item.price()),
            )


@dataclass(frozen=True)
class CouponScheme(PricingScheme):
    """Percentage off the first matching item only."""

    target_name: str
    discount_percent: float

    def __post_init__(self) -> None:
        require_not_empty(self.target_name, errmsg.TARGET_REQUIRED)
        require_fraction(self.discount_percent, errmsg.PERCENT_RANGE)

    def apply(self, transaction: Transaction) -> None:
        match = first_match(transaction, self.target_name)
        if match is None:
            return

        transaction.add_adjustment(
            f"{self.target_name} coupon {percent_label(self.discount_percent)}% off",
            -percent_of(self.discount_percent, match.price()),
        )


@dataclass(frozen=True)
class AmountOffScheme(PricingScheme):
    """A fixed number of cents off the first matching item.

    The discount is capped at the item's price.
    """

    target_name: str
    amount_cents: int

    def __post_init__(self) -> None:
        require_not_empty(self.target_name, errmsg.TARGET_REQUIRED)
        require_non_negative(self.amount_cents, errmsg.AMOUNT_NEGATIVE)

    def apply(self, transaction: Transaction) -> None:
        match = first_match(transaction, self.target_name)
        if match is None:
            return

        discount = min(self.amount_cents, max(match.price(), 0))
        transaction.add_adjustment(f"{self.target_name} coupon", -discount)


@dataclass(frozen=True)
class RainCheckScheme(PricingScheme):
    """Honour an earlier price for the first matching item.

    The adjustment is ``rain_price - price``, which is a surcharge if the
    item has since become cheaper.
    """

    target_name: str
    rain_price: int

    def __post_init__(self) -> None:
        require_not_empty(self.target_name, errmsg.TARGET_REQUIRED)
        require_non_negative(self.rain_price, errmsg.PRICE_NEGATIVE)

    def apply(self, transaction: Transaction) -> None:
        match = first_match(transaction, self.target_name)
        if match is None:
            return

        transaction.add_adjustment(
            f"{self.target_name} rain check",
            self.rain_price - match.price(),
        )
