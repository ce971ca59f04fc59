"""Transaction-level price adjustments."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Adjustment:
    """A named, signed amount in cents.

    Negative amounts are discounts, positive amounts are surcharges.
    """

    description: str
    amount: int
