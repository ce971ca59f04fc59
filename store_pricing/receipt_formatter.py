"""Receipt formatting utilities."""

from collections.abc import Sequence

from .adjustment import Adjustment
from .items import PricedItem

HEADER = "Receipt:"
RULE = "-" * 18


def format_cents(cents: int) -> str:
    """Format cents as dollars, e.g. 199 -> "$1.99" and -30 -> "-$0.30"."""
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents) / 100:.2f}"


def receipt_lines(
    items: Sequence[PricedItem],
    adjustments: Sequence[Adjustment],
    total_cents: int,
) -> list[str]:
    """Build receipt lines: items in scan order, then adjustments, then the total."""
    lines = [HEADER]

    for item in items:
        lines.append(f"{item.name}: {format_cents(item.price())}")

    for adjustment in adjustments:
        lines.append(f"{adjustment.description}: {format_cents(adjustment.amount)}")

    lines.append(RULE)
    lines.append(f"TOTAL: {format_cents(total_cents)}")

    return lines


def format_receipt(
    items: Sequence[PricedItem],
    adjustments: Sequence[Adjustment],
    total_cents: int,
) -> str:
    """Format a human-readable receipt."""
    return "\n".join(receipt_lines(items, adjustments, total_cents))
