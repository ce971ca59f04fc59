"""The running record of one checkout."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import structlog

from .adjustment import Adjustment
from .errors import TransactionFinalizedError
from .items import PricedItem
from .receipt_formatter import format_receipt, receipt_lines

if TYPE_CHECKING:
    from .schemes import PricingScheme

logger = structlog.get_logger()


class Transaction:
    """Scanned items plus the adjustments produced by pricing schemes.

    Items keep scan order and are never reordered or deduplicated.
    Adjustments are appended while schemes run; once ``apply_schemes``
    has completed the transaction is finalized and rejects further changes.
    """

    def __init__(self) -> None:
        self._items: list[PricedItem] = []
        self._adjustments: list[Adjustment] = []
        self._finalized = False

    def add(self, item: PricedItem) -> None:
        self._require_open()
        self._items.append(item)

    def items(self) -> tuple[PricedItem, ...]:
        """Scanned items in scan order."""
        return tuple(self._items)

    def adjustments(self) -> tuple[Adjustment, ...]:
        return tuple(self._adjustments)

    def add_adjustment(self, description: str, amount: int) -> None:
        self._require_open()
        self._adjustments.append(Adjustment(description, amount))
        logger.debug("adjustment_added", description=description, amount_cents=amount)

    def apply_schemes(self, schemes: Iterable[PricingScheme]) -> None:
        """Run each scheme against this transaction, in order, then finalize.

        Later schemes see the adjustments made by earlier ones. If a scheme
        raises, every adjustment added by this call is discarded and the
        transaction stays open.

        Raises:
            TransactionFinalizedError: If schemes were already applied.
        """
        self._require_open()
        start = len(self._adjustments)
        try:
            for scheme in schemes:
                before = len(self._adjustments)
                scheme.apply(self)
                logger.info(
                    "scheme_applied",
                    scheme=type(scheme).__name__,
                    adjustments=len(self._adjustments) - before,
                )
        except Exception:
            del self._adjustments[start:]
            raise
        self._finalized = True

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def item_total(self) -> int:
        return sum(item.price() for item in self._items)

    def discount_total(self) -> int:
        return sum(adjustment.amount for adjustment in self._adjustments)

    def subtotal(self) -> int:
        """Item prices plus adjustment amounts, in cents."""
        return self.item_total() + self.discount_total()

    def total(self) -> int:
        # No tax layer, so the total is the subtotal.
        return self.subtotal()

    def lines(self) -> list[str]:
        return receipt_lines(self._items, self._adjustments, self.total())

    def render(self) -> str:
        """The printable receipt."""
        return format_receipt(self._items, self._adjustments, self.total())

    output = render

    def _require_open(self) -> None:
        if self._finalized:
            raise TransactionFinalizedError()


Receipt = Transaction
