"""The checkout register."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Optional, Union

import structlog

from .config import load_schemes, load_schemes_from_env
from .items import PricedItem
from .schemes import PricingScheme
from .transaction import Transaction

logger = structlog.get_logger()


class Register:
    """Owns one open transaction and the schemes applied at checkout.

    Not thread-safe: callers sharing a register must serialise ``scan``
    and ``total`` themselves.
    """

    def __init__(self, schemes: Iterable[PricingScheme] = ()) -> None:
        self._schemes = tuple(schemes)
        self._current = Transaction()
        self.log = logger.bind(schemes=len(self._schemes))

    @classmethod
    def from_config(cls, path: Optional[Union[str, Path]] = None) -> Register:
        """Build a register from a scheme catalog.

        Without ``path`` the catalog named by ``STORE_SCHEMES_FILE`` is used,
        and a register with no schemes is returned if that is unset too.
        """
        schemes = load_schemes(path) if path is not None else load_schemes_from_env()
        return cls(schemes)

    @property
    def schemes(self) -> tuple[PricingScheme, ...]:
        return self._schemes

    def scan(self, item: PricedItem) -> None:
        self._current.add(item)
        self.log.info("item_scanned", name=item.name, price_cents=item.price())

    def subtotal(self) -> int:
        """Running total of the open transaction, before any scheme applies."""
        return self._current.subtotal()

    def total(self) -> Transaction:
        """Check out: apply every scheme and hand back the finished transaction.

        A fresh, empty transaction takes its place, so later scans never
        reach the returned one. If a scheme raises, the open transaction
        keeps its items and stays current.
        """
        completed = self._current
        completed.apply_schemes(self._schemes)
        self._current = Transaction()

        self.log.info(
            "transaction_finalized",
            items=len(completed.items()),
            adjustments=len(completed.adjustments()),
            total_cents=completed.total(),
        )
        return completed
