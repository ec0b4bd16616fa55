"""Domain service: Inventory availability and reservation.

``InventoryService`` is the port the fulfillment pipeline talks to.
``StockInventoryService`` implements it on top of ``InventoryRepository``
using a two-phase approach (validate-then-mutate) so a shortfall on one
product never leaves another product partially reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import Counter
from typing import Sequence

from fulfillment.domain.exceptions import InventoryShortfallError
from fulfillment.domain.model.inventory import InventoryItem
from fulfillment.domain.model.order import OrderItem
from fulfillment.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class InventoryService(ABC):

    @abstractmethod
    def check_availability(self, items: Sequence[OrderItem]) -> bool:
        """Return True if every item can be supplied from current stock."""

    @abstractmethod
    def reserve_stock(self, items: Sequence[OrderItem]) -> None:
        """Reserve stock for every item."""


class StockInventoryService(InventoryService):

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def check_availability(self, items: Sequence[OrderItem]) -> bool:
        for product_id, qty in _quantities_by_product(items).items():
            inv = self._inventory_repo.get_by_product_id(product_id)
            if inv is None:
                logger.warning("No inventory record for product %s", product_id)
                return False
            if qty > inv.available_quantity:
                logger.warning(
                    "Insufficient inventory for %s (need %d, have %d available)",
                    inv.product_name,
                    qty,
                    inv.available_quantity,
                )
                return False
        return True

    def reserve_stock(self, items: Sequence[OrderItem]) -> None:
        """Reserve inventory for every line item.

        Uses a two-phase approach:
          Phase 1 — load and validate: ensure every product has enough
                    available stock.  Fails fast before any mutation.
          Phase 2 — mutate and persist: call ``reserve()`` on each
                    InventoryItem and save.
        """
        # Phase 1: load all inventory items and validate
        reservations: list[tuple[InventoryItem, int]] = []

        for product_id, qty in _quantities_by_product(items).items():
            inv = self._inventory_repo.get_by_product_id(product_id)
            if inv is None:
                raise InventoryShortfallError(
                    f"No inventory record for product '{product_id}'"
                )
            if qty > inv.available_quantity:
                raise InventoryShortfallError(
                    f"Insufficient inventory for {inv.product_name} "
                    f"(need {qty}, have {inv.available_quantity} available)"
                )
            reservations.append((inv, qty))

        # Phase 2: mutate and persist
        for inv, qty in reservations:
            inv.reserve(qty)
            self._inventory_repo.save(inv)
            logger.info("Reserved %d x %s", qty, inv.product_name)


def _quantities_by_product(items: Sequence[OrderItem]) -> Counter[str]:
    """Merge lines for the same product so stock is checked once per product."""
    totals: Counter[str] = Counter()
    for item in items:
        totals[item.product_id] += item.quantity
    return totals
