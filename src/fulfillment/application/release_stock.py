"""Application service: Release Stock use case.

Fulfillment never releases a reservation on its own, even when a run
fails after reserving.  This is the manual way to give that stock back.
"""

from __future__ import annotations

from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.repository.inventory_repository import InventoryRepository


class ReleaseStockHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, product_id: str, quantity: int) -> None:
        item = self._inventory_repo.get_by_product_id(product_id)
        if item is None:
            raise EntityNotFoundError(f"No inventory record for product '{product_id}'")
        item.release(quantity)
        self._inventory_repo.save(item)
