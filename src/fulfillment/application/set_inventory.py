"""Application service: Set Inventory use case."""

from __future__ import annotations

from fulfillment.domain.exceptions import ValidationError
from fulfillment.domain.model.inventory import InventoryItem
from fulfillment.domain.repository.inventory_repository import InventoryRepository


class SetInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, product_id: str, product_name: str, quantity: int) -> None:
        """Set the total inventory quantity for a product."""
        if quantity < 0:
            raise ValidationError("Inventory quantity cannot be negative")

        existing = self._inventory_repo.get_by_product_id(product_id)
        if existing is not None:
            existing.restock(quantity)
            self._inventory_repo.save(existing)
        else:
            if not product_name or not product_name.strip():
                raise ValidationError("Product name is required for a new inventory record")
            item = InventoryItem(
                product_id=product_id,
                product_name=product_name.strip(),
                total_quantity=quantity,
            )
            self._inventory_repo.save(item)
