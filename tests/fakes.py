"""In-memory fakes for testing.

These implement the same abstract interfaces as the real adapters
but keep everything in memory and record what they were asked to do.
No file I/O, no side effects.
"""

from __future__ import annotations

from typing import Sequence

from fulfillment.domain.model.inventory import InventoryItem
from fulfillment.domain.model.order import Order, OrderItem
from fulfillment.domain.repository.inventory_repository import InventoryRepository
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.service.inventory_service import InventoryService
from fulfillment.domain.service.notifier import Notifier


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[str, Order] = {}
        self.saved: list[str] = []
        for o in orders or []:
            self._store[o.id] = o

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def save(self, order: Order) -> None:
        self._store[order.id] = order
        self.saved.append(order.id)


class FailingOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self.attempts = 0

    def get_by_id(self, order_id: str) -> Order | None:
        return None

    def save(self, order: Order) -> None:
        self.attempts += 1
        raise RuntimeError("database unavailable")


class FakeInventoryRepository(InventoryRepository):

    def __init__(self, items: list[InventoryItem] | None = None) -> None:
        self._store: dict[str, InventoryItem] = {}
        for item in items or []:
            self._store[item.product_id] = item

    def get_by_product_id(self, product_id: str) -> InventoryItem | None:
        return self._store.get(product_id)

    def list_all(self) -> list[InventoryItem]:
        return list(self._store.values())

    def save(self, item: InventoryItem) -> None:
        self._store[item.product_id] = item


class FakeInventoryService(InventoryService):

    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.checked: list[tuple[OrderItem, ...]] = []
        self.reserved: list[tuple[OrderItem, ...]] = []

    def check_availability(self, items: Sequence[OrderItem]) -> bool:
        self.checked.append(tuple(items))
        return self.available

    def reserve_stock(self, items: Sequence[OrderItem]) -> None:
        self.reserved.append(tuple(items))


class RecordingNotifier(Notifier):

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def send_order_confirmation(self, order: Order) -> None:
        self.sent.append(("confirmation", order.id))

    def send_shipping_notification(self, order: Order) -> None:
        self.sent.append(("shipping", order.id))
