"""Application service: Cancel Order use case.

Only orders that have not shipped can be cancelled.  Cancelling does not
touch inventory; releasing reserved stock is a separate operator action
(see ``ReleaseStockHandler``).
"""

from __future__ import annotations

from fulfillment.domain.exceptions import EntityNotFoundError, InvalidStatusTransitionError
from fulfillment.domain.model.capabilities import OrderCapabilities
from fulfillment.domain.repository.order_repository import OrderRepository


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        cancellable = OrderCapabilities.of(order).cancellable
        if cancellable is None:
            raise InvalidStatusTransitionError(
                f"Cannot cancel order {order_id} in {order.status.value} status"
            )

        cancellable.cancel()
        self._order_repo.save(order)
