"""Application service: Refund Order use case."""

from __future__ import annotations

from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.model.capabilities import Capability, OrderCapabilities
from fulfillment.domain.model.value_objects import Money
from fulfillment.domain.repository.order_repository import OrderRepository


class RefundOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, amount: str) -> Money:
        """Refund *amount* against the order's payment.

        Returns the amount still refundable afterwards.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        view = OrderCapabilities.of(order)
        view.require(Capability.REFUND, order_id)

        remaining = view.refundable.refund(Money.of(amount))
        self._order_repo.save(order)
        return remaining
