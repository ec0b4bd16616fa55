"""Application service: Deliver Order use case.

Records the carrier's delivery confirmation, an event that arrives
after the fulfillment pipeline has finished with the order.
"""

from __future__ import annotations

import logging

from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeliverOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        order.mark_delivered()
        self._order_repo.save(order)
        logger.info("Order %s delivered", order_id)
