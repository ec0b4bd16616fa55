"""Simulated e-mail notifications."""

from __future__ import annotations

import logging

from fulfillment.domain.model.order import Order
from fulfillment.domain.service.notifier import Notifier

logger = logging.getLogger(__name__)


class EmailNotifier(Notifier):

    def __init__(self, sender: str = "orders@example.com") -> None:
        self._sender = sender

    def send_order_confirmation(self, order: Order) -> None:
        logger.info(
            "[EMAIL] %s -> %s | Subject: Order Confirmation - %s | Total: %s",
            self._sender,
            order.customer_email,
            order.id,
            order.total,
        )

    def send_shipping_notification(self, order: Order) -> None:
        logger.info(
            "[EMAIL] %s -> %s | Subject: Your order %s has shipped | Tracking: %s",
            self._sender,
            order.customer_email,
            order.id,
            order.tracking_number,
        )
