"""Simulated mobile push notifications."""

from __future__ import annotations

import logging

from fulfillment.domain.model.order import Order
from fulfillment.domain.service.notifier import Notifier

logger = logging.getLogger(__name__)


class PushNotifier(Notifier):

    def send_order_confirmation(self, order: Order) -> None:
        logger.info(
            "[PUSH] Order Confirmed! Your order %s (%s) is being processed",
            order.id,
            order.total,
        )

    def send_shipping_notification(self, order: Order) -> None:
        logger.info(
            "[PUSH] On its way! Order %s shipped with %s, tracking %s",
            order.id,
            order.carrier,
            order.tracking_number,
        )
