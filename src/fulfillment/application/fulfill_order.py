"""Application service: Fulfill Order use case.

Sequences every stage of fulfillment for one order:

    validate -> check/reserve inventory -> discount -> shipping -> pricing
             -> payment -> shipment preparation -> ship -> persist -> notify

Validation, handler lookup and inventory failures abort before any side
effect.  Every error is logged and reported as a failed run; nothing
reaches the caller.  Nothing is retried or rolled back: stock reserved
before a later failure stays reserved.
"""

from __future__ import annotations

import logging
import uuid

from fulfillment.domain.exceptions import ConfigurationError
from fulfillment.domain.model.order import Order, OrderStatus
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.service.inventory_service import InventoryService
from fulfillment.domain.service.notifier import Notifier
from fulfillment.domain.service.order_handlers import OrderHandlerRegistry
from fulfillment.domain.service.order_validator import OrderValidator
from fulfillment.domain.service.pricing_calculator import PricingCalculator
from fulfillment.domain.strategy.discount import DiscountStrategy
from fulfillment.domain.strategy.payment import PaymentProcessor
from fulfillment.domain.strategy.shipping import ShippingProvider


_FULFILLABLE_STATUSES = frozenset({OrderStatus.CREATED, OrderStatus.VALIDATED})


def new_tracking_number(carrier: str) -> str:
    return f"{carrier}-{uuid.uuid4().hex[:8].upper()}"


class FulfillOrderHandler:

    def __init__(
        self,
        validator: OrderValidator,
        calculator: PricingCalculator,
        order_repo: OrderRepository,
        inventory: InventoryService,
        notifier: Notifier,
        order_handlers: OrderHandlerRegistry,
        logger: logging.Logger | None = None,
    ) -> None:
        self._validator = validator
        self._calculator = calculator
        self._order_repo = order_repo
        self._inventory = inventory
        self._notifier = notifier
        self._order_handlers = order_handlers
        self._logger = logger or logging.getLogger(__name__)

    def handle(
        self,
        order: Order,
        discount: DiscountStrategy,
        shipping: ShippingProvider,
        payment: PaymentProcessor,
    ) -> bool:
        """Run the whole pipeline for *order*, mutating it in place.

        Returns True when the order was shipped, saved and notified, and
        False otherwise.  Never raises: every failure, including a
        missing order handler, is logged and reported as False.

        An order left in VALIDATED by an earlier failed run (for example
        an inventory shortfall) may be handed back after restocking.
        """
        self._logger.info("Starting order fulfillment for %s", order.id)

        if order.status not in _FULFILLABLE_STATUSES:
            self._logger.error(
                "Order %s cannot be fulfilled in %s status", order.id, order.status.value
            )
            return False

        try:
            result = self._validator.validate(order)
            if not result.is_valid:
                self._logger.error(
                    "Validation failed for %s: %s", order.id, ", ".join(result.errors)
                )
                return False
            if order.status == OrderStatus.CREATED:
                order.mark_validated()
            self._logger.info("Order %s validated successfully", order.id)

            # resolved before inventory is touched
            handler = self._order_handlers.get_handler(order.order_type)

            if not self._inventory.check_availability(order.items):
                self._logger.error("Insufficient inventory for order %s", order.id)
                return False
            self._inventory.reserve_stock(order.items)

            order.apply_discount(discount.calculate_discount(order))
            self._logger.info("Discount applied: %s (%s)", discount.name, order.discount_amount)

            quote = shipping.calculate_shipping(order)
            order.apply_shipping(quote)
            self._logger.info(
                "Shipping calculated: %s via %s, %s, %d days",
                shipping.name,
                quote.carrier,
                quote.cost,
                quote.estimated_days,
            )

            self._calculator.calculate(order)
            self._logger.info(
                "Order %s priced: subtotal %s, tax %s, total %s",
                order.id,
                order.subtotal,
                order.tax_amount,
                order.total,
            )

            order.record_payment(payment.process_payment(order))
            self._logger.info(
                "Payment processed: %s (%s)", payment.name, order.payment.transaction_id
            )

            handler.prepare_for_shipment(order)

            order.mark_shipped(new_tracking_number(quote.carrier))
            self._logger.info("Order %s shipped, tracking %s", order.id, order.tracking_number)

            self._order_repo.save(order)

            self._notifier.send_order_confirmation(order)
            self._notifier.send_shipping_notification(order)
        except ConfigurationError as exc:
            self._logger.error("Cannot fulfill order %s: %s", order.id, exc)
            return False
        except Exception:
            self._logger.exception(
                "Order processing failed for %s (status %s)", order.id, order.status.value
            )
            return False

        self._logger.info("Order %s fulfilled successfully", order.id)
        return True
