"""Unit tests for the Order aggregate and its status state machine."""

from datetime import datetime

import pytest

from fulfillment.domain.exceptions import InvalidStatusTransitionError, ValidationError
from fulfillment.domain.model.order import (
    Order,
    OrderItem,
    OrderStatus,
    OrderType,
    PaymentRecord,
    ShippingQuote,
)
from fulfillment.domain.model.value_objects import Money


def _make_item(name: str = "Widget", qty: int = 1, price: str = "15.00") -> OrderItem:
    return OrderItem(
        product_id=f"P-{name}",
        product_name=name,
        quantity=qty,
        unit_price=Money.of(price),
    )


def _make_order(items=None) -> Order:
    return Order(
        id="ORD-1",
        customer_id="CUST-1",
        customer_name="Alice Johnson",
        customer_email="alice@example.com",
        shipping_address="123 Main St",
        items=items if items is not None else [_make_item()],
    )


def _payment(amount: str = "10.00", processed: bool = True) -> PaymentRecord:
    return PaymentRecord(
        method="Credit Card",
        transaction_id="CC-1234ABCD",
        amount=Money.of(amount),
        processed=processed,
    )


def _advance_to(order: Order, status: OrderStatus) -> Order:
    """Walk an order forward through the pipeline until *status*."""
    steps = [
        (OrderStatus.VALIDATED, order.mark_validated),
        (OrderStatus.PAYMENT_PROCESSED, lambda: order.record_payment(_payment())),
        (OrderStatus.READY_TO_SHIP, order.mark_ready_to_ship),
        (OrderStatus.SHIPPED, lambda: order.mark_shipped("USPS-ABCD1234")),
        (OrderStatus.DELIVERED, order.mark_delivered),
    ]
    for target, step in steps:
        if order.status == status:
            break
        step()
        assert order.status == target
    return order


class TestOrderDefaults:

    def test_new_order_is_created_with_zero_amounts(self):
        order = _make_order()
        assert order.status == OrderStatus.CREATED
        assert order.order_type == OrderType.STANDARD
        assert order.total == Money.zero()
        assert order.tracking_number is None
        assert order.payment is None

    def test_items_subtotal_and_quantity(self):
        order = _make_order([_make_item("A", 2, "10.00"), _make_item("B", 3, "1.50")])
        assert order.items_subtotal == Money.of("24.50")
        assert order.total_quantity == 5

    def test_line_total(self):
        assert _make_item(qty=3, price="15.00").line_total == Money.of("45.00")


class TestLineItemsLock:

    def test_add_item_before_validation(self):
        order = _make_order()
        order.add_item(_make_item("Gadget"))
        assert len(order.items) == 2

    def test_items_frozen_after_validation(self):
        order = _make_order()
        order.mark_validated()
        assert isinstance(order.items, tuple)
        with pytest.raises(ValidationError, match="Cannot add items"):
            order.add_item(_make_item("Gadget"))


class TestPricingInputs:

    def test_discount_cannot_exceed_subtotal(self):
        order = _make_order([_make_item(price="10.00")])
        with pytest.raises(ValidationError, match="exceeds order subtotal"):
            order.apply_discount(Money.of("10.01"))

    def test_discount_equal_to_subtotal_accepted(self):
        order = _make_order([_make_item(price="10.00")])
        order.apply_discount(Money.of("10.00"))
        assert order.discount_amount == Money.of("10.00")

    def test_apply_shipping(self):
        order = _make_order()
        order.apply_shipping(ShippingQuote("DHL", Money.of("49.99"), 10))
        assert order.carrier == "DHL"
        assert order.shipping_cost == Money.of("49.99")


class TestStatusTransitions:

    def test_full_forward_sequence(self):
        order = _advance_to(_make_order(), OrderStatus.DELIVERED)
        assert order.status == OrderStatus.DELIVERED
        assert order.tracking_number == "USPS-ABCD1234"
        assert isinstance(order.shipped_date, datetime)

    @pytest.mark.parametrize(
        "start, skip",
        [
            (OrderStatus.CREATED, "mark_ready_to_ship"),
            (OrderStatus.CREATED, "mark_delivered"),
            (OrderStatus.VALIDATED, "mark_ready_to_ship"),
            (OrderStatus.PAYMENT_PROCESSED, "mark_delivered"),
            (OrderStatus.READY_TO_SHIP, "mark_delivered"),
        ],
    )
    def test_skipping_a_state_is_rejected(self, start, skip):
        order = _advance_to(_make_order(), start)
        with pytest.raises(InvalidStatusTransitionError, match="expected"):
            getattr(order, skip)()
        assert order.status == start

    def test_shipping_without_payment_rejected(self):
        order = _advance_to(_make_order(), OrderStatus.VALIDATED)
        with pytest.raises(InvalidStatusTransitionError):
            order.mark_shipped("USPS-1")

    def test_backward_transition_rejected(self):
        order = _advance_to(_make_order(), OrderStatus.SHIPPED)
        with pytest.raises(InvalidStatusTransitionError):
            order.mark_validated()
        with pytest.raises(InvalidStatusTransitionError):
            order.mark_ready_to_ship()

    def test_unprocessed_payment_rejected(self):
        order = _advance_to(_make_order(), OrderStatus.VALIDATED)
        with pytest.raises(ValidationError, match="was not processed"):
            order.record_payment(_payment(processed=False))
        assert order.status == OrderStatus.VALIDATED
        assert order.payment is None

    def test_ship_requires_tracking_number(self):
        order = _advance_to(_make_order(), OrderStatus.READY_TO_SHIP)
        with pytest.raises(ValidationError, match="Tracking number"):
            order.mark_shipped("")


class TestCancel:

    @pytest.mark.parametrize(
        "status",
        [
            OrderStatus.CREATED,
            OrderStatus.VALIDATED,
            OrderStatus.PAYMENT_PROCESSED,
            OrderStatus.READY_TO_SHIP,
        ],
    )
    def test_cancel_before_shipping(self, status):
        order = _advance_to(_make_order(), status)
        order.cancel()
        assert order.status == OrderStatus.CANCELLED

    @pytest.mark.parametrize("status", [OrderStatus.SHIPPED, OrderStatus.DELIVERED])
    def test_cancel_after_shipping_rejected(self, status):
        order = _advance_to(_make_order(), status)
        with pytest.raises(InvalidStatusTransitionError, match="Cannot cancel"):
            order.cancel()
        assert order.status == status

    def test_cancel_twice_rejected(self):
        order = _make_order()
        order.cancel()
        with pytest.raises(InvalidStatusTransitionError, match="already cancelled"):
            order.cancel()

    def test_cancelled_order_cannot_resume(self):
        order = _make_order()
        order.cancel()
        with pytest.raises(InvalidStatusTransitionError):
            order.mark_validated()
