"""Unit tests for OrderValidator."""

from fulfillment.domain.model.order import Order, OrderItem
from fulfillment.domain.model.value_objects import Money
from fulfillment.domain.service.order_validator import OrderValidator


def _make_order(**overrides) -> Order:
    fields = dict(
        id="ORD-1",
        customer_id="CUST-1",
        customer_name="Alice Johnson",
        customer_email="alice@example.com",
        shipping_address="123 Main St, New York, NY 10001",
        items=[OrderItem("PROD-001", "Laptop", 1, Money.of("1299.99"))],
    )
    fields.update(overrides)
    return Order(**fields)


class TestOrderValidator:

    def test_valid_order(self):
        result = OrderValidator().validate(_make_order())
        assert result.is_valid
        assert result.errors == ()

    def test_empty_items_rejected(self):
        result = OrderValidator().validate(_make_order(items=[]))
        assert not result.is_valid
        assert result.errors == ("Order must contain at least one item",)

    def test_blank_customer_fields_rejected(self):
        result = OrderValidator().validate(
            _make_order(customer_id="  ", customer_email="", shipping_address="")
        )
        assert result.errors == (
            "Customer ID is required",
            "Customer email is required",
            "Shipping address is required",
        )

    def test_non_positive_quantity_rejected(self):
        items = [
            OrderItem("P1", "Mouse", 0, Money.of("29.99")),
            OrderItem("P2", "Keyboard", -2, Money.of("89.99")),
        ]
        result = OrderValidator().validate(_make_order(items=items))
        assert result.errors == (
            "Invalid quantity for Mouse",
            "Invalid quantity for Keyboard",
        )

    def test_zero_price_rejected(self):
        items = [OrderItem("P1", "Sticker", 1, Money.zero())]
        result = OrderValidator().validate(_make_order(items=items))
        assert result.errors == ("Invalid price for Sticker",)

    def test_collects_every_violation(self):
        items = [OrderItem("P1", "Freebie", 0, Money.zero())]
        result = OrderValidator().validate(
            _make_order(customer_id="", customer_email="", shipping_address="", items=items)
        )
        assert len(result.errors) == 5
        assert "Invalid quantity for Freebie" in result.errors
        assert "Invalid price for Freebie" in result.errors

    def test_validation_has_no_side_effects(self):
        order = _make_order(items=[])
        OrderValidator().validate(order)
        assert order.status.value == "CREATED"
        assert order.items == []
