"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from fulfillment.domain.exceptions import ValidationError
from fulfillment.domain.model.value_objects import Money


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_zero(self):
        assert Money.zero().is_zero
        assert not Money.of("0.01").is_zero

    def test_addition_and_subtraction(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")
        assert Money.of("10") - Money.of("3") == Money.of("7")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("29.99") * 2 == Money.of("59.98")

    def test_multiplication_by_decimal_keeps_precision(self):
        assert (Money.of("1449.96") * Decimal("0.20")).amount == Decimal("289.992")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("10") * 0.2

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_rounds_half_up_to_cents(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("289.992")) == "$289.99"
        assert str(Money.of("0.125")) == "$0.13"
        assert str(Money.of("1749.942")) == "$1749.94"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")
