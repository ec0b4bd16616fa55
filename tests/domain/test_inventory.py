"""Unit tests for InventoryItem and StockInventoryService."""

import pytest

from fulfillment.domain.exceptions import InventoryShortfallError, ValidationError
from fulfillment.domain.model.inventory import InventoryItem
from fulfillment.domain.model.order import OrderItem
from fulfillment.domain.model.value_objects import Money
from fulfillment.domain.service.inventory_service import StockInventoryService
from tests.fakes import FakeInventoryRepository


def _line(pid: str, name: str, qty: int) -> OrderItem:
    return OrderItem(product_id=pid, product_name=name, quantity=qty, unit_price=Money.of("10.00"))


def _make_inventory(*specs: tuple[str, str, int, int]) -> FakeInventoryRepository:
    """Create repo with (product_id, name, total, reserved) tuples."""
    return FakeInventoryRepository(
        [
            InventoryItem(product_id=pid, product_name=name, total_quantity=total, reserved_quantity=reserved)
            for pid, name, total, reserved in specs
        ]
    )


class TestInventoryItem:

    def test_reserve(self):
        item = InventoryItem("1", "Widget", total_quantity=10)
        item.reserve(4)
        assert item.reserved_quantity == 4
        assert item.available_quantity == 6

    def test_reserve_more_than_available(self):
        item = InventoryItem("1", "Widget", total_quantity=10, reserved_quantity=8)
        with pytest.raises(InventoryShortfallError, match="need 3, have 2 available"):
            item.reserve(3)

    def test_reserve_non_positive(self):
        with pytest.raises(ValidationError, match="must be positive"):
            InventoryItem("1", "Widget", total_quantity=10).reserve(0)

    def test_release(self):
        item = InventoryItem("1", "Widget", total_quantity=10, reserved_quantity=5)
        item.release(5)
        assert item.reserved_quantity == 0

    def test_release_more_than_reserved(self):
        item = InventoryItem("1", "Widget", total_quantity=10, reserved_quantity=2)
        with pytest.raises(ValidationError, match="only 2 currently reserved"):
            item.release(3)

    def test_restock_below_reserved_rejected(self):
        item = InventoryItem("1", "Widget", total_quantity=10, reserved_quantity=6)
        with pytest.raises(ValidationError, match="6 units are reserved"):
            item.restock(5)
        item.restock(6)
        assert item.available_quantity == 0


class TestCheckAvailability:

    def test_available(self):
        svc = StockInventoryService(_make_inventory(("1", "Widget", 10, 0)))
        assert svc.check_availability([_line("1", "Widget", 10)])

    def test_short(self):
        svc = StockInventoryService(_make_inventory(("1", "Widget", 10, 5)))
        assert not svc.check_availability([_line("1", "Widget", 6)])

    def test_unknown_product(self):
        svc = StockInventoryService(_make_inventory())
        assert not svc.check_availability([_line("1", "Widget", 1)])

    def test_lines_for_same_product_are_summed(self):
        svc = StockInventoryService(_make_inventory(("1", "Widget", 10, 0)))
        assert not svc.check_availability([_line("1", "Widget", 6), _line("1", "Widget", 5)])


class TestReserveStock:

    def test_reserves_all_items(self):
        repo = _make_inventory(("1", "Widget", 100, 0), ("2", "Gadget", 50, 0))
        StockInventoryService(repo).reserve_stock([_line("1", "Widget", 10), _line("2", "Gadget", 5)])

        assert repo.get_by_product_id("1").reserved_quantity == 10
        assert repo.get_by_product_id("2").available_quantity == 45

    def test_no_partial_reservation_on_failure(self):
        """If Widget succeeds but Gadget fails, Widget should NOT be reserved."""
        repo = _make_inventory(("1", "Widget", 100, 0), ("2", "Gadget", 3, 0))
        svc = StockInventoryService(repo)

        with pytest.raises(InventoryShortfallError, match="Insufficient inventory for Gadget"):
            svc.reserve_stock([_line("1", "Widget", 10), _line("2", "Gadget", 5)])

        assert repo.get_by_product_id("1").reserved_quantity == 0
        assert repo.get_by_product_id("2").reserved_quantity == 0

    def test_missing_inventory_record(self):
        svc = StockInventoryService(_make_inventory())
        with pytest.raises(InventoryShortfallError, match="No inventory record"):
            svc.reserve_stock([_line("1", "Widget", 1)])
