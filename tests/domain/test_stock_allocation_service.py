"""Unit tests for the StockAllocationService domain service."""

import pytest

from sims.domain.exceptions import EntityNotFoundError, InsufficientStockError
from sims.domain.model.product import Product
from sims.domain.model.sale import Sale
from sims.domain.model.value_objects import Money, Quantity
from sims.domain.service.stock_allocation_service import StockAllocationService
from tests.fakes import FakeProductRepository


def _repo(*specs: tuple[int, str, str, int]) -> FakeProductRepository:
    """Create repo with (id, name, price, stock) tuples."""
    return FakeProductRepository([
        Product(id=pid, name=name, price=Money.of(price), stock_quantity=stock)
        for pid, name, price, stock in specs
    ])


def _sale() -> Sale:
    return Sale.open(sale_id=1, customer_id=1, seller_id=1)


class TestAllocate:

    def test_withdraws_and_builds_items(self):
        repo = _repo((1, "Widget", "15.00", 5), (2, "Gadget", "25.00", 3))
        sale = _sale()

        StockAllocationService(repo).allocate(sale, [(1, Quantity(2)), (2, Quantity(1))])

        assert repo.get_by_id(1).stock_quantity == 3
        assert repo.get_by_id(2).stock_quantity == 2
        assert [(i.product_name, i.quantity.value) for i in sale.items] == [("Widget", 2), ("Gadget", 1)]
        assert sale.total == Money.of("55.00")

    def test_captures_current_price(self):
        repo = _repo((1, "Widget", "15.00", 5))
        sale = _sale()
        StockAllocationService(repo).allocate(sale, [(1, Quantity(1))])

        widget = repo.get_by_id(1)
        widget.update_price(Money.of("99.99"))
        repo.save(widget)

        assert sale.items[0].unit_price == Money.of("15.00")

    def test_repeated_product_sees_earlier_deduction(self):
        repo = _repo((1, "Widget", "15.00", 5))
        sale = _sale()

        StockAllocationService(repo).allocate(sale, [(1, Quantity(3)), (1, Quantity(2))])

        assert repo.get_by_id(1).stock_quantity == 0
        assert len(sale.items) == 2

    def test_repeated_product_over_stock_rejected_on_second_line(self):
        repo = _repo((1, "Widget", "15.00", 5))
        sale = _sale()

        with pytest.raises(InsufficientStockError, match="Widget"):
            StockAllocationService(repo).allocate(sale, [(1, Quantity(3)), (1, Quantity(3))])

        # The first line was applied; rolling it back is the unit of work's job.
        assert len(sale.items) == 1

    def test_unknown_product_rejected(self):
        with pytest.raises(EntityNotFoundError, match="Product not found with ID: 42"):
            StockAllocationService(_repo()).allocate(_sale(), [(42, Quantity(1))])


class TestRestore:

    def test_returns_every_item(self):
        repo = _repo((1, "Widget", "15.00", 5), (2, "Gadget", "25.00", 3))
        sale = _sale()
        svc = StockAllocationService(repo)
        svc.allocate(sale, [(1, Quantity(2)), (2, Quantity(3))])

        svc.restore(sale)

        assert repo.get_by_id(1).stock_quantity == 5
        assert repo.get_by_id(2).stock_quantity == 3

    def test_missing_product_rejected(self):
        sale = _sale()
        sale.add_item(9, "Ghost", Quantity(1), Money.of("1.00"))
        with pytest.raises(EntityNotFoundError, match="Product"):
            StockAllocationService(_repo()).restore(sale)
