"""Unit tests for the Product aggregate's stock rules."""

import pytest

from sims.domain.exceptions import InsufficientStockError, ValidationError
from sims.domain.model.product import Product
from sims.domain.model.value_objects import Money, Quantity


def _widget(stock: int = 5) -> Product:
    return Product(id=1, name="Widget", price=Money.of("15.00"), stock_quantity=stock)


class TestWithdraw:

    def test_decrements_stock(self):
        p = _widget(5)
        p.withdraw(Quantity(2))
        assert p.stock_quantity == 3

    def test_whole_stock_can_be_taken(self):
        p = _widget(5)
        p.withdraw(Quantity(5))
        assert p.stock_quantity == 0

    def test_more_than_stock_rejected(self):
        p = _widget(5)
        with pytest.raises(InsufficientStockError) as exc_info:
            p.withdraw(Quantity(6))
        assert exc_info.value.product_name == "Widget"
        assert p.stock_quantity == 5

    def test_insufficient_stock_is_a_validation_error(self):
        with pytest.raises(ValidationError, match="Insufficient stock for product: Widget"):
            _widget(0).withdraw(Quantity(1))


class TestRestockAndEdits:

    def test_restock_increments(self):
        p = _widget(1)
        p.restock(Quantity(4))
        assert p.stock_quantity == 5

    def test_set_stock(self):
        p = _widget(1)
        p.set_stock(0)
        assert p.stock_quantity == 0

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _widget().set_stock(-1)

    def test_update_price(self):
        p = _widget()
        p.update_price(Money.of("20"))
        assert p.price == Money.of("20.00")
