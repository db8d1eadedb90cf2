"""Integration tests for the CreateSale use case.

Uses the in-memory fake unit of work: no file I/O.
"""

import pytest

from sims.application.create_sale import CreateSaleHandler
from sims.application.dto import SaleItemSpec
from sims.application.show_sale import ShowSaleHandler
from sims.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from sims.domain.model.customer import Customer
from sims.domain.model.product import Product
from sims.domain.model.seller import Seller
from sims.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWork


def _setup() -> tuple[CreateSaleHandler, FakeUnitOfWork]:
    uow = FakeUnitOfWork(
        products=[
            Product(id=1, name="Widget", price=Money.of("15.00"), stock_quantity=5),
            Product(id=2, name="Gadget", price=Money.of("25.00"), stock_quantity=3),
        ],
        customers=[Customer(id=1, name="Alice", tax_id="123.456.789-00")],
        sellers=[Seller(id=1, username="maria", full_name="Maria Souza")],
    )
    return CreateSaleHandler(uow), uow


class TestCreateSaleHappyPath:

    def test_conserves_stock_and_computes_total(self):
        handler, uow = _setup()
        dto = handler.handle(1, 1, [SaleItemSpec(1, 2), SaleItemSpec(2, 1)])

        assert uow.products.get_by_id(1).stock_quantity == 3
        assert uow.products.get_by_id(2).stock_quantity == 2
        assert dto.total == "55.00"  # 2 x 15.00 + 1 x 25.00
        assert uow.commits == 1

    def test_persisted_sale_matches_request(self):
        handler, uow = _setup()
        dto = handler.handle(1, 1, [SaleItemSpec(2, 1), SaleItemSpec(1, 2)])

        shown = ShowSaleHandler(uow).handle(dto.id)
        assert [(i.product_id, i.quantity) for i in shown.items] == [(2, 1), (1, 2)]
        assert shown.customer_id == 1
        assert shown.seller_id == 1

    def test_total_equals_sum_of_subtotals(self):
        handler, uow = _setup()
        dto = handler.handle(1, 1, [SaleItemSpec(1, 3), SaleItemSpec(2, 2)])

        sale = uow.sales.get_by_id(dto.id)
        assert sale.total == Money.sum([i.unit_price * i.quantity.value for i in sale.items])
        assert [i.subtotal for i in dto.items] == ["45.00", "50.00"]

    def test_sequential_ids(self):
        handler, _ = _setup()
        first = handler.handle(1, 1, [SaleItemSpec(1, 1)])
        second = handler.handle(1, 1, [SaleItemSpec(1, 1)])
        assert second.id == first.id + 1

    def test_same_product_twice_is_applied_in_order(self):
        handler, uow = _setup()
        dto = handler.handle(1, 1, [SaleItemSpec(1, 2), SaleItemSpec(1, 3)])

        assert uow.products.get_by_id(1).stock_quantity == 0
        assert [i.quantity for i in dto.items] == [2, 3]


class TestCreateSalePriceLock:

    def test_price_snapshot_at_creation(self):
        handler, uow = _setup()
        dto = handler.handle(1, 1, [SaleItemSpec(1, 1)])

        widget = uow.products.get_by_id(1)
        widget.update_price(Money.of("99.99"))
        uow.products.save(widget)

        assert uow.sales.get_by_id(dto.id).total == Money.of("15.00")


class TestCreateSaleAtomicity:

    def test_failure_on_second_line_rolls_back_first(self):
        handler, uow = _setup()

        with pytest.raises(InsufficientStockError, match="Widget"):
            handler.handle(1, 1, [SaleItemSpec(1, 2), SaleItemSpec(1, 100)])

        assert uow.products.get_by_id(1).stock_quantity == 5
        assert uow.sales.list_all() == []
        assert uow.commits == 0

    def test_unknown_product_after_valid_line_rolls_back(self):
        handler, uow = _setup()

        with pytest.raises(EntityNotFoundError, match="Product not found with ID: 99"):
            handler.handle(1, 1, [SaleItemSpec(2, 3), SaleItemSpec(99, 1)])

        assert uow.products.get_by_id(2).stock_quantity == 3
        assert uow.sales.list_all() == []


class TestCreateSaleValidation:

    def test_unknown_customer_rejected(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Customer not found with ID: 9"):
            handler.handle(9, 1, [SaleItemSpec(1, 1)])

    def test_unknown_seller_rejected(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Seller not found with ID: 9"):
            handler.handle(1, 9, [SaleItemSpec(1, 1)])

    def test_empty_items_rejected(self):
        handler, uow = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle(1, 1, [])
        assert uow.commits == 0

    def test_non_positive_quantity_rejected_before_any_mutation(self):
        handler, uow = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle(1, 1, [SaleItemSpec(1, 2), SaleItemSpec(2, 0)])
        assert uow.products.get_by_id(1).stock_quantity == 5

    def test_missing_customer_id_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Customer ID is required"):
            handler.handle(None, 1, [SaleItemSpec(1, 1)])

    def test_missing_product_id_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Product ID is required"):
            handler.handle(1, 1, [SaleItemSpec(None, 1)])

    def test_not_found_maps_to_404(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError) as exc_info:
            handler.handle(9, 1, [SaleItemSpec(1, 1)])
        assert exc_info.value.status_code == 404
        assert exc_info.value.entity == "Customer"


class TestCreateSaleBySellerUsername:

    def test_username_is_resolved_in_the_same_transaction(self):
        handler, uow = _setup()
        dto = handler.handle(1, None, [SaleItemSpec(1, 1)], seller_username="MARIA")

        assert dto.seller_id == 1
        assert uow.commits == 1

    def test_unknown_username_rejected_without_stock_change(self):
        handler, uow = _setup()
        with pytest.raises(EntityNotFoundError, match="Seller not found with username: ana"):
            handler.handle(1, None, [SaleItemSpec(1, 1)], seller_username="ana")

        assert uow.products.get_by_id(1).stock_quantity == 5
        assert uow.commits == 0

    def test_missing_seller_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Seller ID is required"):
            handler.handle(1, None, [SaleItemSpec(1, 1)])
