"""Application service: Update Product Price use case."""

from __future__ import annotations

from sims.application.lookups import get_product
from sims.application.unit_of_work import AbstractUnitOfWork
from sims.domain.model.value_objects import Money


class UpdateProductPriceHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int, new_price: str) -> None:
        """Update a product's price.

        This does NOT affect any existing sales; their items captured a
        price snapshot at creation time.
        """
        price = Money.of(new_price)
        with self._uow as uow:
            product = get_product(uow, product_id)
            product.update_price(price)
            uow.products.save(product)
            uow.commit()
