"""Domain service: Stock Allocation.

Coordinates the cross-aggregate work of moving stock between products
and a sale.  Lines are applied strictly one after another, each one
re-reading its product, so two lines for the same product see each
other's deductions.  Nothing here commits: the caller's unit of work
decides whether the staged product writes survive.
"""

from __future__ import annotations

import logging

from sims.domain.exceptions import EntityNotFoundError, InsufficientStockError
from sims.domain.model.sale import Sale
from sims.domain.model.value_objects import Quantity
from sims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class StockAllocationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def allocate(self, sale: Sale, lines: list[tuple[int, Quantity]]) -> None:
        """Withdraw stock for every ``(product_id, quantity)`` line and
        append the matching items to *sale*.

        Raises EntityNotFoundError for an unknown product and
        InsufficientStockError when the product's current stock cannot
        cover the line.
        """
        for product_id, quantity in lines:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product", product_id)

            try:
                product.withdraw(quantity)
            except InsufficientStockError:
                logger.warning(
                    "Sale #%s: %s units of %r requested, %s in stock",
                    sale.id, quantity.value, product.name, product.stock_quantity,
                )
                raise
            self._product_repo.save(product)

            sale.add_item(
                product_id=product.id,
                product_name=product.name,
                quantity=quantity,
                unit_price=product.price,  # <-- price snapshot
            )

    def restore(self, sale: Sale) -> None:
        """Return every item's quantity to its product's stock."""
        for item in sale.items:
            product = self._product_repo.get_by_id(item.product_id)
            if product is None:
                raise EntityNotFoundError("Product", item.product_id)
            product.restock(item.quantity)
            self._product_repo.save(product)
