"""Application service: Set Stock use case (direct catalog edit)."""

from __future__ import annotations

import logging

from sims.application.lookups import get_product
from sims.application.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


class SetStockHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int, quantity: int) -> None:
        """Overwrite the stock quantity of a product."""
        with self._uow as uow:
            product = get_product(uow, product_id)
            previous = product.stock_quantity
            product.set_stock(quantity)
            uow.products.save(product)
            uow.commit()
        logger.info("Stock of %r set from %s to %s", product.name, previous, quantity)
