"""Application service: Create Sale use case.

Resolves the customer and seller, withdraws stock line by line, and
persists the sale with its items.  Everything happens inside one unit
of work: a failure on any line leaves stock exactly as it was.
"""

from __future__ import annotations

import logging

from sims.application.dto import SaleDTO, SaleItemSpec, sale_to_dto, to_lines
from sims.application.lookups import get_customer, require_id, resolve_seller
from sims.application.unit_of_work import AbstractUnitOfWork
from sims.domain.model.sale import Sale
from sims.domain.service.stock_allocation_service import StockAllocationService

logger = logging.getLogger(__name__)


class CreateSaleHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        customer_id: int,
        seller_id: int | None,
        item_specs: list[SaleItemSpec],
        seller_username: str | None = None,
    ) -> SaleDTO:
        """Create a new sale.

        Steps:
        1. Validate the request (ids present, items non-empty, quantities > 0).
        2. Resolve customer and seller (by ID or username) inside the
           transaction, failing if either is unknown.
        3. Withdraw stock and build items with *current* prices (snapshot).
        4. Persist and commit, then return a DTO.
        """
        require_id(customer_id, "Customer")
        lines = to_lines(item_specs)

        with self._uow as uow:
            get_customer(uow, customer_id)
            seller_id = resolve_seller(uow, seller_id, seller_username).id

            sale = Sale.open(uow.sales.next_id(), customer_id, seller_id)
            StockAllocationService(uow.products).allocate(sale, lines)

            uow.sales.save(sale)
            uow.commit()

        logger.info(
            "Sale #%s created for customer #%s by seller #%s (total %s)",
            sale.id, customer_id, seller_id, sale.total,
        )
        return sale_to_dto(sale)
