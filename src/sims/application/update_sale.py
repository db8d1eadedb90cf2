"""Application service: Update Sale use case.

Replaces a sale's composition wholesale.  Stock for every old item is
returned first, then the new lines are applied exactly as on creation,
so a line for a product the sale already held sees its old quantity
back in stock before being re-checked.
"""

from __future__ import annotations

import logging

from sims.application.dto import SaleDTO, SaleItemSpec, sale_to_dto, to_lines
from sims.application.lookups import (
    get_customer,
    get_sale,
    require_id,
    resolve_seller,
)
from sims.application.unit_of_work import AbstractUnitOfWork
from sims.domain.service.stock_allocation_service import StockAllocationService

logger = logging.getLogger(__name__)


class UpdateSaleHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        sale_id: int,
        customer_id: int,
        seller_id: int | None,
        item_specs: list[SaleItemSpec],
        seller_username: str | None = None,
    ) -> SaleDTO:
        require_id(sale_id, "Sale")
        require_id(customer_id, "Customer")
        lines = to_lines(item_specs)

        with self._uow as uow:
            sale = get_sale(uow, sale_id)
            get_customer(uow, customer_id)
            seller_id = resolve_seller(uow, seller_id, seller_username).id

            stock = StockAllocationService(uow.products)
            stock.restore(sale)
            sale.clear_items()  # same sale id, same created_at
            stock.allocate(sale, lines)

            sale.reassign(customer_id, seller_id)
            uow.sales.save(sale)
            uow.commit()

        logger.info("Sale #%s updated (total %s)", sale.id, sale.total)
        return sale_to_dto(sale)
