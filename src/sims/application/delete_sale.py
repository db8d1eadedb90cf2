"""Application service: Delete Sale use case.

With ``return_stock`` every item's quantity goes back to its product
before the sale is removed; without it inventory is left alone (stock
already reconciled by other means).
"""

from __future__ import annotations

import logging

from sims.application.lookups import get_sale, require_id
from sims.application.unit_of_work import AbstractUnitOfWork
from sims.domain.service.stock_allocation_service import StockAllocationService

logger = logging.getLogger(__name__)


class DeleteSaleHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self, sale_id: int, return_stock: bool = False) -> None:
        require_id(sale_id, "Sale")

        with self._uow as uow:
            sale = get_sale(uow, sale_id)
            if return_stock:
                StockAllocationService(uow.products).restore(sale)
            uow.sales.delete(sale)
            uow.commit()

        logger.info(
            "Sale #%s deleted (%s)",
            sale_id, "stock returned" if return_stock else "stock kept",
        )
