"""Application service: Show Sale use case (query)."""

from __future__ import annotations

from sims.application.dto import SaleDTO, sale_to_dto
from sims.application.lookups import get_sale
from sims.application.unit_of_work import AbstractUnitOfWork


class ShowSaleHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self, sale_id: int) -> SaleDTO:
        with self._uow as uow:
            return sale_to_dto(get_sale(uow, sale_id))
