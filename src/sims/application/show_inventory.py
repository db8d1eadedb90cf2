"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from sims.application.dto import StockLineDTO
from sims.application.unit_of_work import AbstractUnitOfWork


class ShowInventoryHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[StockLineDTO]:
        with self._uow as uow:
            products = uow.products.list_all()
        return [
            StockLineDTO(
                product_id=p.id,
                product_name=p.name,
                category=p.category,
                price=str(p.price),
                stock=p.stock_quantity,
            )
            for p in products
        ]
