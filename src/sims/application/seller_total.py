"""Application service: total value sold by a seller (query)."""

from __future__ import annotations

from sims.application.lookups import get_seller_by_username
from sims.application.unit_of_work import AbstractUnitOfWork
from sims.domain.model.value_objects import Money


class SellerTotalHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self, seller_id: int) -> Money:
        with self._uow as uow:
            return Money.sum([sale.total for sale in uow.sales.find_by_seller(seller_id)])

    def for_username(self, username: str) -> Money:
        """Same total, resolving the seller in the same read."""
        with self._uow as uow:
            seller = get_seller_by_username(uow, username)
            return Money.sum([sale.total for sale in uow.sales.find_by_seller(seller.id)])
