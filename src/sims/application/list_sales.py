"""Application service: List Sales use cases (queries).

Plain store filters: by seller, by customer, by creation date range.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sims.application.dto import SaleDTO, sale_to_dto
from sims.application.lookups import get_seller_by_username
from sims.application.unit_of_work import AbstractUnitOfWork
from sims.domain.exceptions import ValidationError


def _as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with stored timestamps."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


class ListSalesHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def all(self) -> list[SaleDTO]:
        with self._uow as uow:
            return [sale_to_dto(s) for s in uow.sales.list_all()]

    def by_seller(self, seller_id: int) -> list[SaleDTO]:
        with self._uow as uow:
            return [sale_to_dto(s) for s in uow.sales.find_by_seller(seller_id)]

    def by_seller_username(self, username: str) -> list[SaleDTO]:
        with self._uow as uow:
            seller = get_seller_by_username(uow, username)
            return [sale_to_dto(s) for s in uow.sales.find_by_seller(seller.id)]

    def by_customer(self, customer_id: int) -> list[SaleDTO]:
        with self._uow as uow:
            return [sale_to_dto(s) for s in uow.sales.find_by_customer(customer_id)]

    def by_date_range(self, start: datetime, end: datetime) -> list[SaleDTO]:
        """Sales created between *start* and *end*, both inclusive."""
        start, end = _as_utc(start), _as_utc(end)
        if start > end:
            raise ValidationError("Start date must not be after end date")
        with self._uow as uow:
            return [sale_to_dto(s) for s in uow.sales.find_by_date_range(start, end)]
