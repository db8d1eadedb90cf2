"""Application service: resolve a caller identity to a seller ID."""

from __future__ import annotations

from sims.application.lookups import get_seller_by_username
from sims.application.unit_of_work import AbstractUnitOfWork


class ResolveSellerHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self, username: str) -> int:
        with self._uow as uow:
            return get_seller_by_username(uow, username).id
