"""Application services: Seller registration and listing."""

from __future__ import annotations

from sims.application.unit_of_work import AbstractUnitOfWork
from sims.domain.exceptions import DuplicateEntityError, ValidationError
from sims.domain.model.seller import Seller


class RegisterSellerHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self, username: str, full_name: str) -> Seller:
        if not username or not username.strip():
            raise ValidationError("Seller username is required")
        if not full_name or not full_name.strip():
            raise ValidationError("Seller full name is required")

        with self._uow as uow:
            if uow.sellers.get_by_username(username.strip()) is not None:
                raise DuplicateEntityError(f"Username '{username.strip()}' is taken")
            next_id = max((s.id for s in uow.sellers.list_all()), default=0) + 1
            seller = Seller(id=next_id, username=username.strip(), full_name=full_name.strip())
            uow.sellers.save(seller)
            uow.commit()
        return seller


class ListSellersHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[Seller]:
        with self._uow as uow:
            return uow.sellers.list_all()
