"""Abstract Unit of Work: the transaction scope of every use case.

A handler enters the unit of work, works through its repositories, and
calls ``commit()`` once every step has succeeded.  Leaving the ``with``
block without committing (an exception, an early return) rolls back
every staged change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sims.domain.repository.customer_repository import CustomerRepository
from sims.domain.repository.product_repository import ProductRepository
from sims.domain.repository.sale_repository import SaleRepository
from sims.domain.repository.seller_repository import SellerRepository


class AbstractUnitOfWork(ABC):

    products: ProductRepository
    customers: CustomerRepository
    sellers: SellerRepository
    sales: SaleRepository

    def __enter__(self) -> AbstractUnitOfWork:
        self._committed = False
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if not self._committed:
            self.rollback()

    def commit(self) -> None:
        self._commit()
        self._committed = True

    @abstractmethod
    def _commit(self) -> None:
        """Make every staged change durable, all at once."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every staged change."""
