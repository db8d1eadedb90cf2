"""Abstract repository for Sale aggregate.

A sale is stored together with its items; ``delete`` removes both.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from sims.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique sale ID."""

    @abstractmethod
    def get_by_id(self, sale_id: int) -> Sale | None:
        """Return a sale by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Sale]:
        """Return every sale, ordered by ID."""

    @abstractmethod
    def find_by_seller(self, seller_id: int) -> list[Sale]:
        """Return the sales attributed to *seller_id*, ordered by ID."""

    @abstractmethod
    def find_by_customer(self, customer_id: int) -> list[Sale]:
        """Return the sales of *customer_id*, ordered by ID."""

    @abstractmethod
    def find_by_date_range(self, start: datetime, end: datetime) -> list[Sale]:
        """Return sales created between *start* and *end*, both inclusive."""

    @abstractmethod
    def save(self, sale: Sale) -> None:
        """Persist a new or updated sale with all of its items."""

    @abstractmethod
    def delete(self, sale: Sale) -> None:
        """Remove a sale and its items."""
