"""Abstract repository for Customer entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sims.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def get_by_tax_id(self, tax_id: str) -> Customer | None:
        """Return the customer holding *tax_id*, or None."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer, ordered by ID."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a new or updated customer."""

    @abstractmethod
    def delete(self, customer: Customer) -> None:
        """Remove a customer."""
