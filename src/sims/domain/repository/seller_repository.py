"""Abstract repository for Seller entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sims.domain.model.seller import Seller


class SellerRepository(ABC):

    @abstractmethod
    def get_by_id(self, seller_id: int) -> Seller | None:
        """Return a seller by its ID, or None if not found."""

    @abstractmethod
    def get_by_username(self, username: str) -> Seller | None:
        """Return a seller by username (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Seller]:
        """Return every seller, ordered by ID."""

    @abstractmethod
    def save(self, seller: Seller) -> None:
        """Persist a new or updated seller."""
