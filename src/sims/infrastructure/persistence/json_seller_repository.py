"""JSON-document implementation of SellerRepository."""

from __future__ import annotations

from datetime import datetime

from sims.domain.model.seller import Seller
from sims.domain.repository.seller_repository import SellerRepository


class JsonSellerRepository(SellerRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    def get_by_id(self, seller_id: int) -> Seller | None:
        for raw in self._records:
            if raw["id"] == seller_id:
                return self._to_domain(raw)
        return None

    def get_by_username(self, username: str) -> Seller | None:
        for raw in self._records:
            if raw["username"].lower() == username.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Seller]:
        return sorted((self._to_domain(raw) for raw in self._records), key=lambda s: s.id)

    def save(self, seller: Seller) -> None:
        for i, raw in enumerate(self._records):
            if raw["id"] == seller.id:
                self._records[i] = self._to_raw(seller)
                return
        self._records.append(self._to_raw(seller))

    @staticmethod
    def _to_raw(seller: Seller) -> dict:
        return {
            "id": seller.id,
            "username": seller.username,
            "full_name": seller.full_name,
            "created_at": seller.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Seller:
        return Seller(
            id=raw["id"],
            username=raw["username"],
            full_name=raw["full_name"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
