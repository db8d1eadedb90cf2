"""JSON-document implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sims.domain.model.product import Product
from sims.domain.model.value_objects import Money
from sims.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._records:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._records:
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return sorted((self._to_domain(raw) for raw in self._records), key=lambda p: p.id)

    def save(self, product: Product) -> None:
        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(self._records):
            if raw["id"] == product.id:
                self._records[i] = self._to_raw(product)
                return
        self._records.append(self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "category": product.category,
            "price": str(product.price.amount),
            "stock_quantity": product.stock_quantity,
            "created_at": product.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            category=raw.get("category"),
            price=Money(Decimal(raw["price"])),
            stock_quantity=raw["stock_quantity"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
