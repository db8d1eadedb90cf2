"""JSON-document implementation of SaleRepository.

Each sale is one record with its items embedded, so saving or deleting
the sale saves or deletes its items with it.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sims.domain.model.sale import Sale, SaleItem
from sims.domain.model.value_objects import Money, Quantity
from sims.domain.repository.sale_repository import SaleRepository


class JsonSaleRepository(SaleRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- SaleRepository interface ---------------------------------------------

    def next_id(self) -> int:
        return max((raw["id"] for raw in self._records), default=0) + 1

    def get_by_id(self, sale_id: int) -> Sale | None:
        for raw in self._records:
            if raw["id"] == sale_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Sale]:
        return self._select(lambda raw: True)

    def find_by_seller(self, seller_id: int) -> list[Sale]:
        return self._select(lambda raw: raw["seller_id"] == seller_id)

    def find_by_customer(self, customer_id: int) -> list[Sale]:
        return self._select(lambda raw: raw["customer_id"] == customer_id)

    def find_by_date_range(self, start: datetime, end: datetime) -> list[Sale]:
        return [
            sale for sale in self.list_all()
            if start <= sale.created_at <= end
        ]

    def save(self, sale: Sale) -> None:
        for i, raw in enumerate(self._records):
            if raw["id"] == sale.id:
                self._records[i] = self._to_raw(sale)
                return
        self._records.append(self._to_raw(sale))

    def delete(self, sale: Sale) -> None:
        self._records[:] = [raw for raw in self._records if raw["id"] != sale.id]

    # --- Serialization --------------------------------------------------------

    def _select(self, predicate) -> list[Sale]:
        return sorted(
            (self._to_domain(raw) for raw in self._records if predicate(raw)),
            key=lambda s: s.id,
        )

    @staticmethod
    def _to_raw(sale: Sale) -> dict:
        return {
            "id": sale.id,
            "customer_id": sale.customer_id,
            "seller_id": sale.seller_id,
            "created_at": sale.created_at.isoformat(),
            "total": str(sale.total.amount),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                }
                for item in sale.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Sale:
        # "total" is informational; the aggregate derives it from the items.
        items = [
            SaleItem(
                sale_id=raw["id"],
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"])),
            )
            for i in raw["items"]
        ]
        return Sale(
            id=raw["id"],
            customer_id=raw["customer_id"],
            seller_id=raw["seller_id"],
            items=items,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
