"""JSON-document implementation of CustomerRepository."""

from __future__ import annotations

from datetime import datetime

from sims.domain.model.customer import Customer
from sims.domain.repository.customer_repository import CustomerRepository


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    def get_by_id(self, customer_id: int) -> Customer | None:
        for raw in self._records:
            if raw["id"] == customer_id:
                return self._to_domain(raw)
        return None

    def get_by_tax_id(self, tax_id: str) -> Customer | None:
        for raw in self._records:
            if raw.get("tax_id") == tax_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Customer]:
        return sorted((self._to_domain(raw) for raw in self._records), key=lambda c: c.id)

    def save(self, customer: Customer) -> None:
        for i, raw in enumerate(self._records):
            if raw["id"] == customer.id:
                self._records[i] = self._to_raw(customer)
                return
        self._records.append(self._to_raw(customer))

    def delete(self, customer: Customer) -> None:
        self._records[:] = [raw for raw in self._records if raw["id"] != customer.id]

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "name": customer.name,
            "tax_id": customer.tax_id,
            "phone": customer.phone,
            "created_at": customer.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            id=raw["id"],
            name=raw["name"],
            tax_id=raw.get("tax_id"),
            phone=raw.get("phone"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
