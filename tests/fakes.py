"""In-memory fakes for testing.

The repositories implement the same abstract interfaces as the JSON
repositories but keep everything in a dict.  They hand out copies, like
a real store would, so a test only sees changes that were saved.
"""

from __future__ import annotations

import copy
from datetime import datetime

from sims.application.unit_of_work import AbstractUnitOfWork
from sims.domain.model.customer import Customer
from sims.domain.model.product import Product
from sims.domain.model.sale import Sale
from sims.domain.model.seller import Seller
from sims.domain.repository.customer_repository import CustomerRepository
from sims.domain.repository.product_repository import ProductRepository
from sims.domain.repository.sale_repository import SaleRepository
from sims.domain.repository.seller_repository import SellerRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = copy.deepcopy(p)

    def get_by_id(self, product_id: int) -> Product | None:
        return copy.deepcopy(self._store.get(product_id))

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return copy.deepcopy(p)
        return None

    def list_all(self) -> list[Product]:
        return [copy.deepcopy(p) for _, p in sorted(self._store.items())]

    def save(self, product: Product) -> None:
        self._store[product.id] = copy.deepcopy(product)


class FakeCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[int, Customer] = {c.id: copy.deepcopy(c) for c in customers or []}

    def get_by_id(self, customer_id: int) -> Customer | None:
        return copy.deepcopy(self._store.get(customer_id))

    def get_by_tax_id(self, tax_id: str) -> Customer | None:
        for c in self._store.values():
            if c.tax_id == tax_id:
                return copy.deepcopy(c)
        return None

    def list_all(self) -> list[Customer]:
        return [copy.deepcopy(c) for _, c in sorted(self._store.items())]

    def save(self, customer: Customer) -> None:
        self._store[customer.id] = copy.deepcopy(customer)

    def delete(self, customer: Customer) -> None:
        self._store.pop(customer.id, None)


class FakeSellerRepository(SellerRepository):

    def __init__(self, sellers: list[Seller] | None = None) -> None:
        self._store: dict[int, Seller] = {s.id: copy.deepcopy(s) for s in sellers or []}

    def get_by_id(self, seller_id: int) -> Seller | None:
        return copy.deepcopy(self._store.get(seller_id))

    def get_by_username(self, username: str) -> Seller | None:
        for s in self._store.values():
            if s.username.lower() == username.lower():
                return copy.deepcopy(s)
        return None

    def list_all(self) -> list[Seller]:
        return [copy.deepcopy(s) for _, s in sorted(self._store.items())]

    def save(self, seller: Seller) -> None:
        self._store[seller.id] = copy.deepcopy(seller)


class FakeSaleRepository(SaleRepository):

    def __init__(self) -> None:
        self._store: dict[int, Sale] = {}

    def next_id(self) -> int:
        return max(self._store, default=0) + 1

    def get_by_id(self, sale_id: int) -> Sale | None:
        return copy.deepcopy(self._store.get(sale_id))

    def list_all(self) -> list[Sale]:
        return [copy.deepcopy(s) for _, s in sorted(self._store.items())]

    def find_by_seller(self, seller_id: int) -> list[Sale]:
        return [s for s in self.list_all() if s.seller_id == seller_id]

    def find_by_customer(self, customer_id: int) -> list[Sale]:
        return [s for s in self.list_all() if s.customer_id == customer_id]

    def find_by_date_range(self, start: datetime, end: datetime) -> list[Sale]:
        return [s for s in self.list_all() if start <= s.created_at <= end]

    def save(self, sale: Sale) -> None:
        self._store[sale.id] = copy.deepcopy(sale)

    def delete(self, sale: Sale) -> None:
        self._store.pop(sale.id, None)


class FakeUnitOfWork(AbstractUnitOfWork):
    """Snapshots every repository on entry and restores it on rollback."""

    def __init__(
        self,
        products: list[Product] | None = None,
        customers: list[Customer] | None = None,
        sellers: list[Seller] | None = None,
    ) -> None:
        self.products = FakeProductRepository(products)
        self.customers = FakeCustomerRepository(customers)
        self.sellers = FakeSellerRepository(sellers)
        self.sales = FakeSaleRepository()
        self.commits = 0
        self.rollbacks = 0
        self._snapshot: dict | None = None

    def __enter__(self) -> FakeUnitOfWork:
        self._snapshot = copy.deepcopy(
            {name: getattr(self, name) for name in ("products", "customers", "sellers", "sales")}
        )
        super().__enter__()
        return self

    def _commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1
        if self._snapshot is not None:
            for name, repo in self._snapshot.items():
                setattr(self, name, repo)
            self._snapshot = None
