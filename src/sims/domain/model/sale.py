"""Sale aggregate: the core of the domain.

The Sale is an aggregate root that owns its line items by value.  Items
are only ever added, cleared, or dropped together with the sale, and the
total is always derived from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from sims.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class SaleItem:
    """One line of a sale.

    ``unit_price`` is a copy of the product price at the moment the line
    was created, so later catalog price changes never alter old totals.
    """

    sale_id: int
    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # frozen at sale time

    @property
    def key(self) -> tuple[int, int]:
        return (self.sale_id, self.product_id)

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Sale:
    """Aggregate root for sales.

    Use ``Sale.open()`` for new sales.  The ``__init__`` stays simple so
    repositories can reconstitute persisted sales without re-validating.
    """

    id: int
    customer_id: int
    seller_id: int
    items: list[SaleItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def open(sale_id: int, customer_id: int, seller_id: int) -> Sale:
        """Start a new, still empty sale."""
        return Sale(id=sale_id, customer_id=customer_id, seller_id=seller_id)

    # --- Item collection ------------------------------------------------------

    def add_item(self, product_id: int, product_name: str,
                 quantity: Quantity, unit_price: Money) -> SaleItem:
        item = SaleItem(
            sale_id=self.id,
            product_id=product_id,
            product_name=product_name,
            quantity=quantity,
            unit_price=unit_price,
        )
        self.items.append(item)
        return item

    def clear_items(self) -> None:
        """Drop every line in place; the sale keeps its id and timestamp."""
        self.items.clear()

    def reassign(self, customer_id: int, seller_id: int) -> None:
        self.customer_id = customer_id
        self.seller_id = seller_id

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        return Money.sum([item.subtotal for item in self.items])
