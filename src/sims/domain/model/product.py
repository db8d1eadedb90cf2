"""Product aggregate.

Products live independently of sales. Their stock quantity is the one
piece of state shared by every sale, so it is only ever changed through
``withdraw`` / ``restock`` (sales) or ``set_stock`` (catalog edits).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from sims.domain.exceptions import InsufficientStockError, ValidationError
from sims.domain.model.value_objects import Money, Quantity


@dataclass
class Product:
    """A product in the catalog.

    Invariant: ``stock_quantity`` is never negative.
    """

    id: int
    name: str
    price: Money
    stock_quantity: int = 0
    category: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def withdraw(self, quantity: Quantity) -> None:
        """Take *quantity* units out of stock for a sale."""
        if self.stock_quantity < quantity.value:
            raise InsufficientStockError(self.name)
        self.stock_quantity -= quantity.value

    def restock(self, quantity: Quantity) -> None:
        """Return *quantity* units to stock (sale reversed or deleted)."""
        self.stock_quantity += quantity.value

    def set_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        self.stock_quantity = quantity

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Existing sales are unaffected: each SaleItem keeps the unit price
        captured when it was created.
        """
        self.price = new_price
