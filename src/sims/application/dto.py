"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from sims.domain.exceptions import ValidationError
from sims.domain.model.sale import Sale
from sims.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class SaleItemSpec:
    """Input: one requested line (product id + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class SaleItemDTO:
    """Output: a single sale line as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "15.00"
    subtotal: str


@dataclass(frozen=True)
class SaleDTO:
    """Output: a complete sale as displayed to the user."""

    id: int
    customer_id: int
    seller_id: int
    items: list[SaleItemDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class StockLineDTO:
    product_id: int
    product_name: str
    category: str | None
    price: str
    stock: int


def to_lines(item_specs: list[SaleItemSpec]) -> list[tuple[int, Quantity]]:
    """Validate requested lines before anything is touched.

    Rejects an empty request, a missing product id, and any quantity
    that is not a positive integer.
    """
    if not item_specs:
        raise ValidationError("Sale must contain at least one item")

    lines: list[tuple[int, Quantity]] = []
    for spec in item_specs:
        if spec.product_id is None:
            raise ValidationError("Product ID is required for every item")
        lines.append((spec.product_id, Quantity(spec.quantity)))
    return lines


def sale_to_dto(sale: Sale) -> SaleDTO:
    return SaleDTO(
        id=sale.id,
        customer_id=sale.customer_id,
        seller_id=sale.seller_id,
        items=[
            SaleItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                subtotal=str(item.subtotal),
            )
            for item in sale.items
        ],
        total=str(sale.total),
        created_at=sale.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
