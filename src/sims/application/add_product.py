"""Application service: Add Product use case."""

from __future__ import annotations

from sims.application.unit_of_work import AbstractUnitOfWork
from sims.domain.exceptions import DuplicateEntityError, ValidationError
from sims.domain.model.product import Product
from sims.domain.model.value_objects import Money


class AddProductHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        price: str,
        stock: int = 0,
        category: str | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if stock < 0:
            raise ValidationError("Stock quantity cannot be negative")
        unit_price = Money.of(price)

        with self._uow as uow:
            if uow.products.get_by_name(name.strip()) is not None:
                raise DuplicateEntityError(f"Product '{name.strip()}' already exists")

            # Auto-assign ID based on existing products
            all_products = uow.products.list_all()
            next_id = max((p.id for p in all_products), default=0) + 1

            product = Product(
                id=next_id,
                name=name.strip(),
                price=unit_price,
                stock_quantity=stock,
                category=category.strip() if category else None,
            )
            uow.products.save(product)
            uow.commit()
        return product
