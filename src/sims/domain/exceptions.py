"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so the CLI
layer can catch them uniformly.  ``status_code`` is the HTTP-equivalent an
API layer would answer with.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    status_code = 400


class ValidationError(DomainException):
    """Invalid input, or a business rule or invariant was violated."""


class InsufficientStockError(ValidationError):
    """A requested quantity exceeds the product's current stock."""

    def __init__(self, product_name: str) -> None:
        super().__init__(f"Insufficient stock for product: {product_name}")
        self.product_name = product_name


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: object, field: str = "ID") -> None:
        super().__init__(f"{entity} not found with {field}: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateEntityError(DomainException):
    """A unique key (product name, tax id, username) is already taken."""

    status_code = 409


class PersistenceError(DomainException):
    """The underlying store could not be read or written."""

    status_code = 500
