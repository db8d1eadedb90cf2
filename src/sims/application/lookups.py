"""Shared lookups for handlers: fetch by id or raise EntityNotFoundError."""

from __future__ import annotations

from sims.application.unit_of_work import AbstractUnitOfWork
from sims.domain.exceptions import EntityNotFoundError, ValidationError
from sims.domain.model.customer import Customer
from sims.domain.model.product import Product
from sims.domain.model.sale import Sale
from sims.domain.model.seller import Seller


def require_id(value: int | None, entity: str) -> int:
    if value is None:
        raise ValidationError(f"{entity} ID is required")
    return value


def get_customer(uow: AbstractUnitOfWork, customer_id: int) -> Customer:
    customer = uow.customers.get_by_id(customer_id)
    if customer is None:
        raise EntityNotFoundError("Customer", customer_id)
    return customer


def get_seller(uow: AbstractUnitOfWork, seller_id: int) -> Seller:
    seller = uow.sellers.get_by_id(seller_id)
    if seller is None:
        raise EntityNotFoundError("Seller", seller_id)
    return seller


def get_product(uow: AbstractUnitOfWork, product_id: int) -> Product:
    product = uow.products.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError("Product", product_id)
    return product


def get_sale(uow: AbstractUnitOfWork, sale_id: int) -> Sale:
    sale = uow.sales.get_by_id(sale_id)
    if sale is None:
        raise EntityNotFoundError("Sale", sale_id)
    return sale


def get_seller_by_username(uow: AbstractUnitOfWork, username: str | None) -> Seller:
    if not username or not username.strip():
        raise ValidationError("Seller username is required")
    seller = uow.sellers.get_by_username(username.strip())
    if seller is None:
        raise EntityNotFoundError("Seller", username, field="username")
    return seller


def resolve_seller(
    uow: AbstractUnitOfWork, seller_id: int | None, username: str | None = None
) -> Seller:
    """The seller named by *username* when given, otherwise by *seller_id*."""
    if username is not None:
        return get_seller_by_username(uow, username)
    return get_seller(uow, require_id(seller_id, "Seller"))
