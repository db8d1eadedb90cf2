"""Application services: Customer registration, lookup, edits and removal."""

from __future__ import annotations

from sims.application.lookups import get_customer, require_id
from sims.application.unit_of_work import AbstractUnitOfWork
from sims.domain.exceptions import DuplicateEntityError, ValidationError
from sims.domain.model.customer import Customer


class AddCustomerHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        tax_id: str | None = None,
        phone: str | None = None,
    ) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        tax_id = tax_id.strip() if tax_id and tax_id.strip() else None

        with self._uow as uow:
            if tax_id is not None and uow.customers.get_by_tax_id(tax_id) is not None:
                raise DuplicateEntityError(
                    f"A customer with tax ID '{tax_id}' already exists"
                )
            next_id = max((c.id for c in uow.customers.list_all()), default=0) + 1
            customer = Customer(id=next_id, name=name.strip(), tax_id=tax_id, phone=phone)
            uow.customers.save(customer)
            uow.commit()
        return customer


class ListCustomersHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self, name_contains: str | None = None) -> list[Customer]:
        """Every customer, optionally only those whose name contains the text."""
        with self._uow as uow:
            customers = uow.customers.list_all()
        if name_contains:
            needle = name_contains.lower()
            customers = [c for c in customers if needle in c.name.lower()]
        return customers


class ShowCustomerHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self, customer_id: int) -> Customer:
        require_id(customer_id, "Customer")
        with self._uow as uow:
            return get_customer(uow, customer_id)


class UpdateCustomerHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        customer_id: int,
        name: str | None = None,
        tax_id: str | None = None,
        phone: str | None = None,
    ) -> Customer:
        """Change the given fields; ``None`` leaves a field as it is.

        The tax ID stays unique: taking one held by another customer
        raises DuplicateEntityError.
        """
        require_id(customer_id, "Customer")
        if name is not None and not name.strip():
            raise ValidationError("Customer name is required")

        with self._uow as uow:
            customer = get_customer(uow, customer_id)
            if name is not None:
                customer.name = name.strip()
            if tax_id is not None:
                tax_id = tax_id.strip() or None
                holder = uow.customers.get_by_tax_id(tax_id) if tax_id else None
                if holder is not None and holder.id != customer.id:
                    raise DuplicateEntityError(
                        f"A customer with tax ID '{tax_id}' already exists"
                    )
                customer.tax_id = tax_id
            if phone is not None:
                customer.phone = phone.strip() or None
            uow.customers.save(customer)
            uow.commit()
        return customer


class DeleteCustomerHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self, customer_id: int) -> None:
        """Remove a customer that no sale refers to."""
        require_id(customer_id, "Customer")
        with self._uow as uow:
            customer = get_customer(uow, customer_id)
            if uow.sales.find_by_customer(customer_id):
                raise ValidationError(
                    f"Customer #{customer_id} has sales and cannot be deleted"
                )
            uow.customers.delete(customer)
            uow.commit()
