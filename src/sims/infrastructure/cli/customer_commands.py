"""CLI commands for customers."""

from __future__ import annotations

import click

from sims.application.customers import (
    AddCustomerHandler,
    DeleteCustomerHandler,
    ListCustomersHandler,
    ShowCustomerHandler,
    UpdateCustomerHandler,
)
from sims.domain.exceptions import DomainException
from sims.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--tax-id", default=None, help="CPF/CNPJ (unique).")
@click.option("--phone", default=None, help="Phone number.")
def customer_add(name: str, tax_id: str | None, phone: str | None) -> None:
    """Register a customer."""
    try:
        customer = AddCustomerHandler(unit_of_work()).handle(name=name, tax_id=tax_id, phone=phone)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer.id} '{customer.name}' added")


@click.command("list")
@click.option("--name", "name_contains", default=None, help="Filter by part of the name.")
def customer_list(name_contains: str | None) -> None:
    """List customers."""
    try:
        customers = ListCustomersHandler(unit_of_work()).handle(name_contains=name_contains)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Tax ID':<20} {'Phone':<16}")
    click.echo("-" * 69)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<24} {c.tax_id or '-':<20} {c.phone or '-':<16}")


@click.command("show")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
def customer_show(customer_id: int) -> None:
    """Show one customer."""
    try:
        c = ShowCustomerHandler(unit_of_work()).handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{c.id}")
    click.echo(f"  Name:    {c.name}")
    click.echo(f"  Tax ID:  {c.tax_id or '-'}")
    click.echo(f"  Phone:   {c.phone or '-'}")
    click.echo(f"  Created: {c.created_at:%Y-%m-%d %H:%M} UTC")


@click.command("update")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--tax-id", default=None, help="New CPF/CNPJ (empty string clears it).")
@click.option("--phone", default=None, help="New phone (empty string clears it).")
def customer_update(
    customer_id: int, name: str | None, tax_id: str | None, phone: str | None
) -> None:
    """Edit a customer; options left out keep their current values."""
    try:
        c = UpdateCustomerHandler(unit_of_work()).handle(
            customer_id, name=name, tax_id=tax_id, phone=phone,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{c.id} '{c.name}' updated")


@click.command("delete")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
def customer_delete(customer_id: int) -> None:
    """Delete a customer without sales."""
    try:
        DeleteCustomerHandler(unit_of_work()).handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer_id} deleted")
