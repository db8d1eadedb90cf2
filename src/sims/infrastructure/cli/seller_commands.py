"""CLI commands for sellers."""

from __future__ import annotations

import click

from sims.application.sellers import ListSellersHandler, RegisterSellerHandler
from sims.domain.exceptions import DomainException
from sims.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--username", required=True, help="Login name of the seller.")
@click.option("--name", "full_name", required=True, help="Full name.")
def seller_add(username: str, full_name: str) -> None:
    """Register a seller."""
    try:
        seller = RegisterSellerHandler(unit_of_work()).handle(username=username, full_name=full_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Seller #{seller.id} '{seller.username}' added")


@click.command("list")
def seller_list() -> None:
    """List sellers."""
    try:
        sellers = ListSellersHandler(unit_of_work()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not sellers:
        click.echo("No sellers found.")
        return

    click.echo(f"{'ID':<6} {'Username':<16} {'Name':<24}")
    click.echo("-" * 48)
    for s in sellers:
        click.echo(f"{s.id:<6} {s.username:<16} {s.full_name:<24}")
