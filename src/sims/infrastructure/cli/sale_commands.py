"""CLI commands for the Sale aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from sims.application.create_sale import CreateSaleHandler
from sims.application.delete_sale import DeleteSaleHandler
from sims.application.dto import SaleDTO, SaleItemSpec
from sims.application.list_sales import ListSalesHandler
from sims.application.seller_total import SellerTotalHandler
from sims.application.show_sale import ShowSaleHandler
from sims.application.update_sale import UpdateSaleHandler
from sims.domain.exceptions import DomainException
from sims.infrastructure.bootstrap import unit_of_work

_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


def _parse_items(raw: str) -> list[SaleItemSpec]:
    """Parse '1:3,2:5' (product ID : quantity) into SaleItemSpec list."""
    specs: list[SaleItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            product_id = int(id_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product ID and quantity must be integers."
            )
        specs.append(SaleItemSpec(product_id=product_id, quantity=qty))
    return specs


def _display_sale(dto: SaleDTO) -> None:
    """Shared formatting for displaying a sale."""
    click.echo(f"Sale #{dto.id}  (customer #{dto.customer_id}, seller #{dto.seller_id})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Sale Total':<27} {dto.total:>20}")


def _display_summary(sales: list[SaleDTO]) -> None:
    if not sales:
        click.echo("No sales found.")
        return
    click.echo(f"{'ID':<6} {'Customer':>9} {'Seller':>7} {'Items':>6} {'Total':>12}  Created")
    click.echo("-" * 64)
    for dto in sales:
        click.echo(
            f"{dto.id:<6} {dto.customer_id:>9} {dto.seller_id:>7} "
            f"{len(dto.items):>6} {dto.total:>12}  {dto.created_at}"
        )


@click.command("create")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--seller", required=True, help="Seller username.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
def sale_create(customer_id: int, seller: str, items: str) -> None:
    """Record a new sale (withdraws stock)."""
    specs = _parse_items(items)
    try:
        dto = CreateSaleHandler(unit_of_work()).handle(
            customer_id=customer_id, seller_id=None, item_specs=specs, seller_username=seller,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale #{dto.id} created.")
    _display_sale(dto)


@click.command("update")
@click.option("--id", "sale_id", required=True, type=int, help="Sale ID to update.")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--seller", required=True, help="Seller username.")
@click.option("--items", required=True, help="New items as 'ProductID:Qty,ProductID:Qty'.")
def sale_update(sale_id: int, customer_id: int, seller: str, items: str) -> None:
    """Replace the items of a sale (stock is returned, then withdrawn again)."""
    specs = _parse_items(items)
    try:
        dto = UpdateSaleHandler(unit_of_work()).handle(
            sale_id=sale_id, customer_id=customer_id, seller_id=None,
            item_specs=specs, seller_username=seller,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale #{dto.id} updated.")
    _display_sale(dto)


@click.command("delete")
@click.option("--id", "sale_id", required=True, type=int, help="Sale ID to delete.")
@click.option("--return-stock", is_flag=True, default=False, help="Return sold units to stock.")
def sale_delete(sale_id: int, return_stock: bool) -> None:
    """Delete a sale, optionally returning its units to stock."""
    try:
        DeleteSaleHandler(unit_of_work()).handle(sale_id, return_stock=return_stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if return_stock:
        click.echo(f"Sale #{sale_id} deleted, stock returned.")
    else:
        click.echo(f"Sale #{sale_id} deleted.")


@click.command("show")
@click.option("--id", "sale_id", required=True, type=int, help="Sale ID to display.")
def sale_show(sale_id: int) -> None:
    """Show details of an existing sale."""
    try:
        dto = ShowSaleHandler(unit_of_work()).handle(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_sale(dto)


@click.command("list")
@click.option("--seller", default=None, help="Only sales of this seller (username).")
@click.option("--customer", "customer_id", default=None, type=int, help="Only sales of this customer.")
@click.option("--from", "start", default=None, type=click.DateTime(_DATE_FORMATS), help="Created on/after (UTC).")
@click.option("--to", "end", default=None, type=click.DateTime(_DATE_FORMATS), help="Created on/before (UTC).")
def sale_list(
    seller: str | None,
    customer_id: int | None,
    start: datetime | None,
    end: datetime | None,
) -> None:
    """List sales, filtered by seller, customer, or creation date."""
    date_range = start is not None or end is not None
    if sum([seller is not None, customer_id is not None, date_range]) > 1:
        raise click.ClickException("Use only one of --seller, --customer, or --from/--to")
    if (start is None) != (end is None):
        raise click.ClickException("--from and --to must be given together")

    handler = ListSalesHandler(unit_of_work())
    try:
        if seller is not None:
            sales = handler.by_seller_username(seller)
        elif customer_id is not None:
            sales = handler.by_customer(customer_id)
        elif start is not None:
            sales = handler.by_date_range(start, end)
        else:
            sales = handler.all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_summary(sales)


@click.command("total")
@click.option("--seller", required=True, help="Seller username.")
def sale_total(seller: str) -> None:
    """Show the total value sold by a seller."""
    try:
        total = SellerTotalHandler(unit_of_work()).for_username(seller)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total sold by {seller}: {total}")
