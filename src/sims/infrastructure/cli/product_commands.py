"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from sims.application.add_product import AddProductHandler
from sims.application.set_stock import SetStockHandler
from sims.application.show_inventory import ShowInventoryHandler
from sims.application.update_product import UpdateProductPriceHandler
from sims.domain.exceptions import DomainException
from sims.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, type=int, show_default=True, help="Initial stock quantity.")
@click.option("--category", default=None, help="Product category.")
def product_add(name: str, price: str, stock: int, category: str | None) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(unit_of_work())

    try:
        product = handler.handle(name=name, price=price, stock=stock, category=category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"({product.stock_quantity} in stock)"
    )


@click.command("list")
def product_list() -> None:
    """List all products with their stock."""
    try:
        lines = ShowInventoryHandler(unit_of_work()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<12} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 59)
    for line in lines:
        click.echo(
            f"{line.product_id:<6} {line.product_name:<20} {line.category or '-':<12} "
            f"{line.price:>10} {line.stock:>7}"
        )


@click.command("price")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_price(product_id: int, price: str) -> None:
    """Update a product's price (existing sales keep their prices)."""
    handler = UpdateProductPriceHandler(unit_of_work())

    try:
        handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} price updated to {price}")


@click.command("stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Quantity in stock.")
def product_stock(product_id: int, quantity: int) -> None:
    """Set the stock quantity of a product."""
    handler = SetStockHandler(unit_of_work())

    try:
        handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for product #{product_id} set to {quantity}")
