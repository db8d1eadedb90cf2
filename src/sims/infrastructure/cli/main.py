import click

from sims.infrastructure.bootstrap import configure_logging
from sims.infrastructure.cli.customer_commands import (
    customer_add,
    customer_delete,
    customer_list,
    customer_show,
    customer_update,
)
from sims.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_price,
    product_stock,
)
from sims.infrastructure.cli.sale_commands import (
    sale_create,
    sale_delete,
    sale_list,
    sale_show,
    sale_total,
    sale_update,
)
from sims.infrastructure.cli.seller_commands import seller_add, seller_list


@click.group()
def cli() -> None:
    """SIMS: Sales & Inventory Management System"""
    configure_logging()


@cli.group()
def sale() -> None:
    """Manage sales."""


@cli.group()
def product() -> None:
    """Manage the product catalog and stock."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def seller() -> None:
    """Manage sellers."""


# Register subcommands
sale.add_command(sale_create)
sale.add_command(sale_delete)
sale.add_command(sale_list)
sale.add_command(sale_show)
sale.add_command(sale_total)
sale.add_command(sale_update)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_price)
product.add_command(product_stock)
customer.add_command(customer_add)
customer.add_command(customer_delete)
customer.add_command(customer_list)
customer.add_command(customer_show)
customer.add_command(customer_update)
seller.add_command(seller_add)
seller.add_command(seller_list)
