"""CLI commands for managing products."""

from __future__ import annotations

import click

from invtrack.application.add_product import AddProductHandler
from invtrack.application.remove_product import RemoveProductHandler
from invtrack.application.search_products import SearchProductsHandler
from invtrack.application.show_inventory import ShowInventoryHandler
from invtrack.application.update_product import UpdateProductHandler
from invtrack.infrastructure.cli.common import CliContext, echo_product, echo_products, session


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 29.99).")
@click.option("--quantity", required=True, type=int, help="Initial stock quantity.")
@click.option("--category", required=True, help="Product category.")
@click.pass_obj
def product_add(ctx: CliContext, name: str, price: str, quantity: int, category: str) -> None:
    """Add a new product to the inventory."""
    with session(ctx) as repo:
        product = AddProductHandler(repo).handle(
            name=name, price=price, quantity=quantity, category=category
        )

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New unit price (e.g. 24.99).")
@click.option("--category", default=None, help="New category.")
@click.pass_obj
def product_update(
    ctx: CliContext,
    product_id: int,
    name: str | None,
    price: str | None,
    category: str | None,
) -> None:
    """Update a product's name, price or category."""
    with session(ctx) as repo:
        product = UpdateProductHandler(repo).handle(
            product_id, name=name, price=price, category=category
        )

    click.echo(f"Product #{product.id} updated.")
    echo_product(product)


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_remove(ctx: CliContext, product_id: int) -> None:
    """Remove a product permanently."""
    with session(ctx) as repo:
        product = RemoveProductHandler(repo).handle(product_id)

    click.echo(f"Product #{product.id} '{product.name}' removed.")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(ctx: CliContext, product_id: int) -> None:
    """Show details of a single product."""
    with session(ctx, persist=False) as repo:
        product = SearchProductsHandler(repo).by_id(product_id)

    echo_product(product)


@click.command("list")
@click.pass_obj
def product_list(ctx: CliContext) -> None:
    """List all products by ID."""
    with session(ctx, persist=False) as repo:
        products = ShowInventoryHandler(repo).handle()

    echo_products(products)


@click.command("find")
@click.option("--name", default=None, help="Case-insensitive part of the name.")
@click.option("--category", default=None, help="Exact category (case-insensitive).")
@click.pass_obj
def product_find(ctx: CliContext, name: str | None, category: str | None) -> None:
    """Search products by name or category."""
    if (name is None) == (category is None):
        raise click.UsageError("Give exactly one of --name or --category.")

    with session(ctx, persist=False) as repo:
        handler = SearchProductsHandler(repo)
        products = handler.by_name(name) if name is not None else handler.by_category(category)

    echo_products(products, empty_message="No matching products.")
