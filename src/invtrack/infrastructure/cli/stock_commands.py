"""CLI commands for stock adjustments."""

from __future__ import annotations

import click

from invtrack.application.adjust_stock import AdjustStockHandler
from invtrack.infrastructure.cli.common import CliContext, session


@click.command("restock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units received.")
@click.pass_obj
def stock_restock(ctx: CliContext, product_id: int, quantity: int) -> None:
    """Add units to a product's stock."""
    with session(ctx) as repo:
        product = AdjustStockHandler(repo).restock(product_id, quantity)

    click.echo(f"'{product.name}' restocked, now {product.stock_quantity} in stock.")


@click.command("sell")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units sold.")
@click.pass_obj
def stock_sell(ctx: CliContext, product_id: int, quantity: int) -> None:
    """Remove sold units from a product's stock."""
    with session(ctx) as repo:
        product = AdjustStockHandler(repo).sell(product_id, quantity)

    click.echo(f"Sold {quantity} x '{product.name}', {product.stock_quantity} left.")


@click.command("set")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Exact stock level.")
@click.pass_obj
def stock_set(ctx: CliContext, product_id: int, quantity: int) -> None:
    """Set a product's stock to an exact level."""
    with session(ctx) as repo:
        product = AdjustStockHandler(repo).set_exact(product_id, quantity)

    click.echo(f"Stock for '{product.name}' set to {product.stock_quantity}")
