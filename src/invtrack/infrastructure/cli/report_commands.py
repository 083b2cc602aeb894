"""CLI commands for inventory reports."""

from __future__ import annotations

import click

from invtrack.application.show_inventory import ShowInventoryHandler
from invtrack.infrastructure.cli.common import CliContext, echo_products, session
from invtrack.infrastructure.config import get_settings


def _handler(repo) -> ShowInventoryHandler:
    return ShowInventoryHandler(repo, default_threshold=get_settings().low_stock_threshold)


@click.command("low-stock")
@click.option(
    "--threshold",
    type=int,
    default=None,
    help="Show products at or below this level (default from settings).",
)
@click.pass_obj
def report_low_stock(ctx: CliContext, threshold: int | None) -> None:
    """List products running low, fewest first."""
    with session(ctx, persist=False) as repo:
        products = _handler(repo).low_stock(threshold)

    echo_products(products, empty_message="No products are low on stock.")


@click.command("value")
@click.pass_obj
def report_value(ctx: CliContext) -> None:
    """Show product count, units on hand and total stock value."""
    with session(ctx, persist=False) as repo:
        report = _handler(repo).report()

    click.echo(f"Products:     {report.product_count}")
    click.echo(f"Units:        {report.total_units}")
    click.echo(f"Total value:  {report.total_value}")
    click.echo(
        f"Low stock:    {report.low_stock_count} (at or below {report.low_stock_threshold})"
    )


@click.command("categories")
@click.pass_obj
def report_categories(ctx: CliContext) -> None:
    """List the distinct product categories."""
    with session(ctx, persist=False) as repo:
        categories = _handler(repo).categories()

    if not categories:
        click.echo("No categories found.")
        return
    for category in categories:
        click.echo(category)
