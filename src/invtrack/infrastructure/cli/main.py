from pathlib import Path

import click

from invtrack.infrastructure.cli.common import CliContext
from invtrack.infrastructure.cli.product_commands import (
    product_add,
    product_find,
    product_list,
    product_remove,
    product_show,
    product_update,
)
from invtrack.infrastructure.cli.report_commands import (
    report_categories,
    report_low_stock,
    report_value,
)
from invtrack.infrastructure.cli.stock_commands import stock_restock, stock_sell, stock_set
from invtrack.infrastructure.config import get_settings
from invtrack.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Inventory JSON file (overrides INVTRACK_DATA_FILE).",
)
@click.option("--log-level", default=None, help="Logging level, e.g. INFO or DEBUG.")
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None, log_level: str | None) -> None:
    """invtrack: local inventory tracker"""
    settings = get_settings()
    configure_logging(level=log_level or settings.log_level, json_logs=settings.json_logs)
    ctx.obj = CliContext(data_file=data_file)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Adjust stock levels."""


@cli.group()
def report() -> None:
    """Inventory reports."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_find)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_restock)
stock.add_command(stock_sell)
stock.add_command(stock_set)
report.add_command(report_categories)
report.add_command(report_low_stock)
report.add_command(report_value)
