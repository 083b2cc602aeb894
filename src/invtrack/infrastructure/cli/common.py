"""Shared helpers for CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import click

from invtrack.application.dto import ProductDTO
from invtrack.domain.exceptions import DomainException
from invtrack.domain.repository.product_repository import ProductRepository
from invtrack.infrastructure.bootstrap import inventory_session


@dataclass
class CliContext:
    """Options given to the top-level ``invtrack`` group."""

    data_file: Path | None = None


@contextmanager
def session(ctx: CliContext, persist: bool = True) -> Iterator[ProductRepository]:
    """Open an inventory session and turn domain errors into CLI errors."""
    inv_session = inventory_session(ctx.data_file, persist=persist)
    try:
        with inv_session as repo:
            if inv_session.load_error is not None:
                click.echo(f"Warning: {inv_session.load_error}", err=True)
            yield repo
    except DomainException as exc:
        raise click.ClickException(str(exc))


def echo_products(products: list[ProductDTO], empty_message: str = "No products found.") -> None:
    if not products:
        click.echo(empty_message)
        return

    click.echo(
        f"{'ID':<6} {'Name':<24} {'Category':<16} {'Price':>10} {'Stock':>7} {'Value':>12}"
    )
    click.echo("-" * 80)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<24} {p.category:<16} {p.price:>10} "
            f"{p.stock_quantity:>7} {p.stock_value:>12}"
        )


def echo_product(p: ProductDTO) -> None:
    click.echo(f"Product #{p.id}: {p.name}")
    click.echo(f"  Category: {p.category}")
    click.echo(f"  Price:    {p.price}")
    click.echo(f"  Stock:    {p.stock_quantity}")
    click.echo(f"  Value:    {p.stock_value}")
    click.echo(f"  Updated:  {p.last_updated}")
