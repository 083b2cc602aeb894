"""Display-ready views of products handed from handlers to the CLI.

Prices are pre-formatted so the CLI never touches Money or Decimal.
"""

from __future__ import annotations

from dataclasses import dataclass

from invtrack.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: int
    name: str
    price: str  # formatted, e.g. "$29.99"
    stock_quantity: int
    category: str
    stock_value: str
    last_updated: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            stock_quantity=product.stock_quantity,
            category=product.category,
            stock_value=str(product.stock_value),
            last_updated=product.last_updated.strftime("%Y-%m-%d %H:%M:%S"),
        )


@dataclass(frozen=True)
class InventoryReportDTO:
    """Output: summary figures for the whole inventory."""

    product_count: int
    total_units: int
    total_value: str
    low_stock_count: int
    low_stock_threshold: int
