"""Application service: Add Product use case."""

from __future__ import annotations

from invtrack.application.dto import ProductDTO
from invtrack.domain.model.value_objects import Money
from invtrack.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, quantity: int, category: str) -> ProductDTO:
        """Add a new product to the inventory."""
        product = self._product_repo.create(
            name=name,
            price=Money.of(price),
            quantity=quantity,
            category=category,
        )
        return ProductDTO.from_domain(product)
