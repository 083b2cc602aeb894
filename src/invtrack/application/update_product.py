"""Application service: Update Product use case."""

from __future__ import annotations

from invtrack.application.dto import ProductDTO
from invtrack.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from invtrack.domain.model.value_objects import Money
from invtrack.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        price: str | None = None,
        category: str | None = None,
    ) -> ProductDTO:
        """Change name, price and/or category of an existing product.

        Stock is not touched here; use the stock adjustment handler.
        """
        if name is None and price is None and category is None:
            raise InvalidArgumentError("Nothing to update")

        new_price = Money.of(price) if price is not None else None
        if not self._product_repo.update(
            product_id, name=name, price=new_price, category=category
        ):
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        return ProductDTO.from_domain(self._product_repo.find_by_id(product_id))
