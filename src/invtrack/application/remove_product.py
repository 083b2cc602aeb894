"""Application service: Remove Product use case."""

from __future__ import annotations

from invtrack.application.dto import ProductDTO
from invtrack.domain.exceptions import EntityNotFoundError
from invtrack.domain.repository.product_repository import ProductRepository


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        """Delete a product permanently and return what was removed."""
        product = self._product_repo.find_by_id(product_id)
        if product is None or not self._product_repo.delete(product_id):
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return ProductDTO.from_domain(product)
