"""Application service: product lookups (queries)."""

from __future__ import annotations

from invtrack.application.dto import ProductDTO
from invtrack.domain.exceptions import EntityNotFoundError
from invtrack.domain.repository.product_repository import ProductRepository


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def by_id(self, product_id: int) -> ProductDTO:
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return ProductDTO.from_domain(product)

    def by_name(self, substring: str) -> list[ProductDTO]:
        return [ProductDTO.from_domain(p) for p in self._product_repo.find_by_name(substring)]

    def by_category(self, category: str) -> list[ProductDTO]:
        return [
            ProductDTO.from_domain(p) for p in self._product_repo.find_by_category(category)
        ]
