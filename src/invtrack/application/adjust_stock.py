"""Application service: stock adjustments.

Restocking, selling and setting an exact level all reduce to a single
signed delta passed to ``ProductRepository.adjust_stock``.  The repository
refuses any delta that would take stock below zero.
"""

from __future__ import annotations

from invtrack.application.dto import ProductDTO
from invtrack.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    InvalidOperationError,
)
from invtrack.domain.model.product import Product
from invtrack.domain.repository.product_repository import ProductRepository


class AdjustStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def restock(self, product_id: int, quantity: int) -> ProductDTO:
        if quantity <= 0:
            raise InvalidArgumentError("Restock quantity must be positive")
        return self._apply(self._get(product_id), quantity)

    def sell(self, product_id: int, quantity: int) -> ProductDTO:
        if quantity <= 0:
            raise InvalidArgumentError("Sale quantity must be positive")
        return self._apply(self._get(product_id), -quantity)

    def set_exact(self, product_id: int, target: int) -> ProductDTO:
        if target < 0:
            raise InvalidArgumentError("Stock level cannot be negative")
        product = self._get(product_id)
        return self._apply(product, target - product.stock_quantity)

    # --- Internal helpers -----------------------------------------------------

    def _get(self, product_id: int) -> Product:
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return product

    def _apply(self, product: Product, delta: int) -> ProductDTO:
        if not self._product_repo.adjust_stock(product.id, delta):
            raise InvalidOperationError(
                f"Insufficient stock for {product.name} "
                f"(need {-delta}, have {product.stock_quantity})"
            )
        return ProductDTO.from_domain(product)
