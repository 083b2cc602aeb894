"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from invtrack.application.dto import InventoryReportDTO, ProductDTO
from invtrack.domain.exceptions import InvalidArgumentError
from invtrack.domain.repository.product_repository import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    ProductRepository,
)


class ShowInventoryHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        default_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._default_threshold = default_threshold

    def handle(self) -> list[ProductDTO]:
        return [ProductDTO.from_domain(p) for p in self._product_repo.list_all()]

    def low_stock(self, threshold: int | None = None) -> list[ProductDTO]:
        """Products at or below *threshold*; ``None`` uses the default."""
        return [
            ProductDTO.from_domain(p)
            for p in self._product_repo.list_low_stock(self._resolve(threshold))
        ]

    def categories(self) -> list[str]:
        return self._product_repo.categories()

    def report(self, threshold: int | None = None) -> InventoryReportDTO:
        resolved = self._resolve(threshold)
        products = self._product_repo.list_all()
        return InventoryReportDTO(
            product_count=len(products),
            total_units=sum(p.stock_quantity for p in products),
            total_value=str(self._product_repo.total_value()),
            low_stock_count=len(self._product_repo.list_low_stock(resolved)),
            low_stock_threshold=resolved,
        )

    def _resolve(self, threshold: int | None) -> int:
        if threshold is None:
            return self._default_threshold
        if threshold < 0:
            raise InvalidArgumentError("Low-stock threshold cannot be negative")
        return threshold
