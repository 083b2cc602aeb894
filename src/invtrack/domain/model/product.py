"""Product aggregate.

A product is the only entity the tracker knows about: a named, priced,
categorised item with a stock level that can never go negative.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from invtrack.domain.exceptions import InvalidArgumentError, InvalidOperationError
from invtrack.domain.model.value_objects import Money


def require_text(value: str, field_name: str) -> str:
    """Return *value* stripped, or raise if it is blank."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"Product {field_name} is required")
    return value.strip()


def require_stock(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(
            f"Stock quantity must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidArgumentError(f"Stock quantity cannot be negative, got {value}")
    return value


@dataclass
class Product:
    """Aggregate root for a single inventory record.

    Invariants:
    - ``stock_quantity`` is always >= 0
    - ``last_updated`` only ever moves forward

    The ``__init__`` is intentionally simple so the store can reconstitute
    persisted products without re-stamping them.  New products are created
    through ``ProductRepository.create()``, which assigns the id.
    """

    id: int
    name: str
    price: Money
    stock_quantity: int
    category: str
    last_updated: datetime

    # --- Mutations ------------------------------------------------------------

    def adjust_stock(self, delta: int, now: datetime) -> None:
        """Apply ``stock_quantity += delta``.

        Raises InvalidOperationError, leaving the product untouched, if the
        result would be negative.
        """
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise InvalidArgumentError(
                f"Stock delta must be an integer, got {type(delta).__name__}"
            )
        new_quantity = self.stock_quantity + delta
        if new_quantity < 0:
            raise InvalidOperationError(
                f"Insufficient stock for {self.name} "
                f"(change {delta:+d}, have {self.stock_quantity})"
            )
        self.stock_quantity = new_quantity
        self.touch(now)

    def update_details(
        self,
        now: datetime,
        name: str | None = None,
        price: Money | None = None,
        category: str | None = None,
    ) -> None:
        """Change any of name, price or category.

        All values are validated before anything is assigned.
        """
        new_name = require_text(name, "name") if name is not None else self.name
        new_category = (
            require_text(category, "category") if category is not None else self.category
        )
        if price is not None and not isinstance(price, Money):
            raise InvalidArgumentError("Product price must be a Money value")

        self.name = new_name
        self.category = new_category
        if price is not None:
            self.price = price
        self.touch(now)

    def touch(self, now: datetime) -> None:
        if now > self.last_updated:
            self.last_updated = now

    # --- Computed properties --------------------------------------------------

    @property
    def stock_value(self) -> Money:
        return self.price * self.stock_quantity
