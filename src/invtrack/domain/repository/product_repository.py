"""In-memory product repository.

The repository is the sole owner of the live product set for a session.
Every mutation and query goes through it, so the stock and id invariants
hold no matter how well-behaved the caller is.  It knows nothing about
files or the CLI: a ``ProductStore`` hands it the full product list at
startup via ``load_from()`` and receives ``list_all()`` back at shutdown.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from decimal import Decimal

from invtrack.domain.exceptions import InvalidArgumentError, InvalidOperationError
from invtrack.domain.model.product import Product, require_stock, require_text
from invtrack.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

DEFAULT_LOW_STOCK_THRESHOLD = 5


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProductRepository:

    def __init__(
        self,
        products: Iterable[Product] = (),
        clock: Callable[[], datetime] = _utc_now,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._clock = clock
        self._low_stock_threshold = low_stock_threshold
        self._store: dict[int, Product] = {}
        self._next_id = 1
        self.load_from(products)

    def __len__(self) -> int:
        return len(self._store)

    @property
    def next_id(self) -> int:
        return self._next_id

    # --- Mutations ------------------------------------------------------------

    def create(
        self,
        name: str,
        price: Money | str | int | Decimal,
        quantity: int,
        category: str,
    ) -> Product:
        """Add a new product and return it with its assigned id.

        Raises InvalidArgumentError for a negative price or quantity, or a
        blank name or category.  Nothing is inserted in that case.
        """
        product = Product(
            id=self._next_id,
            name=require_text(name, "name"),
            price=Money.of(price),
            stock_quantity=require_stock(quantity),
            category=require_text(category, "category"),
            last_updated=self._clock(),
        )
        self._store[product.id] = product
        self._next_id += 1
        logger.info("Created product #%d '%s'", product.id, product.name)
        return product

    def update(
        self,
        product_id: int,
        name: str | None = None,
        price: Money | str | int | Decimal | None = None,
        category: str | None = None,
    ) -> bool:
        """Change a product's name, price and/or category.

        Returns False if the product does not exist.  Invalid values raise
        InvalidArgumentError and leave the product unchanged.
        """
        product = self._store.get(product_id)
        if product is None:
            return False
        new_price = Money.of(price) if price is not None else None
        product.update_details(self._clock(), name=name, price=new_price, category=category)
        logger.info("Updated product #%d", product_id)
        return True

    def delete(self, product_id: int) -> bool:
        removed = self._store.pop(product_id, None)
        if removed is None:
            return False
        logger.info("Deleted product #%d '%s'", removed.id, removed.name)
        return True

    def adjust_stock(self, product_id: int, delta: int) -> bool:
        """Apply ``stock_quantity += delta`` to one product.

        Restocks, sales and set-to-exact-value are all expressed as a delta.
        Returns False, with the product unchanged, if it does not exist or
        the new quantity would be negative.
        """
        product = self._store.get(product_id)
        if product is None:
            logger.debug("Stock adjustment for unknown product #%d", product_id)
            return False
        try:
            product.adjust_stock(delta, self._clock())
        except InvalidOperationError as exc:
            logger.debug("Rejected stock adjustment: %s", exc)
            return False
        return True

    def load_from(self, products: Iterable[Product]) -> None:
        """Replace the live set wholesale and recompute the next id.

        Raises InvalidArgumentError, keeping the previous set, if two
        products share an id.
        """
        incoming: dict[int, Product] = {}
        for product in products:
            if product.id in incoming:
                raise InvalidArgumentError(f"Duplicate product id {product.id}")
            incoming[product.id] = product

        self._store = incoming
        self._next_id = max(incoming, default=0) + 1

    # --- Queries --------------------------------------------------------------

    def find_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def find_by_name(self, substring: str) -> list[Product]:
        """Case-insensitive substring match on the product name.

        The text is matched as given, surrounding spaces included.
        """
        if not substring:
            return []
        needle = substring.casefold()
        return [p for p in self.list_all() if needle in p.name.casefold()]

    def find_by_category(self, category: str) -> list[Product]:
        wanted = (category or "").strip().casefold()
        return [p for p in self.list_all() if p.category.casefold() == wanted]

    def categories(self) -> list[str]:
        return sorted({p.category for p in self._store.values()})

    def list_all(self) -> list[Product]:
        return [self._store[pid] for pid in sorted(self._store)]

    def list_low_stock(self, threshold: int | None = None) -> list[Product]:
        """Products at or below *threshold*, fewest first.

        ``None`` selects the repository's default threshold; ``0`` means
        exactly zero.
        """
        if threshold is None:
            threshold = self._low_stock_threshold
        low = [p for p in self._store.values() if p.stock_quantity <= threshold]
        return sorted(low, key=lambda p: (p.stock_quantity, p.id))

    def total_value(self) -> Money:
        result = Money.zero()
        for product in self._store.values():
            result = result + product.stock_value
        return result
