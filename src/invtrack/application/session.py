"""Inventory session: load once, work in memory, save once.

    with InventorySession(store) as repo:
        repo.create("Wireless Mouse", "29.99", 50, "Electronics")

On entry the store's products are loaded into a fresh repository.  On a
clean exit the full product set is written back; if the block raised, the
persisted file is left as it was.
"""

from __future__ import annotations

import logging

from invtrack.domain.exceptions import PersistenceError
from invtrack.domain.repository.product_repository import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    ProductRepository,
)
from invtrack.domain.repository.product_store import ProductStore

logger = logging.getLogger(__name__)


class InventorySession:

    def __init__(
        self,
        store: ProductStore,
        persist: bool = True,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._store = store
        self._persist = persist
        self._low_stock_threshold = low_stock_threshold
        self.repository: ProductRepository | None = None
        self.load_error: PersistenceError | None = None

    def open(self) -> ProductRepository:
        result = self._store.load()
        self.load_error = result.error
        self.repository = ProductRepository(low_stock_threshold=self._low_stock_threshold)
        self.repository.load_from(result.products)
        return self.repository

    def close(self) -> None:
        """Persist the full product set.

        Raises PersistenceError if the store reports a failed save; the
        in-memory repository is left as it is.
        """
        if self.repository is None or not self._persist:
            return
        if not self._store.save(self.repository.list_all()):
            raise PersistenceError("Inventory could not be saved; changes were not written")

    def __enter__(self) -> ProductRepository:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            logger.debug("Session ended with %s; not saving", exc_type.__name__)
            return
        self.close()
