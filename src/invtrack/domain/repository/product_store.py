"""Abstract store for the whole product set.

Defined in the domain layer so the domain never depends on
infrastructure. The store is used once per session to load every
product and once to save them all back; there are no per-record writes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from invtrack.domain.exceptions import PersistenceError
from invtrack.domain.model.product import Product


@dataclass(frozen=True)
class LoadResult:
    """Outcome of ``ProductStore.load()``.

    A failed load still carries a (possibly empty) product list so the
    session can continue with an empty inventory.
    """

    products: list[Product] = field(default_factory=list)
    error: PersistenceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ProductStore(ABC):

    @abstractmethod
    def load(self) -> LoadResult:
        """Return every persisted product; never raises."""

    @abstractmethod
    def save(self, products: list[Product]) -> bool:
        """Replace the persisted set with *products*; return success."""
