"""JSON-file-backed implementation of ProductStore."""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from invtrack.domain.exceptions import DomainException, PersistenceError
from invtrack.domain.model.product import Product, require_stock, require_text
from invtrack.domain.model.value_objects import Money
from invtrack.domain.repository.product_store import LoadResult, ProductStore

logger = logging.getLogger(__name__)


class JsonProductStore(ProductStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- ProductStore interface -----------------------------------------------

    def load(self) -> LoadResult:
        if not self._file_path.exists():
            logger.info("No inventory file at %s; starting empty", self._file_path)
            return LoadResult()

        try:
            text = self._file_path.read_text(encoding="utf-8")
            if not text.strip():
                logger.info("Inventory file %s is empty; starting empty", self._file_path)
                return LoadResult()
            products = self._parse(json.loads(text, parse_float=Decimal))
        except (OSError, ValueError, RecursionError, DomainException) as exc:
            error = PersistenceError(f"Could not load {self._file_path}: {exc}")
            logger.warning("%s; starting with an empty inventory", error)
            return LoadResult(error=error)

        logger.info("Loaded %d products from %s", len(products), self._file_path)
        return LoadResult(products=products)

    def save(self, products: list[Product]) -> bool:
        try:
            payload = json.dumps(
                [self._to_raw(p) for p in sorted(products, key=lambda p: p.id)],
                indent=2,
            ) + "\n"
            self._replace_file(payload)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Could not save inventory to %s: %s", self._file_path, exc)
            return False

        logger.info("Saved %d products to %s", len(products), self._file_path)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "stockQuantity": product.stock_quantity,
            "category": product.category,
            "lastUpdated": product.last_updated.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        if not isinstance(raw, dict):
            raise PersistenceError(f"Expected a product object, got {type(raw).__name__}")
        try:
            product_id = raw["id"]
            price = raw["price"]
            last_updated = datetime.fromisoformat(raw["lastUpdated"])
            name, quantity, category = raw["name"], raw["stockQuantity"], raw["category"]
        except KeyError as exc:
            raise PersistenceError(f"Product record missing field {exc}") from exc
        except TypeError as exc:
            raise PersistenceError(f"Invalid lastUpdated value: {exc}") from exc

        if not isinstance(product_id, int) or isinstance(product_id, bool) or product_id < 1:
            raise PersistenceError(f"Invalid product id {product_id!r}")
        if isinstance(price, (bool, float)) or not isinstance(price, (str, int, Decimal)):
            raise PersistenceError(f"Invalid price {price!r} for product #{product_id}")
        if last_updated.tzinfo is None:
            last_updated = last_updated.replace(tzinfo=timezone.utc)

        return Product(
            id=product_id,
            name=require_text(name, "name"),
            price=Money.of(price),
            stock_quantity=require_stock(quantity),
            category=require_text(category, "category"),
            last_updated=last_updated,
        )

    def _parse(self, raw: object) -> list[Product]:
        if not isinstance(raw, list):
            raise PersistenceError("Inventory document must be a JSON array")
        products = [self._to_domain(item) for item in raw]
        ids = [p.id for p in products]
        if len(ids) != len(set(ids)):
            raise PersistenceError("Inventory document contains duplicate product ids")
        return products

    # --- File helpers ---------------------------------------------------------

    def _replace_file(self, payload: str) -> None:
        """Write *payload* next to the target, then swap it into place.

        The previous file stays intact if anything fails before the rename.
        """
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            if self._file_path.exists():
                os.chmod(tmp_name, stat.S_IMODE(self._file_path.stat().st_mode))
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
