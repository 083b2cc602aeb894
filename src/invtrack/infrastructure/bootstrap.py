"""Composition root.

Builds the JSON store and inventory sessions from the current settings.
The CLI gets everything it needs from here and never constructs adapters
itself.
"""

from __future__ import annotations

from pathlib import Path

from invtrack.application.session import InventorySession
from invtrack.infrastructure.config import get_settings
from invtrack.infrastructure.persistence.json_product_store import JsonProductStore


def product_store(data_file: Path | None = None) -> JsonProductStore:
    return JsonProductStore(data_file or get_settings().data_file)


def inventory_session(data_file: Path | None = None, persist: bool = True) -> InventorySession:
    return InventorySession(
        product_store(data_file),
        persist=persist,
        low_stock_threshold=get_settings().low_stock_threshold,
    )
