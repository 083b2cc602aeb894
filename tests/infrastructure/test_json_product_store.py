"""Tests for the JSON-file-backed ProductStore."""

import json
import os
import stat
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from invtrack.domain.model.product import Product
from invtrack.domain.model.value_objects import Money
from invtrack.domain.repository.product_repository import ProductRepository
from invtrack.infrastructure.persistence.json_product_store import JsonProductStore

T0 = datetime(2026, 3, 14, 15, 9, 26, 535897, tzinfo=timezone.utc)


def _products() -> list[Product]:
    return [
        Product(1, "Cable", Money.of("9.99"), 100, "Electronics", T0),
        Product(2, "Wireless Mouse", Money.of("29.99"), 50, "Electronics", T0),
        Product(4, "Office Chair", Money.of("199.99"), 15, "Furniture", T0),
    ]


@pytest.fixture
def store(tmp_path):
    return JsonProductStore(tmp_path / "data" / "inventory.json")


class TestLoad:

    def test_missing_file_is_empty_without_error(self, store):
        result = store.load()
        assert result.ok
        assert result.products == []

    @pytest.mark.parametrize("content", ["", "  \n"], ids=["zero-bytes", "whitespace"])
    def test_blank_file_is_empty_without_error(self, store, content):
        store.file_path.parent.mkdir(parents=True)
        store.file_path.write_text(content, encoding="utf-8")
        result = store.load()
        assert result.ok
        assert result.products == []

        repo = ProductRepository()
        repo.load_from(result.products)
        assert repo.next_id == 1
        assert repo.create("Wireless Mouse", "29.99", 50, "Electronics").id == 1

    def test_invalid_json_is_empty_with_error(self, store):
        store.file_path.parent.mkdir(parents=True)
        store.file_path.write_text("{not json", encoding="utf-8")
        result = store.load()
        assert result.products == []
        assert not result.ok
        assert "Could not load" in str(result.error)

    @pytest.mark.parametrize(
        "document",
        [
            {"id": 1},
            [{"id": 1, "name": "A", "price": "1.00", "category": "Misc",
              "lastUpdated": "2026-01-01T00:00:00+00:00"}],
            [{"id": 1, "name": "A", "price": "1.00", "stockQuantity": -1,
              "category": "Misc", "lastUpdated": "2026-01-01T00:00:00+00:00"}],
            [{"id": 1, "name": "A", "price": "-1.00", "stockQuantity": 1,
              "category": "Misc", "lastUpdated": "2026-01-01T00:00:00+00:00"}],
            [{"id": 1, "name": "A", "price": "1.00", "stockQuantity": 1,
              "category": "Misc", "lastUpdated": "yesterday"}],
            [{"id": 1, "name": "A", "price": "1.00", "stockQuantity": 1,
              "category": "Misc", "lastUpdated": "2026-01-01T00:00:00+00:00"}] * 2,
            "[" * 200000 + "]" * 200000,
        ],
        ids=["not-array", "missing-field", "negative-stock", "negative-price",
             "bad-timestamp", "duplicate-ids", "deeply-nested"],
    )
    def test_malformed_documents_degrade_to_empty(self, store, document):
        store.file_path.parent.mkdir(parents=True)
        text = document if isinstance(document, str) else json.dumps(document)
        store.file_path.write_text(text, encoding="utf-8")
        result = store.load()
        assert result.products == []
        assert result.error is not None

    def test_numeric_price_read_without_float_drift(self, store):
        store.file_path.parent.mkdir(parents=True)
        store.file_path.write_text(
            '[{"id": 3, "name": "Cable", "price": 0.1, "stockQuantity": 3,'
            ' "category": "Misc", "lastUpdated": "2026-01-01T00:00:00"}]',
            encoding="utf-8",
        )
        (product,) = store.load().products
        assert product.price.amount == Decimal("0.1")
        assert product.last_updated.tzinfo is timezone.utc


class TestSave:

    def test_round_trip_is_field_for_field_equal(self, store):
        assert store.save(_products()) is True
        result = store.load()
        assert result.ok
        assert result.products == _products()

    def test_round_trip_through_repository(self, store):
        repo = ProductRepository()
        repo.load_from(_products())
        store.save(repo.list_all())

        reloaded = ProductRepository()
        reloaded.load_from(store.load().products)
        assert reloaded.list_all() == repo.list_all()
        assert reloaded.next_id == 5
        assert reloaded.total_value().amount == Decimal("5498.35")

    def test_document_layout(self, store):
        store.save(list(reversed(_products())))
        raw = json.loads(store.file_path.read_text(encoding="utf-8"))
        assert [r["id"] for r in raw] == [1, 2, 4]
        assert raw[1] == {
            "id": 2,
            "name": "Wireless Mouse",
            "price": "29.99",
            "stockQuantity": 50,
            "category": "Electronics",
            "lastUpdated": T0.isoformat(),
        }

    def test_save_overwrites_whole_document(self, store):
        store.save(_products())
        store.save(_products()[:1])
        assert [p.id for p in store.load().products] == [1]

    def test_save_empty_set(self, store):
        store.save(_products())
        assert store.save([]) is True
        assert store.load().products == []

    def test_no_temp_files_left_behind(self, store):
        store.save(_products())
        assert [p.name for p in store.file_path.parent.iterdir()] == ["inventory.json"]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX file modes")
    def test_save_keeps_existing_file_mode(self, store):
        store.save(_products())
        os.chmod(store.file_path, 0o640)
        store.save(_products()[:1])
        assert stat.S_IMODE(store.file_path.stat().st_mode) == 0o640

    def test_failed_save_keeps_previous_file(self, store, monkeypatch):
        store.save(_products())
        before = store.file_path.read_text(encoding="utf-8")

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(
            "invtrack.infrastructure.persistence.json_product_store.os.replace",
            broken_replace,
        )
        assert store.save(_products()[:1]) is False
        assert store.file_path.read_text(encoding="utf-8") == before
        assert [p.name for p in store.file_path.parent.iterdir()] == ["inventory.json"]
