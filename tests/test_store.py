"""Tests for the MongoDB store adapter (backed by mongomock)."""

import pytest
from pymongo.errors import DuplicateKeyError

from warehouse_api.app.core.db import ProductStore


def _product(product_id, name, price=10.0, quantity=1):
    return {"id": product_id, "name": name, "price": price, "description": "d", "quantity": quantity, "unit": "pcs"}


class TestQueries:

    def test_count_empty(self, store):
        assert store.count() == 0

    def test_find_applies_filter_and_sort(self, populated_store):
        docs = populated_store.find({"price": {"$gte": 10}}, [("name", 1)])
        assert [d["name"] for d in docs] == ["Butter", "Coffee", "Dates"]

    def test_find_by_id_and_name(self, populated_store):
        assert populated_store.find_by_id(2)["name"] == "Apples"
        assert populated_store.find_by_name("Dates")["id"] == 4
        assert populated_store.find_by_id(99) is None

    def test_max_id(self, store):
        assert store.max_id() == 0
        store.insert(_product(7, "A"))
        store.insert(_product(3, "B"))
        assert store.max_id() == 7


class TestTotals:

    def test_empty_collection_has_no_totals(self, store):
        assert store.totals() is None

    def test_totals_over_collection(self, store):
        store.insert(_product(1, "A", price=10.0, quantity=2))
        store.insert(_product(2, "B", price=2.5, quantity=4))
        assert store.totals() == {"totalProducts": 2, "totalQuantity": 6, "totalValue": 30.0}


class TestIdAllocation:

    def test_first_id_is_one(self, store):
        assert store.next_id() == 1
        assert store.next_id() == 2

    def test_follows_highest_stored_id(self, store):
        store.insert(_product(5, "A"))
        assert store.next_id() == 6

    def test_ids_are_not_reused_after_delete(self, store):
        store.insert(_product(store.next_id(), "A"))
        store.insert(_product(store.next_id(), "B"))
        assert store.delete(1) == 1
        assert store.delete(2) == 1
        assert store.next_id() == 3


class TestWrites:

    def test_update_reports_modified_count(self, populated_store):
        assert populated_store.update_fields(1, {"quantity": 11}) == 1
        assert populated_store.find_by_id(1)["quantity"] == 11

    def test_delete_missing_returns_zero(self, store):
        assert store.delete(1) == 0

    def test_insert_many_returns_count(self, store):
        assert store.insert_many([_product(1, "A"), _product(2, "B")]) == 2

    def test_unique_name_index(self, store):
        store.insert(_product(1, "A"))
        with pytest.raises(DuplicateKeyError):
            store.insert(_product(2, "A"))


def test_from_database_uses_named_collection(database):
    store = ProductStore.from_database(database, "stock")
    store.insert(_product(1, "A"))
    assert database["stock"].count_documents({}) == 1


def test_zero_count_group_result_means_no_totals(store, monkeypatch):
    # Some servers answer $group on an empty collection with a zero document.
    zero = {"_id": None, "totalProducts": 0, "totalQuantity": 0, "totalValue": 0.0}
    monkeypatch.setattr(store._collection, "aggregate", lambda pipeline: iter([zero]))
    assert store.totals() is None
