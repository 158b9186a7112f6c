"""Unit tests for the record store."""

import pytest

from inventory_manager.data.sample_data import SEED_CURRENT_INVENTORY, SEED_OPTIMAL_INVENTORY
from inventory_manager.store import InMemoryRecordStore, RecordStore
from tests.helpers import make_policy, make_stock


class TestInMemoryRecordStore:
    """Test in-memory record store."""

    def test_is_record_store(self, seed_store):
        assert isinstance(seed_store, RecordStore)

    def test_get_stock_and_policy(self, seed_store):
        """Test lookups by product id."""
        stock = seed_store.get_stock("product_001")
        policy = seed_store.get_policy("product_001")

        assert stock is not None
        assert stock.current_stock == 25
        assert policy is not None
        assert policy.reorder_point == 30

    def test_unknown_id_returns_none(self, seed_store):
        """Unknown ids are reported as missing, not as zero-valued records."""
        assert seed_store.get_stock("product_999") is None
        assert seed_store.get_policy("product_999") is None

    def test_list_product_ids_preserves_insertion_order(self):
        store = InMemoryRecordStore(
            [make_stock("b", 1), make_stock("a", 2), make_stock("c", 3)],
            [make_policy("a")],
        )
        assert store.list_product_ids() == ["b", "a", "c"]

    def test_product_ids_come_from_stock_records(self):
        """A policy without a stock record is not a known product."""
        store = InMemoryRecordStore([make_stock("a", 5)], [make_policy("a"), make_policy("orphan")])

        assert store.list_product_ids() == ["a"]
        assert "orphan" in store.list_policies()

    def test_list_returns_copies(self, seed_store):
        """Mutating listed mappings does not change the store."""
        listed = seed_store.list_stock()
        listed.pop("product_001")
        seed_store.list_policies().clear()

        assert seed_store.get_stock("product_001") is not None
        assert len(seed_store.list_policies()) == 4

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate stock record"):
            InMemoryRecordStore([make_stock("a", 1), make_stock("a", 2)])

    def test_from_dicts(self):
        """Test building a store from camelCase mappings."""
        store = InMemoryRecordStore.from_dicts(SEED_CURRENT_INVENTORY, SEED_OPTIMAL_INVENTORY)

        assert store.list_product_ids() == ["product_001", "product_002", "product_003", "product_004"]
        assert store.get_policy("product_002").lead_time_days == 14

    def test_stores_are_isolated(self):
        first = InMemoryRecordStore([make_stock("a", 1)])
        second = InMemoryRecordStore([make_stock("b", 1)])

        assert first.get_stock("b") is None
        assert second.get_stock("a") is None

    def test_empty_store(self, empty_store):
        assert empty_store.list_product_ids() == []
        assert empty_store.list_stock() == {}
