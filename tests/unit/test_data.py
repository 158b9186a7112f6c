"""Unit tests for data models, records files and the sample generator."""

import json

import pytest
from pydantic import ValidationError

from inventory_manager.analytics import StatusEvaluator
from inventory_manager.data import (
    PolicyRecord,
    SampleDataGenerator,
    StockRecord,
    dump_records_file,
    load_records_file,
    load_seed_records,
)
from inventory_manager.store import InMemoryRecordStore


class TestModels:
    """Test record models."""

    def test_stock_record_accepts_camel_case(self):
        record = StockRecord.model_validate(
            {
                "id": "x",
                "name": "X",
                "category": "food",
                "currentStock": 3,
                "unit": "boxes",
                "lastUpdated": "2024-06-13T11:15:00Z",
                "location": "Warehouse C-1-1",
            }
        )
        assert record.current_stock == 3
        assert record.last_updated.tzinfo is not None

    def test_naive_last_updated_rejected(self):
        with pytest.raises(ValidationError):
            StockRecord.model_validate(
                {
                    "id": "x",
                    "name": "X",
                    "category": "food",
                    "currentStock": 3,
                    "unit": "boxes",
                    "lastUpdated": "2024-06-13T11:15:00",
                    "location": "Warehouse C-1-1",
                }
            )

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError):
            StockRecord(
                id="x",
                name="X",
                category="food",
                current_stock=-1,
                unit="boxes",
                last_updated="2024-06-13T11:15:00Z",
                location="A",
            )

    def test_zero_max_stock_accepted_at_load(self):
        """Degenerate policies load; they fail at evaluation time."""
        policy = PolicyRecord(
            id="x",
            name="X",
            min_stock=0,
            max_stock=0,
            optimal_stock=0,
            reorder_point=0,
            reorder_quantity=1,
            lead_time_days=0,
        )
        assert policy.max_stock == 0
        assert policy.seasonal_factor == 1.0

    def test_records_are_frozen(self):
        stock, _ = load_seed_records()

        with pytest.raises(ValidationError):
            stock[0].current_stock = 999


class TestRecordsFile:
    """Test JSON records file loading and writing."""

    def test_dump_and_load(self, tmp_path):
        stock, policies = load_seed_records()
        path = tmp_path / "inventory.json"

        dump_records_file(path, stock, policies)
        loaded_stock, loaded_policies = load_records_file(path)

        assert loaded_stock == stock
        assert loaded_policies == policies

    def test_file_layout(self, tmp_path):
        stock, policies = load_seed_records()
        path = tmp_path / "inventory.json"
        dump_records_file(path, stock, policies)

        payload = json.loads(path.read_text(encoding="utf-8"))

        assert set(payload) == {"currentInventory", "optimalInventory"}
        assert payload["optimalInventory"]["product_001"]["reorderPoint"] == 30

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_records_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_records_file(path)

    def test_missing_current_inventory_key(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"optimalInventory": {}}), encoding="utf-8")

        with pytest.raises(ValueError, match="currentInventory"):
            load_records_file(path)


class TestSampleDataGenerator:
    """Test the SampleDataGenerator class."""

    def test_generate_count(self):
        stock, policies = SampleDataGenerator(seed=42).generate(count=30)

        assert len(stock) == 30
        assert len(policies) == 30
        assert [s.id for s in stock] == [p.id for p in policies]

    def test_unique_ids(self):
        stock, _ = SampleDataGenerator(seed=7).generate(count=50)

        assert len({s.id for s in stock}) == 50

    def test_policies_are_consistent(self):
        _, policies = SampleDataGenerator(seed=42).generate(count=100)

        for policy in policies:
            assert policy.reorder_point <= policy.min_stock <= policy.optimal_stock <= policy.max_stock
            assert policy.max_stock > 0

    def test_reproducible_with_seed(self):
        first, _ = SampleDataGenerator(seed=3).generate(count=10)
        second, _ = SampleDataGenerator(seed=3).generate(count=10)

        assert [s.current_stock for s in first] == [s.current_stock for s in second]

    def test_generated_data_evaluates(self):
        stock, policies = SampleDataGenerator(seed=42).generate(count=100)

        statuses = StatusEvaluator(InMemoryRecordStore(stock, policies)).evaluate_all()

        assert len(statuses) == 100
        assert {"reorder_needed", "normal"} <= {s.status for s in statuses.values()}
