"""Shared fixtures for inventory manager tests."""

import pytest

from inventory_manager.data.sample_data import load_seed_records
from inventory_manager.store import InMemoryRecordStore


@pytest.fixture
def seed_store() -> InMemoryRecordStore:
    """Store loaded with the built-in four-product data set."""
    stock, policies = load_seed_records()
    return InMemoryRecordStore(stock, policies)


@pytest.fixture
def empty_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()
