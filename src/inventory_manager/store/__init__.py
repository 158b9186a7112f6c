"""Record storage for stock and policy data."""

from inventory_manager.store.record_store import InMemoryRecordStore, RecordStore

__all__ = ["RecordStore", "InMemoryRecordStore"]
