"""Data models, seed records and sample data generation."""

from .models import EvaluatedStatus, PolicyRecord, ReorderPlan, ReorderSuggestion, StockRecord
from .sample_data import dump_records_file, load_records_file, load_seed_records
from .sample_generator import SampleDataGenerator

__all__ = [
    "StockRecord",
    "PolicyRecord",
    "EvaluatedStatus",
    "ReorderSuggestion",
    "ReorderPlan",
    "SampleDataGenerator",
    "load_seed_records",
    "load_records_file",
    "dump_records_file",
]
