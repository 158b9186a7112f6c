"""Record store factory based on configured data source."""

import logging
from typing import TYPE_CHECKING

from .settings import Settings, get_settings

if TYPE_CHECKING:
    from inventory_manager.store.record_store import RecordStore

logger = logging.getLogger(__name__)


def get_record_store(settings: Settings | None = None) -> "RecordStore":
    """
    Factory function to build the record store for the configured data source.

    A data file takes precedence, then generated sample data, then the
    built-in seed records.

    Args:
        settings: Optional Settings instance. If None, will use get_settings().

    Returns:
        RecordStore: Store loaded with stock and policy records

    Raises:
        FileNotFoundError: If the configured data file does not exist
        ValueError: If the data file is malformed
    """
    from inventory_manager.store.record_store import InMemoryRecordStore

    if settings is None:
        settings = get_settings()

    if settings.data_file:
        from inventory_manager.data.sample_data import load_records_file

        logger.info(f"Loading records from {settings.data_file}")
        stock, policies = load_records_file(settings.data_file)

    elif settings.sample_data_products_count > 0:
        from inventory_manager.data.sample_generator import SampleDataGenerator

        logger.info(f"Generating {settings.sample_data_products_count} sample products")
        stock, policies = SampleDataGenerator(seed=42).generate(count=settings.sample_data_products_count)

    else:
        from inventory_manager.data.sample_data import load_seed_records

        logger.info("Using built-in inventory records")
        stock, policies = load_seed_records()

    return InMemoryRecordStore(stock, policies)
