"""Built-in seed records and JSON records-file helpers."""

import json
import logging
from pathlib import Path
from typing import Any

from .models import PolicyRecord, StockRecord

logger = logging.getLogger(__name__)

SEED_CURRENT_INVENTORY: dict[str, dict[str, Any]] = {
    "product_001": {
        "id": "product_001",
        "name": "Product A",
        "category": "electronics",
        "currentStock": 25,
        "unit": "pcs",
        "lastUpdated": "2024-06-13T10:00:00Z",
        "location": "Warehouse A-1-2",
    },
    "product_002": {
        "id": "product_002",
        "name": "Product B",
        "category": "clothing",
        "currentStock": 150,
        "unit": "pcs",
        "lastUpdated": "2024-06-13T09:30:00Z",
        "location": "Warehouse B-2-1",
    },
    "product_003": {
        "id": "product_003",
        "name": "Product C",
        "category": "food",
        "currentStock": 8,
        "unit": "boxes",
        "lastUpdated": "2024-06-13T11:15:00Z",
        "location": "Warehouse C-1-1",
    },
    "product_004": {
        "id": "product_004",
        "name": "Product D",
        "category": "electronics",
        "currentStock": 45,
        "unit": "pcs",
        "lastUpdated": "2024-06-13T08:45:00Z",
        "location": "Warehouse A-2-3",
    },
}

SEED_OPTIMAL_INVENTORY: dict[str, dict[str, Any]] = {
    "product_001": {
        "id": "product_001",
        "name": "Product A",
        "minStock": 20,
        "maxStock": 100,
        "optimalStock": 50,
        "reorderPoint": 30,
        "reorderQuantity": 50,
        "leadTimeDays": 7,
        "seasonalFactor": 1.2,
    },
    "product_002": {
        "id": "product_002",
        "name": "Product B",
        "minStock": 100,
        "maxStock": 500,
        "optimalStock": 250,
        "reorderPoint": 150,
        "reorderQuantity": 200,
        "leadTimeDays": 14,
        "seasonalFactor": 0.8,
    },
    "product_003": {
        "id": "product_003",
        "name": "Product C",
        "minStock": 10,
        "maxStock": 50,
        "optimalStock": 25,
        "reorderPoint": 15,
        "reorderQuantity": 30,
        "leadTimeDays": 3,
        "seasonalFactor": 1.0,
    },
    "product_004": {
        "id": "product_004",
        "name": "Product D",
        "minStock": 30,
        "maxStock": 150,
        "optimalStock": 75,
        "reorderPoint": 40,
        "reorderQuantity": 60,
        "leadTimeDays": 10,
        "seasonalFactor": 1.1,
    },
}


def parse_records(
    current: dict[str, dict[str, Any]],
    optimal: dict[str, dict[str, Any]],
) -> tuple[list[StockRecord], list[PolicyRecord]]:
    """
    Validate camelCase record mappings into models.

    Args:
        current: Mapping of product id to stock record fields
        optimal: Mapping of product id to policy record fields

    Returns:
        Tuple of (stock records, policy records) in mapping order

    Raises:
        pydantic.ValidationError: If a record is malformed
    """
    stock = [StockRecord.model_validate(record) for record in current.values()]
    policies = [PolicyRecord.model_validate(record) for record in optimal.values()]
    return stock, policies


def load_seed_records() -> tuple[list[StockRecord], list[PolicyRecord]]:
    """Return the built-in four-product data set."""
    return parse_records(SEED_CURRENT_INVENTORY, SEED_OPTIMAL_INVENTORY)


def load_records_file(path: Path) -> tuple[list[StockRecord], list[PolicyRecord]]:
    """
    Load stock and policy records from a JSON records file.

    The file holds two objects keyed by product id, ``currentInventory`` and
    ``optimalInventory``.

    Args:
        path: Path to the JSON file

    Returns:
        Tuple of (stock records, policy records)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or lacks the expected keys
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in records file {path}: {e}") from e

    if not isinstance(payload, dict) or "currentInventory" not in payload:
        raise ValueError(f"Records file {path} must contain a 'currentInventory' object")

    stock, policies = parse_records(payload["currentInventory"], payload.get("optimalInventory", {}))
    logger.info(f"Loaded {len(stock)} stock records and {len(policies)} policies from {path}")
    return stock, policies


def dump_records_file(path: Path, stock: list[StockRecord], policies: list[PolicyRecord]) -> None:
    """Write records to ``path`` in the records-file format."""
    payload = {
        "currentInventory": {record.id: record.to_dict() for record in stock},
        "optimalInventory": {record.id: record.to_dict() for record in policies},
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
