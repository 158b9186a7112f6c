"""Record builders for tests."""

from datetime import datetime, timezone

from inventory_manager.data.models import PolicyRecord, StockRecord


def make_stock(product_id: str, current_stock: int, name: str | None = None) -> StockRecord:
    """Build a stock record with placeholder display fields."""
    return StockRecord(
        id=product_id,
        name=name or f"Item {product_id}",
        category="test",
        current_stock=current_stock,
        unit="pcs",
        last_updated=datetime(2024, 6, 13, 10, 0, tzinfo=timezone.utc),
        location="Warehouse T-1-1",
    )


def make_policy(
    product_id: str,
    min_stock: int = 10,
    max_stock: int = 50,
    optimal_stock: int = 25,
    reorder_point: int = 15,
    reorder_quantity: int = 30,
    lead_time_days: int = 3,
    name: str | None = None,
) -> PolicyRecord:
    """Build a policy record; defaults match the product_003 seed policy."""
    return PolicyRecord(
        id=product_id,
        name=name or f"Item {product_id}",
        min_stock=min_stock,
        max_stock=max_stock,
        optimal_stock=optimal_stock,
        reorder_point=reorder_point,
        reorder_quantity=reorder_quantity,
        lead_time_days=lead_time_days,
        seasonal_factor=1.0,
    )
