"""Pydantic models for inventory and policy data."""

from datetime import date, datetime, timezone
from typing import Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

StockStatus = Literal["normal", "reorder_needed", "low_stock", "overstock"]
Urgency = Literal["high", "medium"]


class InventoryModel(BaseModel):
    """Base model serializing to camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        """Dump to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")


class StockRecord(InventoryModel):
    """Current on-hand stock for a product."""

    id: str = Field(..., description="Product identifier (unique)")
    name: str = Field(..., description="Product name")
    category: str = Field(..., description="Product category")
    current_stock: int = Field(ge=0, description="Quantity on hand")
    unit: str = Field(..., description="Unit of measure label")
    last_updated: AwareDatetime = Field(..., description="Time of the last stock observation")
    location: str = Field(..., description="Storage location label")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "product_001",
                    "name": "Product A",
                    "category": "electronics",
                    "currentStock": 25,
                    "unit": "pcs",
                    "lastUpdated": "2024-06-13T10:00:00Z",
                    "location": "Warehouse A-1-2",
                }
            ]
        },
    }


class PolicyRecord(InventoryModel):
    """Optimal stock policy for a product.

    ``min_stock <= optimal_stock <= max_stock`` and ``reorder_point <= min_stock``
    are expected but not validated.
    """

    id: str = Field(..., description="Product identifier, matches StockRecord.id")
    name: str = Field(..., description="Product name")
    min_stock: int = Field(ge=0, description="Minimum acceptable stock")
    max_stock: int = Field(ge=0, description="Maximum acceptable stock")
    optimal_stock: int = Field(ge=0, description="Target stock level")
    reorder_point: int = Field(..., description="Stock level at or below which to reorder")
    reorder_quantity: int = Field(..., description="Quantity recommended per reorder")
    lead_time_days: int = Field(ge=0, description="Supplier lead time in days")
    seasonal_factor: float = Field(default=1.0, description="Seasonal demand multiplier (not applied)")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "product_001",
                    "name": "Product A",
                    "minStock": 20,
                    "maxStock": 100,
                    "optimalStock": 50,
                    "reorderPoint": 30,
                    "reorderQuantity": 50,
                    "leadTimeDays": 7,
                    "seasonalFactor": 1.2,
                }
            ]
        },
    }


class EvaluatedStatus(InventoryModel):
    """Stock record joined with its policy plus derived health fields."""

    id: str
    name: str
    category: str
    current_stock: int
    unit: str
    last_updated: AwareDatetime
    location: str
    min_stock: int
    max_stock: int
    optimal_stock: int
    reorder_point: int
    reorder_quantity: int
    lead_time_days: int
    seasonal_factor: float
    status: StockStatus
    alerts: list[str] = Field(default_factory=list)
    stock_difference: int = Field(..., description="current_stock - optimal_stock")
    stock_utilization: str = Field(..., description="current_stock / max_stock as a percentage string")


class ReorderSuggestion(InventoryModel):
    """Reorder recommendation for a single product."""

    product_id: str
    product_name: str
    current_stock: int
    reorder_point: int
    recommended_order_quantity: int
    urgency: Urgency
    expected_delivery: date


class ReorderPlan(InventoryModel):
    """Result of a reorder planning pass."""

    suggestions: list[ReorderSuggestion] = Field(default_factory=list, alias="reorderSuggestions")
    total_count: int = Field(default=0, alias="totalItemsNeedingReorder")
    generated_at: datetime = Field(..., alias="generatedAt")

    @field_serializer("generated_at", when_used="json")
    def _serialize_generated_at(self, value: datetime) -> str:
        """UTC with millisecond precision, e.g. ``2024-06-13T22:30:00.000Z``."""
        value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"
