"""Inventory query tools implementation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from inventory_manager.analytics import ReorderPlanner, StatusEvaluator
from inventory_manager.exceptions import ProductNotFoundError
from inventory_manager.observability import trace

if TYPE_CHECKING:
    from inventory_manager.store.record_store import RecordStore

logger = logging.getLogger(__name__)


def _not_found(message: str) -> dict[str, Any]:
    logger.info(message)
    return {"success": False, "message": message}


@trace(name="tool_get_current_inventory", trace_type="tool")
async def get_current_inventory_impl(store: RecordStore, product_id: str | None = None) -> dict[str, Any]:
    """
    Implementation of get_current_inventory tool.

    Args:
        store: Record store to read from
        product_id: Optional product id; all products are returned when omitted

    Returns:
        Dictionary with the stock record or all stock records keyed by id
    """
    if product_id:
        record = store.get_stock(product_id)
        if record is None:
            return _not_found(f'Product ID "{product_id}" was not found.')
        return {
            "success": True,
            "message": f"Found current inventory for {product_id}",
            "data": record.to_dict(),
        }

    records = store.list_stock()
    return {
        "success": True,
        "message": f"Found {len(records)} products",
        "data": {pid: record.to_dict() for pid, record in records.items()},
    }


@trace(name="tool_get_optimal_inventory", trace_type="tool")
async def get_optimal_inventory_impl(store: RecordStore, product_id: str | None = None) -> dict[str, Any]:
    """
    Implementation of get_optimal_inventory tool.

    Args:
        store: Record store to read from
        product_id: Optional product id; all policies are returned when omitted

    Returns:
        Dictionary with the policy record or all policy records keyed by id
    """
    if product_id:
        record = store.get_policy(product_id)
        if record is None:
            return _not_found(f'No optimal inventory data found for product ID "{product_id}".')
        return {
            "success": True,
            "message": f"Found optimal inventory for {product_id}",
            "data": record.to_dict(),
        }

    records = store.list_policies()
    return {
        "success": True,
        "message": f"Found {len(records)} policies",
        "data": {pid: record.to_dict() for pid, record in records.items()},
    }


@trace(name="tool_get_inventory_status", trace_type="tool")
async def get_inventory_status_impl(store: RecordStore, product_id: str | None = None) -> dict[str, Any]:
    """
    Implementation of get_inventory_status tool.

    Compares current stock with the optimal policy and reports status, alerts,
    stock difference and utilization.

    Args:
        store: Record store to read from
        product_id: Optional product id; all products are evaluated when omitted

    Returns:
        Dictionary with one evaluated status or all statuses keyed by id

    Raises:
        ComputationError: If the requested product has degenerate policy data
    """
    evaluator = StatusEvaluator(store)

    if product_id:
        try:
            evaluated = evaluator.evaluate(product_id)
        except ProductNotFoundError:
            return _not_found(f'No inventory data found for product ID "{product_id}".')
        return {
            "success": True,
            "message": f"Inventory status for {product_id}: {evaluated.status}",
            "data": evaluated.to_dict(),
        }

    statuses = evaluator.evaluate_all()
    return {
        "success": True,
        "message": f"Evaluated {len(statuses)} products",
        "data": {pid: evaluated.to_dict() for pid, evaluated in statuses.items()},
    }


@trace(name="tool_get_reorder_suggestions", trace_type="tool")
async def get_reorder_suggestions_impl(store: RecordStore) -> dict[str, Any]:
    """
    Implementation of get_reorder_suggestions tool.

    Args:
        store: Record store to read from

    Returns:
        Dictionary with the reorder plan
    """
    plan = ReorderPlanner(store).plan_reorders()
    return {
        "success": True,
        "message": f"{plan.total_count} products need reordering",
        "data": plan.to_dict(),
    }
