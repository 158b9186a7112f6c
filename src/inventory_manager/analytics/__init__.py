"""Stock health evaluation and reorder planning."""

from inventory_manager.analytics.evaluator import StatusEvaluator, classify_stock, format_utilization
from inventory_manager.analytics.planner import ReorderPlanner

__all__ = ["StatusEvaluator", "ReorderPlanner", "classify_stock", "format_utilization"]
