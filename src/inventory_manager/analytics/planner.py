"""Reorder planning over all stocked products."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from inventory_manager.analytics.evaluator import StatusEvaluator
from inventory_manager.data.models import ReorderPlan, ReorderSuggestion
from inventory_manager.exceptions import ComputationError, ProductNotFoundError
from inventory_manager.store.record_store import RecordStore

logger = logging.getLogger(__name__)

URGENCY_BY_STATUS = {
    "reorder_needed": "high",
    "low_stock": "medium",
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReorderPlanner:
    """
    Build reorder suggestions for products that need restocking.

    Only ``reorder_needed`` and ``low_stock`` products are suggested, in store
    order. Products that cannot be evaluated are left out of the plan.
    """

    def __init__(
        self,
        store: RecordStore,
        evaluator: StatusEvaluator | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Initialize the planner.

        Args:
            store: Record store to scan
            evaluator: Status evaluator (defaults to one over ``store``)
            clock: Returns the current time (defaults to UTC wall clock)
        """
        self.store = store
        self.evaluator = evaluator or StatusEvaluator(store)
        self.clock = clock or _utc_now

    def plan_reorders(self) -> ReorderPlan:
        """
        Scan the store and build a reorder plan.

        Returns:
            ReorderPlan with suggestions, their count and the generation time
        """
        now = self.clock()
        suggestions = []

        for product_id in self.store.list_product_ids():
            try:
                evaluated = self.evaluator.evaluate(product_id)
            except (ProductNotFoundError, ComputationError) as e:
                logger.warning(f"Skipping {product_id} in reorder plan: {e}")
                continue

            urgency = URGENCY_BY_STATUS.get(evaluated.status)
            if urgency is None:
                continue

            suggestions.append(
                ReorderSuggestion(
                    product_id=evaluated.id,
                    product_name=evaluated.name,
                    current_stock=evaluated.current_stock,
                    reorder_point=evaluated.reorder_point,
                    recommended_order_quantity=evaluated.reorder_quantity,
                    urgency=urgency,
                    expected_delivery=(now + timedelta(days=evaluated.lead_time_days)).date(),
                )
            )

        logger.info(f"Reorder plan generated: {len(suggestions)} products need reordering")
        return ReorderPlan(suggestions=suggestions, total_count=len(suggestions), generated_at=now)
