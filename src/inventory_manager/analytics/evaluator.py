"""Stock health evaluation against optimal inventory policies."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from inventory_manager.data.models import EvaluatedStatus, PolicyRecord, StockRecord
from inventory_manager.exceptions import ComputationError, ProductNotFoundError
from inventory_manager.store.record_store import RecordStore

logger = logging.getLogger(__name__)

ALERT_REORDER_NEEDED = "Reorder needed"
ALERT_LOW_STOCK = "Stock is running low"
ALERT_OVERSTOCK = "Stock is excessive"


def classify_stock(stock: StockRecord, policy: PolicyRecord) -> tuple[str, list[str]]:
    """
    Classify a stock level against its policy.

    Rules are checked in order and the first match wins, so a product at or
    below its reorder point is ``reorder_needed`` even when it is also below
    ``min_stock``.

    Returns:
        Tuple of (status, alerts)
    """
    current = stock.current_stock
    if current <= policy.reorder_point:
        return "reorder_needed", [ALERT_REORDER_NEEDED]
    if current < policy.min_stock:
        return "low_stock", [ALERT_LOW_STOCK]
    if current > policy.max_stock:
        return "overstock", [ALERT_OVERSTOCK]
    return "normal", []


def format_utilization(product_id: str, current_stock: int, max_stock: int) -> str:
    """
    Format ``current_stock / max_stock`` as a percentage with one decimal place.

    Ties round away from zero on the exact float value.
    """
    if max_stock == 0:
        raise ComputationError(product_id, "maxStock is 0, stock utilization is undefined")
    percent = Decimal(current_stock / max_stock * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{percent}%"


class StatusEvaluator:
    """Join stock and policy records and derive stock health."""

    def __init__(self, store: RecordStore):
        self.store = store

    def evaluate(self, product_id: str) -> EvaluatedStatus:
        """
        Evaluate stock health for one product.

        Args:
            product_id: Product identifier

        Returns:
            EvaluatedStatus for the product

        Raises:
            ProductNotFoundError: If the stock record or the policy is missing
            ComputationError: If the policy has a zero max_stock
        """
        stock = self.store.get_stock(product_id)
        if stock is None:
            raise ProductNotFoundError(product_id, missing="stock")
        policy = self.store.get_policy(product_id)
        if policy is None:
            raise ProductNotFoundError(product_id, missing="policy")

        status, alerts = classify_stock(stock, policy)
        utilization = format_utilization(product_id, stock.current_stock, policy.max_stock)

        # policy fields override stock fields on shared keys (id, name)
        fields = {**stock.model_dump(), **policy.model_dump()}
        evaluated = EvaluatedStatus(
            **fields,
            status=status,
            alerts=alerts,
            stock_difference=stock.current_stock - policy.optimal_stock,
            stock_utilization=utilization,
        )
        logger.debug(f"Evaluated {product_id}: {status} ({utilization})")
        return evaluated

    def evaluate_all(self) -> dict[str, EvaluatedStatus]:
        """
        Evaluate every product in the store.

        Products without a policy or with degenerate policy data are skipped.

        Returns:
            Mapping of product id to EvaluatedStatus, in store order
        """
        results = {}
        for product_id in self.store.list_product_ids():
            try:
                results[product_id] = self.evaluate(product_id)
            except ProductNotFoundError as e:
                logger.debug(f"Skipping {product_id}: {e}")
            except ComputationError as e:
                logger.warning(f"Skipping {product_id}: {e}")
        return results
