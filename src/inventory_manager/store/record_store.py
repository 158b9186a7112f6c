"""Record store interface and in-memory implementation."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from inventory_manager.data.models import PolicyRecord, StockRecord
from inventory_manager.data.sample_data import parse_records

logger = logging.getLogger(__name__)


class RecordStore(ABC):
    """Abstract read-only store of stock and policy records keyed by product id."""

    @abstractmethod
    def get_stock(self, product_id: str) -> StockRecord | None:
        """
        Look up the stock record for a product.

        Args:
            product_id: Product identifier

        Returns:
            StockRecord if found, None otherwise
        """
        pass

    @abstractmethod
    def get_policy(self, product_id: str) -> PolicyRecord | None:
        """
        Look up the policy record for a product.

        Args:
            product_id: Product identifier

        Returns:
            PolicyRecord if found, None otherwise
        """
        pass

    @abstractmethod
    def list_product_ids(self) -> list[str]:
        """
        List all known product ids.

        The stock records define the product set, in insertion order.

        Returns:
            List of product ids
        """
        pass

    @abstractmethod
    def list_stock(self) -> dict[str, StockRecord]:
        """Return all stock records keyed by product id."""
        pass

    @abstractmethod
    def list_policies(self) -> dict[str, PolicyRecord]:
        """Return all policy records keyed by product id."""
        pass


class InMemoryRecordStore(RecordStore):
    """
    Record store backed by two dictionaries.

    Records are loaded once and never modified, so a single instance can be
    shared across concurrent requests.
    """

    def __init__(
        self,
        stock_records: Iterable[StockRecord] = (),
        policy_records: Iterable[PolicyRecord] = (),
    ):
        """
        Initialize the store.

        Args:
            stock_records: Current stock records; their order defines product order
            policy_records: Optimal policy records

        Raises:
            ValueError: If a product id appears twice in either collection
        """
        self._stock = self._index(stock_records, "stock")
        self._policies = self._index(policy_records, "policy")
        logger.info(f"Initialized record store with {len(self._stock)} products and {len(self._policies)} policies")

    @classmethod
    def from_dicts(
        cls,
        current: dict[str, dict[str, Any]],
        optimal: dict[str, dict[str, Any]],
    ) -> "InMemoryRecordStore":
        """Build a store from camelCase record mappings keyed by product id."""
        stock, policies = parse_records(current, optimal)
        return cls(stock, policies)

    @staticmethod
    def _index(records: Iterable, kind: str) -> dict:
        indexed = {}
        for record in records:
            if record.id in indexed:
                raise ValueError(f"Duplicate {kind} record for product ID \"{record.id}\"")
            indexed[record.id] = record
        return indexed

    def get_stock(self, product_id: str) -> StockRecord | None:
        return self._stock.get(product_id)

    def get_policy(self, product_id: str) -> PolicyRecord | None:
        return self._policies.get(product_id)

    def list_product_ids(self) -> list[str]:
        return list(self._stock)

    def list_stock(self) -> dict[str, StockRecord]:
        return dict(self._stock)

    def list_policies(self) -> dict[str, PolicyRecord]:
        return dict(self._policies)
