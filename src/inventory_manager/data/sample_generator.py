"""Sample data generator for stock and policy records."""

import random
from datetime import timezone

from faker import Faker

from .models import PolicyRecord, StockRecord


class SampleDataGenerator:
    """Generate consistent stock/policy pairs for demos and tests."""

    CATEGORIES = ["electronics", "clothing", "food", "home", "sports", "toys"]

    UNITS = {
        "electronics": "pcs",
        "clothing": "pcs",
        "food": "boxes",
        "home": "pcs",
        "sports": "pcs",
        "toys": "sets",
    }

    WAREHOUSES = ["A", "B", "C", "D"]

    def __init__(self, seed: int = 42):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducible output
        """
        self.fake = Faker()
        Faker.seed(seed)
        self.random = random.Random(seed)

    def generate(self, count: int = 20) -> tuple[list[StockRecord], list[PolicyRecord]]:
        """
        Generate ``count`` products with matching policies.

        Policies always satisfy ``reorder_point <= min_stock <= optimal_stock <= max_stock``
        and ``max_stock > 0``. Stock levels are spread so that roughly a quarter
        of products need reordering and a tenth are overstocked.

        Args:
            count: Number of products to generate

        Returns:
            Tuple of (stock records, policy records) in the same id order
        """
        stock_records = []
        policy_records = []

        for i in range(count):
            product_id = f"product_{i + 1:03d}"
            category = self.random.choice(self.CATEGORIES)
            name = f"{self.fake.color_name()} {self.fake.word().capitalize()}"

            min_stock = self.random.randint(10, 100)
            max_stock = min_stock * self.random.randint(4, 8)
            optimal_stock = (min_stock + max_stock) // 2
            reorder_point = min_stock - self.random.randint(0, min_stock // 2)

            current_stock = self._pick_stock_level(reorder_point, max_stock)

            stock_records.append(
                StockRecord(
                    id=product_id,
                    name=name,
                    category=category,
                    current_stock=current_stock,
                    unit=self.UNITS[category],
                    last_updated=self.fake.date_time_between(start_date="-7d", end_date="now", tzinfo=timezone.utc),
                    location=(
                        f"Warehouse {self.random.choice(self.WAREHOUSES)}-"
                        f"{self.random.randint(1, 5)}-{self.random.randint(1, 9)}"
                    ),
                )
            )
            policy_records.append(
                PolicyRecord(
                    id=product_id,
                    name=name,
                    min_stock=min_stock,
                    max_stock=max_stock,
                    optimal_stock=optimal_stock,
                    reorder_point=reorder_point,
                    reorder_quantity=optimal_stock - min_stock + self.random.randint(0, min_stock),
                    lead_time_days=self.random.randint(2, 21),
                    seasonal_factor=round(self.random.uniform(0.7, 1.5), 1),
                )
            )

        return stock_records, policy_records

    def _pick_stock_level(self, reorder_point: int, max_stock: int) -> int:
        roll = self.random.random()
        if roll < 0.25:
            return self.random.randint(0, reorder_point)
        if roll < 0.35:
            return self.random.randint(max_stock + 1, max_stock * 2)
        return self.random.randint(reorder_point + 1, max_stock)
