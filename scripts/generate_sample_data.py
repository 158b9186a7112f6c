#!/usr/bin/env python3
"""Generate a sample records file for the inventory MCP server."""

import argparse
import logging
from collections import Counter
from pathlib import Path

from inventory_manager.analytics import StatusEvaluator
from inventory_manager.data import SampleDataGenerator, dump_records_file
from inventory_manager.data.models import PolicyRecord, StockRecord
from inventory_manager.store import InMemoryRecordStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path(__file__).parent.parent / "data" / "inventory.json"


def generate_and_save_sample_data(
    count: int = 20,
    output: Path | None = None,
    seed: int = 42,
    save_to_disk: bool = True,
) -> tuple[list[StockRecord], list[PolicyRecord]]:
    """
    Generate sample stock and policy records.

    Args:
        count: Number of products to generate
        output: Records file to write (defaults to project root/data/inventory.json)
        seed: Random seed
        save_to_disk: Whether to write the records file

    Returns:
        Tuple of (stock records, policy records)

    Raises:
        OSError: If save_to_disk=True and file writing fails
    """
    if output is None:
        output = DEFAULT_OUTPUT

    logger.info(f"Generating {count} products...")
    stock, policies = SampleDataGenerator(seed=seed).generate(count=count)

    if save_to_disk:
        output.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Saving records to {output}...")
        try:
            dump_records_file(output, stock, policies)
        except OSError as e:
            logger.error(f"Failed to save records: {e}")
            raise

    return stock, policies


def main():
    """Generate and save sample data with summary output."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=20, help="Number of products")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="Output records file")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args()

    stock, policies = generate_and_save_sample_data(count=args.count, output=args.output, seed=args.seed)

    statuses = StatusEvaluator(InMemoryRecordStore(stock, policies)).evaluate_all()
    status_counts = Counter(evaluated.status for evaluated in statuses.values())

    print("\n" + "=" * 60)
    print("SAMPLE DATA GENERATION SUMMARY")
    print("=" * 60)
    print(f"Total Products: {len(stock)}")
    print("\nStock Status:")
    for status, count in sorted(status_counts.items()):
        print(f"  {status}: {count}")
    print(f"\nFile saved: {args.output}")
    print("=" * 60)


if __name__ == "__main__":
    main()
