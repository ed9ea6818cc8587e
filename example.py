"""Example usage of the deepcmp comparison engine."""

import datetime
import json
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from deepcmp import Comparator, CompareConfig, report


@dataclass
class LineItem:
    sku: str
    quantity: int
    unit_price: float


@dataclass
class Invoice:
    id: str
    total: Decimal
    created_at: datetime.datetime
    status: str
    ratio: float
    line_items: list = field(default_factory=list)
    metadata: dict = field(default_factory=dict)
    parent: Optional["Invoice"] = None
    _cache_key: str = ""  # Private, skipped unless compare_private_fields


# Expected value (what the test fixture says)
expected = Invoice(
    id="INV-001",
    total=Decimal("100.00"),
    created_at=datetime.datetime(2025, 2, 2, 10, 30, tzinfo=datetime.timezone.utc),
    status="paid",
    ratio=0.1 + 0.2,
    line_items=[
        LineItem("WIDGET-001", 5, 10.00),
        LineItem("GADGET-002", 2, 25.50),
    ],
    metadata={"traceId": "abc123", "region": "eu"},
    _cache_key="a",
)

# Actual value (what the code under test produced)
actual = Invoice(
    id="INV-001",
    total=Decimal("100.0"),  # Same number, different exponent
    created_at=datetime.datetime(  # Same instant, different zone
        2025, 2, 2, 11, 30, tzinfo=datetime.timezone(datetime.timedelta(hours=1))
    ),
    status="paid",
    ratio=0.3,  # Equal at 10 fractional digits
    line_items=[
        LineItem("WIDGET-001", 5, 10.00),
        LineItem("GADGET-002", 2, 25.50),
    ],
    metadata={"traceId": "abc123", "region": "eu"},
    _cache_key="b",
)


def main():
    print("=" * 60)
    print("deepcmp Comparison Engine - Example")
    print("=" * 60)

    comparator = Comparator()
    diffs = comparator.compare(expected, actual)

    print(f"\nMatch: {not diffs}")
    for diff in diffs:
        print(f"  - {diff}")


def example_with_mismatch():
    """Example that demonstrates differences and the report."""
    print("\n" + "=" * 60)
    print("Example with Mismatch")
    print("=" * 60)

    mismatched = Invoice(
        id="INV-001",
        total=Decimal("100.00"),
        created_at=expected.created_at,
        status="PAID",  # Case changed
        ratio=0.3,
        line_items=[
            LineItem("WIDGET-001", 6, 10.00),  # Quantity changed
        ],  # Second item dropped
        metadata={"traceId": "xyz"},  # traceId changed, region dropped
        parent=expected,  # Only set on this side
    )

    result = report(expected, mismatched)

    print(f"\nMatch: {result.is_match}")
    print(f"Truncated: {result.truncated}")
    print(f"\nDifferences:")
    for diff in result.diffs:
        print(f"  - {diff}")

    print("\n" + "-" * 60)
    print("Full JSON Report:")
    print(json.dumps(result.to_dict(), indent=2))


def example_with_logging():
    """Example with anomaly logging and a small depth budget."""
    print("\n" + "=" * 60)
    print("Example with Anomaly Logging")
    print("=" * 60)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    config = CompareConfig(max_depth=2, log_errors=True, compare_private_fields=True)
    comparator = Comparator(config)

    for diff in comparator.compare(expected, actual):
        print(f"  - {diff}")


if __name__ == "__main__":
    main()
    example_with_mismatch()
    example_with_logging()
