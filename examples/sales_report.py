#!/usr/bin/env python3
"""pizzasales Sales Report Example.

This example demonstrates the basic usage of pizzasales:
- Loading the four CSV tables with CsvTableLoader
- Running catalog queries by name and by number
- Composing group_by / order_by / rolling_sum on the detail join
- Mapping query results to a dataclass

Usage:
    python examples/sales_report.py path/to/pizza_sales_csv_dir
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Annotated

from pizzasales import (
    Column,
    CsvTableLoader,
    QueryCatalog,
    TableStore,
    build_detail_join,
    group_by,
    order_by,
    rolling_sum,
    sum_,
)


@dataclass
class HourlyOrders:
    """Peak hour result row."""

    hour: Annotated[int, Column("hour_of_day")]
    orders: Annotated[int, Column("order_count")]


def print_rows(title: str, rows: list[dict], limit: int = 5) -> None:
    """Print the first rows of a result."""
    print(title)
    print("-" * 60)
    for row in rows[:limit]:
        print(f"  {row}")
    print()


def demo_catalog(catalog: QueryCatalog) -> None:
    """Run catalog queries by name and by number."""
    print_rows("Most ordered pizzas", catalog.run("most_ordered_pizza"))
    print_rows("Orders per weekday (0 = Monday)", catalog.run(15), limit=7)
    print_rows("Average price by category", catalog.avg_price_by_category())

    print("Peak hours")
    print("-" * 60)
    for hourly in catalog.query(HourlyOrders, "peak_sales_hour")[:3]:
        print(f"  {hourly.hour:02d}:00  {hourly.orders} orders")
    print()


def demo_composition(store: TableStore) -> None:
    """Build an ad hoc revenue report from the engine primitives."""
    revenue = group_by(
        build_detail_join(store),
        "category",
        {"revenue": sum_("total_price")},
    )
    ranked = order_by(rolling_sum(revenue, "revenue", "revenue"), "revenue", descending=True)
    print_rows("Revenue per category with running total", ranked)


def main() -> None:
    """Run the examples."""
    logging.basicConfig(level=logging.INFO)
    data_dir = sys.argv[1] if len(sys.argv) > 1 else "data"

    store = TableStore()
    CsvTableLoader(data_dir).load_all(store)
    catalog = QueryCatalog(store)

    print("=" * 60)
    demo_catalog(catalog)
    demo_composition(store)
    print("=" * 60)


if __name__ == "__main__":
    main()
