#!/usr/bin/env python3
"""Seed a JSON marketplace store for local development.

Creates every collection under the data directory (properties, apartments,
orders, subscriptions, wishlist). With ``--demo-orders`` it also places
orders for synthetic customers and walks a share of them through identity
verification and contract signing.

Usage::

    python scripts/seed_store.py --data-dir data --demo-orders 10 --pretty
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from estate_market.config import CatalogConfig, MarketConfig, StorageConfig
from estate_market.generators import CustomerDetailsGenerator
from estate_market.logging import setup_logging
from estate_market.market import Marketplace

logger = logging.getLogger("estate_market.scripts.seed_store")

PAYMENT_METHODS = ["upi", "card", "netbanking"]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed a JSON marketplace store")
    parser.add_argument("--data-dir", type=Path, default=Path("data"), help="Store directory")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for synthetic data")
    parser.add_argument("--sample-count", type=int, default=20, help="Generated sample listings")
    parser.add_argument("--extra-count", type=int, default=50, help="Generated extra listings")
    parser.add_argument("--demo-orders", type=int, default=0, help="Demo orders to create")
    parser.add_argument("--pretty", action="store_true", help="Indent JSON files")
    parser.add_argument("--log-level", default="INFO", help="Log level")
    parser.add_argument("--log-format", choices=["standard", "json"], default="standard", help="Log format")
    return parser.parse_args(argv)


def create_demo_orders(market: Marketplace, count: int, seed: int) -> dict[str, int]:
    """Place ``count`` orders; every other one is verified and signed."""
    customers = CustomerDetailsGenerator(seed=seed)
    listings = market.catalog.properties
    counts = {"pending": 0, "confirmed": 0}

    for i, details in enumerate(customers.generate_batch(count)):
        user_id = customers.user_id()
        prop = listings[i % len(listings)]
        order_id = market.orders.create_order(
            user_id, prop.id, PAYMENT_METHODS[i % len(PAYMENT_METHODS)], details
        )
        if i % 2 == 0:
            market.orders.verify_identity(order_id, f"ID-{i:06d}", details.name)
            market.orders.sign_contract(order_id, details.name)
            counts["confirmed"] += 1
        else:
            counts["pending"] += 1
    return counts


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_format)

    config = MarketConfig(
        storage=StorageConfig(backend="json", data_dir=args.data_dir, pretty_json=args.pretty),
        catalog=CatalogConfig(
            sample_count=args.sample_count,
            extra_count=args.extra_count,
            seed=args.seed,
        ),
    )
    market = Marketplace.open(config)

    if args.demo_orders > 0:
        counts = create_demo_orders(market, args.demo_orders, args.seed)
        logger.info("Demo orders: %s", counts)

    print(f"Store written to: {args.data_dir}")
    for collection, count in market.summary().items():
        print(f"  {collection}: {count} records")
    return 0


if __name__ == "__main__":
    sys.exit(main())
