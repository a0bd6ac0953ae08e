"""Inventory Catalog management CLI.

Usage:
    python src/manage.py setup-db   # Create catalog tables (SQL providers only)
    python src/manage.py drop-db    # Drop catalog tables
    python src/manage.py health     # Print the current inventory health report as JSON
"""

import argparse
import json
import sys


def _catalog():
    from catalog.domain import catalog

    catalog.init()
    return catalog


def setup_database():
    from catalog.utils.db import setup_db

    domain = _catalog()
    print("Creating catalog database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from catalog.utils.db import drop_db

    domain = _catalog()
    print("Dropping catalog database schema...")
    drop_db(domain)
    print("Done.")


def print_health():
    from catalog.health.aggregator import inventory_health
    from catalog.product.product import Product

    domain = _catalog()
    with domain.domain_context():
        report = inventory_health(domain.repository_for(Product))

    print(json.dumps(report.to_dict(), indent=2))
    return 1 if report.failed else 0


def main():
    parser = argparse.ArgumentParser(description="Inventory Catalog management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("health", help="Print the inventory health report")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "health":
        sys.exit(print_health())
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
