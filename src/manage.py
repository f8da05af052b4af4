"""Warehouse Tracker database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load the sample data set into an empty store
"""

import argparse
import sys


def _domain():
    from warehousing.domain import warehousing

    print("Initializing warehousing domain...")
    warehousing.init()
    return warehousing


def setup_database():
    """Create the warehousing database schema."""
    from warehousing.utils.db import setup_db

    domain = _domain()
    print("Creating warehousing database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    """Drop the warehousing database schema."""
    from warehousing.utils.db import drop_db

    domain = _domain()
    print("Dropping warehousing database schema...")
    drop_db(domain)
    print("Done.")


def seed_database():
    """Load the sample warehouses and items."""
    from warehousing.seed import load_sample_data

    domain = _domain()
    with domain.domain_context():
        if load_sample_data():
            print("Sample data loaded.")
        else:
            print("Database already contains data. Skipping.")


def main():
    parser = argparse.ArgumentParser(description="Warehouse Tracker database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load sample warehouses and items")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
