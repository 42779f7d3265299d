"""POS database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def _initialized_domain():
    from pos.domain import pos

    pos.init()
    return pos


def setup_database():
    from pos.utils.db import setup_db

    print("Initializing pos domain...")
    domain = _initialized_domain()
    print("Creating database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from pos.utils.db import drop_db

    print("Initializing pos domain...")
    domain = _initialized_domain()
    print("Dropping database schema...")
    drop_db(domain)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="POS database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
