#!/usr/bin/env python3
"""
Create the SQLite leads database used by the lead capture endpoint.

Reads BIOAGE_DATA_PATH / BIOAGE_LEADS_DB_NAME (via .env if present) and
ensures the leads table exists. Existing leads are kept unless --reset.

Usage:
    python scripts/init_leads_db.py
    python scripts/init_leads_db.py --reset
"""
import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv


# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR))
sys.path.insert(0, str(BASE_DIR / "src"))

load_dotenv(BASE_DIR / ".env")

from server.bioage_api.config import Settings  # noqa: E402
from server.bioage_api.database import DatabaseManager  # noqa: E402
from server.bioage_api.services.lead_store import LeadStore  # noqa: E402


def init_leads_db(settings: Settings, reset: bool = False) -> int:
    """
    Create the leads table, optionally removing the existing database first.

    Args:
        settings: Settings naming the database location
        reset: Delete the existing database file before creating it

    Returns:
        Number of leads in the database afterwards
    """
    db_path = settings.leads_db_path
    if db_path is None:
        raise SystemExit("BIOAGE_LEADS_DB_NAME is empty, nothing to initialize")

    if reset and os.path.exists(db_path):
        os.remove(db_path)
        print(f"  Removed existing: {db_path}")

    store = LeadStore(DatabaseManager(settings))
    return store.count()


def main():
    parser = argparse.ArgumentParser(description="Initialize the BioAge leads database")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete the existing leads database first",
    )
    args = parser.parse_args()

    settings = Settings()
    print("=" * 60)
    print("BioAge Leads Database Setup")
    print("=" * 60)

    count = init_leads_db(settings, reset=args.reset)

    db_path = Path(settings.leads_db_path)
    size_kb = db_path.stat().st_size / 1024
    print(f"  Database: {db_path} ({size_kb:.1f} KB)")
    print(f"  Leads stored: {count}")


if __name__ == "__main__":
    main()
