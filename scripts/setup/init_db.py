# scripts/setup/init_db.py
"""
Create any missing campus tables and report what the database holds.
Usage: python scripts/setup/init_db.py [--check]
  --check   only report missing tables, create nothing (exit code 1 if any are missing)
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlalchemy import inspect, text
from campus.config import settings
from campus.database import Base, create_tables, engine
import campus.models  # noqa


def can_connect(bind) -> bool:
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        print(f"Cannot connect to {settings.DATABASE_URL}: {e}")
        return False
    return True


def missing_tables(bind) -> list[str]:
    """Model tables that do not exist yet in the bound database."""
    existing = set(inspect(bind).get_table_names())
    return sorted(name for name in Base.metadata.tables if name not in existing)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create campus tables")
    parser.add_argument("--check", action="store_true", help="report only, create nothing")
    args = parser.parse_args(argv)

    if not can_connect(engine):
        print("Start PostgreSQL, or set DATABASE_URL=sqlite:///./campus.db")
        return 1

    missing = missing_tables(engine)
    if args.check:
        print(f"Missing tables: {', '.join(missing) or 'none'}")
        return 1 if missing else 0

    if missing:
        create_tables()
        print(f"Created: {', '.join(missing)}")
    else:
        print("All tables already present")

    print(f"Start the backend: uvicorn campus.main:app --port {settings.BACKEND_PORT}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
