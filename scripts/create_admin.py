"""Seed a top-level admin (no creator) directly in the database.

Usage:
  python scripts/create_admin.py --name "Site Owner" --email owner@example.com --password '...'
"""

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from app.core.errors import ConflictError
from app.crud.admin_store import AdminStore
from app.db.session import Base, SessionLocal, engine
import app.models  # noqa: F401  (registers tables on Base.metadata)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--name", required=True)
    ap.add_argument("--email", required=True)
    ap.add_argument("--password", required=True)
    ap.add_argument("--create-tables", action="store_true", help="create missing tables first")
    args = ap.parse_args()

    if len(args.password) < 6:
        ap.error("password must be at least 6 characters long")

    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        admin = AdminStore(db).create(full_name=args.name, email=args.email, password=args.password)
    except ConflictError as e:
        print(f"Not created: {e.message}")
        sys.exit(1)
    finally:
        db.close()

    print(f"Created admin {admin.id}: {admin.email}")


if __name__ == "__main__":
    main()
