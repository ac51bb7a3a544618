"""Create the payout engine tables in the configured database.

Usage: python scripts/init_db.py [--env ENV] [--schema PATH]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import mysql.connector

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import SCHEMA_PATH, load_settings

from src.payout_engine.payout_engine.database.bootstrap import apply_schema, list_tables

logger = logging.getLogger("payout_engine.init_db")

# tables the engine reads from or writes to
REQUIRED_TABLES = ("jobs", "job_workers", "attendance", "deliverables", "payouts")


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(description="Apply the payout engine schema.")
    parser.add_argument("--env", default=None, help="settings environment (defaults to APP_ENV)")
    parser.add_argument("--schema", type=Path, default=SCHEMA_PATH, help="schema file to apply")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = load_settings(args.env)
    db_config = dict(settings.DB_CONFIG)
    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"

    try:
        apply_schema(db_config, schema_path=args.schema)
        tables = set(list_tables(db_config))
    except mysql.connector.Error as exc:
        logger.error("[init-db] %s: %s", target, exc)
        return 1

    missing = [t for t in REQUIRED_TABLES if t not in tables]
    if missing:
        logger.error("[init-db] %s is missing tables after applying %s: %s", target, args.schema, ", ".join(missing))
        return 1
    logger.info("[init-db] %s ready (%d tables)", target, len(tables))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
