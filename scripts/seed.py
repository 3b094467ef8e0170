#!/usr/bin/env python3
"""Load an employee fixture file into the database.

Run from the repository root:

    python3 scripts/seed.py [--file PATH] [--database-url URL] [--dry-run] [--verbose]

The fixture is a JSON document of the form ``{"users": [...]}``. Records are
inserted as-is; nothing is deduplicated against existing rows.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from employee_api.core.config import Settings  # noqa: E402
from employee_api.core.database import Database  # noqa: E402
from employee_api.repositories.employee_repository import EmployeeRepository  # noqa: E402
from employee_api.services.seed_loader import load_seed_data, read_employees  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Load employee seed data into the database",
    )
    parser.add_argument(
        "--file",
        default=None,
        help="Fixture file to load (default: SEED_FILE setting)",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy async database URL (default: DATABASE_URL setting)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and validate the fixture without writing to the database",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def seed(args: argparse.Namespace) -> int | None:
    """Load the fixture and return the number of employees read or inserted.

    Returns None when no fixture file is configured.
    """
    overrides: dict[str, str] = {}
    if args.database_url:
        overrides["DATABASE_URL"] = args.database_url
    settings = Settings(**overrides)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    path = args.file or settings.SEED_FILE
    if not path:
        logger.error("No fixture file given and SEED_FILE is empty")
        return None

    if args.dry_run:
        employees = read_employees(path)
        logger.info("[DRY RUN] %d employees read from %s, nothing written", len(employees), path)
        return len(employees)

    database = Database()
    await database.initialize(settings)
    if not database.initialized:
        raise RuntimeError("Database could not be initialized")

    try:
        async with database.session_factory() as session:
            saved = await load_seed_data(EmployeeRepository(session), path)
    finally:
        await database.close()

    logger.info("Seeding complete: %d employees inserted", len(saved))
    return len(saved)


def main() -> None:
    args = parse_args()
    if asyncio.run(seed(args)) is None:
        sys.exit(1)


if __name__ == "__main__":
    main()
