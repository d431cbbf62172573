#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to revision
    python scripts/run_migrations.py --downgrade <revision>
"""

import argparse
import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from quorum.config import Settings
from quorum.util.observability import configure_logfire

ROOT = Path(__file__).resolve().parent.parent


def alembic_config() -> Config:
    """Alembic config that works from any working directory."""
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "migrations"))
    return config


def main() -> int:
    """Migrate the schema and log any errors to Logfire."""
    parser = argparse.ArgumentParser(description="Migrate the Quorum database")
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument("--downgrade", action="store_true")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    config = alembic_config()

    try:
        logfire.info(
            "Starting database migrations", target=args.revision, downgrade=args.downgrade
        )
        if args.downgrade:
            command.downgrade(config, args.revision)
        else:
            command.upgrade(config, args.revision)
        logfire.info("Database migrations completed", target=args.revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            target=args.revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
