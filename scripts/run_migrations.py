#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py [revision]

The vote registry is built from settings first so a broken
VOTING__RELATIONS value fails the deploy before the schema changes.
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from tally.config import Settings
from tally.util.logging import setup_logging
from tally.util.observability import configure_logfire
from tally.util.registry import build_registry


def main(revision: str = "head") -> int:
    """Validate vote configuration, then upgrade the schema."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        registry = build_registry(settings.voting)
        logfire.info(
            "Starting database migrations",
            revision=revision,
            votee_types=sorted(t.value for t in registry.votee_types),
        )

        command.upgrade(Config("alembic.ini"), revision)

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the deploy stops instead of running on a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
