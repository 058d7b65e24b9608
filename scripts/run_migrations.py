#!/usr/bin/env python3
"""Upgrade the Roster database schema to the latest Alembic revision."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from roster.config import Settings
from roster.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(revision: str = "head") -> int:
    """Run migrations up to ``revision``, reporting failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            alembic_cfg = Config(str(ALEMBIC_INI))
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The container must not start against a broken schema
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
