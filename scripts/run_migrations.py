#!/usr/bin/env python3
"""Upgrade the database schema to the latest Alembic revision.

Run before ``start_app.py`` on every deploy; a failed upgrade aborts the
deploy so the API never starts against a stale schema.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from folio.config import Settings
from folio.util.error import ConfigurationError
from folio.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    if not settings.database_url:
        raise ConfigurationError("DATABASE__URL", "is not set")

    with logfire.span("run_migrations", environment=settings.environment):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), "head")
        except Exception as e:
            logfire.error(
                "Schema upgrade failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise
        logfire.info("Schema is at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
