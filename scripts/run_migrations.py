#!/usr/bin/env python3
"""Apply Alembic migrations to the civic database.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c41f0a9d2e7

Failures are reported to Logfire before the process exits non-zero, so a
deploy never starts the API against a half-migrated schema.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from civic.config import Settings
from civic.util.observability import configure_logfire


def build_alembic_config(settings: Settings) -> Config:
    """Alembic config pointing at the configured database."""
    config = Config("alembic.ini")
    config.set_main_option("sqlalchemy.url", settings.database_url)
    return config


def main(argv: list[str]) -> int:
    target = argv[1] if len(argv) > 1 else "head"
    settings = Settings()
    configure_logfire(settings)

    config = build_alembic_config(settings)
    script = ScriptDirectory.from_config(config)

    with logfire.span("run_migrations", target=target, head=script.get_current_head()):
        try:
            command.upgrade(config, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Database migrations applied", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
