#!/usr/bin/env python3
"""Apply Alembic migrations to the configured database.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a specific revision
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from qna.config import Settings
from qna.util.logging import setup_logging
from qna.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def upgrade(settings: Settings, target: str = "head") -> None:
    """Upgrade the schema at ``settings.database_url`` to ``target``.

    Raises:
        Exception: Whatever Alembic raised; the API must not serve a
            half-migrated schema
    """
    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)

    with logfire.span("run_migrations", target=target):
        try:
            command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Database migrations completed", target=target)


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    upgrade(settings, argv[0] if argv else "head")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
