"""Standard library logging for uvicorn, SQLAlchemy and other libraries.

Application events go through logfire; this only sets levels and format for
everything that logs through ``logging``.
"""

import logging
import sys

from qna.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Library loggers kept quieter than the application
QUIET_LOGGERS = {
    "asyncpg": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings.debug``.

    SQL statements are logged only in debug mode.
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
