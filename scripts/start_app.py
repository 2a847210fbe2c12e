#!/usr/bin/env python3
"""Serve the Q&A API with uvicorn.

Usage:
    python scripts/start_app.py               # serve on settings.port
    python scripts/start_app.py --migrate     # upgrade the schema first
    python scripts/start_app.py --reload      # development autoreload
"""

import argparse
import sys

import logfire
import uvicorn

from qna.config import Settings
from qna.util.logging import setup_logging
from qna.util.observability import configure_logfire

APP_PATH = "qna.interface.api.app:app"


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the Q&A API")
    parser.add_argument("--migrate", action="store_true", help="run migrations first")
    parser.add_argument("--reload", action="store_true", help="reload on code change")
    parser.add_argument("--workers", type=int, default=1)
    return parser.parse_args(argv)


def main(argv: list[str]) -> int:
    """Serve until interrupted; startup failures are reported to Logfire."""
    args = parse_args(argv)
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    if args.migrate:
        from run_migrations import upgrade

        upgrade(settings, "head")

    logfire.info(
        "Serving API",
        port=settings.port,
        environment=settings.environment,
        workers=args.workers,
    )
    try:
        uvicorn.run(
            APP_PATH,
            host="0.0.0.0",
            port=settings.port,
            reload=args.reload,
            workers=None if args.reload else args.workers,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
