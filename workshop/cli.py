"""
Command-line entry point.

Usage::

    workshop serve [--host HOST] [--port PORT]
    workshop init-db [--database-url URL]

`init-db` creates the person table for local development. In production
the schema is applied by the migration tool instead.
"""

import argparse
import logging

from workshop.core.config import settings
from workshop.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the HTTP API with uvicorn."""
    import uvicorn

    logger.info("Starting API at http://%s:%d", args.host, args.port)
    uvicorn.run("workshop.main:app", host=args.host, port=args.port, reload=False)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create the person table in the configured database."""
    from workshop.infrastructure.db import build_engine
    from workshop.infrastructure.people.schema import create_schema

    engine = build_engine(args.database_url)
    try:
        create_schema(engine)
    finally:
        engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Person Workshop CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.set_defaults(func=cmd_serve)

    init_parser = subparsers.add_parser("init-db", help="Create the database schema")
    init_parser.add_argument("--database-url", default=settings.database_url)
    init_parser.set_defaults(func=cmd_init_db)

    args = parser.parse_args()
    configure_logging(level=settings.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
