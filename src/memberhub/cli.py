#!/usr/bin/env python3
"""
Main CLI entry point for the memberhub server.
"""

import os
import sys

import click
import uvicorn

from memberhub import __version__
from memberhub.database.cli import db
from memberhub.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="memberhub")
def cli() -> None:
    """memberhub CLI - run the GraphQL server and manage the database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the GraphQL API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting memberhub API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads these at import time, including in reload subprocesses
    if log_level == "debug":
        os.environ["MEMBERHUB_DEBUG"] = "true"
        os.environ["MEMBERHUB_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("MEMBERHUB_DEBUG", "false")
        os.environ.setdefault("MEMBERHUB_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "memberhub.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


cli.add_command(db)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
