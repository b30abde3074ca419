#!/usr/bin/env python3
"""
Command line entry point for the Star Wars GraphQL server.
"""

import os
import sys

import click
import uvicorn

from starwars import __version__
from starwars.config import settings
from starwars.logging import configure_logging, get_logger

logger = get_logger(__name__)

APP_IMPORT_PATH = "starwars.api.app:app"


@click.group()
@click.version_option(version=__version__, prog_name="starwars")
def cli() -> None:
    """Star Wars GraphQL server."""


@cli.command()
@click.option("--host", default=settings.api_host, show_default=True, help="Interface to bind")
@click.option("--port", default=settings.api_port, type=int, show_default=True, help="Port")
@click.option("--reload/--no-reload", default=settings.api_reload, help="Restart on code changes")
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    show_default=True,
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Serve the GraphQL endpoint, its IDEs and subscriptions."""
    log_level = log_level.lower()
    configure_logging(debug=settings.debug, level=log_level)

    # Reload workers import the app in a fresh process and read these back
    os.environ["STARWARS_LOG_LEVEL"] = log_level
    if log_level == "debug":
        os.environ["STARWARS_DEBUG"] = "true"

    logger.info(
        "Starting Star Wars GraphQL server",
        host=host,
        port=port,
        reload=reload,
        graphql_path=settings.graphql_path,
    )
    try:
        uvicorn.run(APP_IMPORT_PATH, host=host, port=port, reload=reload, log_level=log_level)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("print-schema")
def print_schema() -> None:
    """Print the stitched schema as SDL."""
    from starwars.graphql.schema import build_starwars_schema

    click.echo(build_starwars_schema().as_str())


if __name__ == "__main__":
    cli()
