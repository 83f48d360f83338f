#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf API server.
"""

import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.errors import BookshelfError
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - run the server and inspect the catalogue."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
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
    """Start the Bookshelf API server."""

    configure_logging(debug=(log_level == "debug"))

    # The app module reads settings from the environment when uvicorn imports it
    if log_level == "debug":
        os.environ["BOOKSHELF_DEBUG"] = "true"
        os.environ["BOOKSHELF_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKSHELF_DEBUG", "false")
        os.environ.setdefault("BOOKSHELF_LOG_LEVEL", log_level)

    display_host = "localhost" if host == "0.0.0.0" else host
    logger.info("Server ready", url=f"http://{display_host}:{port}/graphql", reload=reload)

    try:
        if reload:
            uvicorn.run(
                "bookshelf.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from bookshelf.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def schema(output: str | None) -> None:
    """Print the GraphQL schema (SDL)."""
    from bookshelf.graphql.schema import schema as graphql_schema

    sdl = graphql_schema.as_str()
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


@cli.command()
def books() -> None:
    """List the books of the configured store."""
    from bookshelf.store import create_store

    configure_logging()

    try:
        store = create_store(settings)
    except BookshelfError as e:
        logger.error("Failed to load book store", error=str(e))
        click.echo(f"✗ Error loading books: {e}", err=True)
        sys.exit(1)

    records = store.all_books()
    if not records:
        click.echo("No books found.")
        return

    click.echo(f"Found {len(records)} book(s):")
    click.echo()
    for book in records:
        click.echo(f"  Title: {book.title}")
        click.echo(f"  Author: {book.author}")
        click.echo(f"  Published: {book.publish_date}")
        click.echo()


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
