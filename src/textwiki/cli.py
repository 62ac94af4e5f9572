"""CLI interface for Textwiki.

Command-line tool for running the page editor server.
"""

import logging
import sys
from pathlib import Path

import click

from textwiki.config import Config
from textwiki.core.errors import RenderError


@click.group()
def cli() -> None:
    """Textwiki - a minimal web-based page editor."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover textwiki.toml)",
)
@click.option(
    "--pages-dir",
    "-d",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory holding page files (overrides config)",
)
@click.option(
    "--templates-dir",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory with view.html and edit.html (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    pages_dir: Path | None,
    templates_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the page editor server."""
    from textwiki.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path)
    except ValueError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    config = config.with_overrides(
        host=host,
        port=port,
        pages_dir=pages_dir,
        templates_dir=templates_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Pages directory: {config.pages.dir}")
    if config.templates.dir:
        click.echo(f"Templates directory: {config.templates.dir}")
    else:
        click.echo("Templates: bundled")

    try:
        run_server(config)
    except RenderError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
