# ABOUTME: CLI package for hashpool, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from hashpool.cli.commands import sum_cmd


def _configure_logging(verbose: bool) -> None:
    """Route hashpool logging to stderr through Rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    # Per-file failures already appear as result lines.
    level = logging.DEBUG if verbose else logging.ERROR
    logging.basicConfig(level=level, handlers=[handler], force=True)


@click.group()
@click.version_option(package_name="hashpool")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Enable debug logging on stderr.",
)
def cli(verbose: bool) -> None:
    """hashpool - concurrent SHA-256 checksums for very large files."""
    _configure_logging(verbose)


cli.add_command(sum_cmd.checksum)
