# ABOUTME: Shared Click options for hashpool CLI commands.
# ABOUTME: Provides reusable decorators for common flags like --workers.

import click

from hashpool.core.pool import DEFAULT_WORKERS

workers_option = click.option(
    "-w",
    "--workers",
    type=int,
    default=None,
    envvar="HASHPOOL_WORKERS",
    show_envvar=True,
    help=(
        "Number of concurrent workers; 0 or less means the default "
        f"(CPU count, at most {DEFAULT_WORKERS})."
    ),
)
