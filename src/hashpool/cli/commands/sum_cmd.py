# ABOUTME: The `hashpool sum` command for computing SHA-256 checksums.
# ABOUTME: Hashes files concurrently, prints one line per file and a summary.

import time
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeRemainingColumn,
)

from hashpool.cli.formatting import format_duration, format_result, format_size
from hashpool.cli.options import workers_option
from hashpool.core.filelist import FileListError, read_file_list, split_existing
from hashpool.core.pool import FileProcessor, PoolConfig
from hashpool.core.report import Report, ReportBuilder


def _make_progress(console: Console) -> Progress:
    """Create a transient Rich progress bar, shown only on a terminal."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeRemainingColumn(),
        console=console,
        transient=True,
        disable=not console.is_terminal,
    )


def _collect_paths(files: tuple[str, ...], lists: tuple[Path, ...], err: Console) -> list[str]:
    """Gather positional paths followed by the contents of each list file."""
    paths = list(files)
    for list_path in lists:
        try:
            paths.extend(read_file_list(list_path))
        except FileListError as exc:
            err.print(f"[red]Error reading file list:[/red] {escape(str(exc))}")
            raise SystemExit(1) from exc
    return paths


@click.command("sum")
@click.argument("files", nargs=-1)
@click.option(
    "-l",
    "--list",
    "lists",
    multiple=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Read file paths from a text file (one per line, # for comments).",
)
@workers_option
def checksum(files: tuple[str, ...], lists: tuple[Path, ...], workers: int | None) -> None:
    """Calculate SHA-256 checksums for FILES, optimized for very large files."""
    console = Console(highlight=False, soft_wrap=True)
    err = Console(stderr=True, highlight=False, soft_wrap=True)

    paths = _collect_paths(files, lists, err)
    if not paths:
        raise click.UsageError("no files specified")

    valid, missing = split_existing(paths)
    for path in missing:
        err.print(f"[yellow]Warning:[/yellow] file does not exist: {escape(path)}")
    if not valid:
        err.print("[red]Error:[/red] no valid files to process")
        raise SystemExit(1)

    processor = FileProcessor(PoolConfig.resolve(workers))
    console.print(
        f"Processing {len(valid)} files with {processor.workers} workers...\n",
        markup=False,
    )

    builder = ReportBuilder()
    progress = _make_progress(err)
    task_id = progress.add_task("Hashing", total=len(valid))

    def on_result(result):
        builder.add(result)
        progress.advance(task_id)
        line = format_result(result)
        console.print(line, style=None if result.ok else "red", markup=False)

    started = time.perf_counter()
    with progress:
        processor.process(valid, on_result=on_result)
    report = builder.build(time.perf_counter() - started)

    _print_summary(console, report)

    if report.partial_failure:
        raise SystemExit(1)


def _print_summary(console: Console, report: Report) -> None:
    """Print the batch summary block."""
    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Files processed: {report.succeeded}/{report.attempted}")
    console.print(f"  Total size: {format_size(report.total_bytes)}")
    console.print(f"  Total time: {format_duration(report.elapsed)}")
    if report.throughput is not None:
        console.print(f"  Throughput: {report.throughput / 1024 / 1024:.2f} MB/s")
