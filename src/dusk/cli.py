"""CLI interface for Dusk."""

from __future__ import annotations

import json
import logging
import sys
import time

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from dusk.core.engine import DiskScanner
from dusk.core.errors import ScanError
from dusk.core.progress import FileCounter
from dusk.core.sorter import SortMode, limit_items, sort_items
from dusk.report import render_table
from dusk.settings import Settings
from dusk.utils import format_elapsed

log = logging.getLogger(__name__)


def _log_handler(console: Console | None) -> logging.Handler:
    """Build the root log handler.

    With a live spinner, records go through the spinner's console so they
    print above it instead of through it.
    """
    if console is not None:
        return RichHandler(console=console, show_time=False, show_path=False)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    return handler


def _setup_logging(verbosity: int, console: Console | None = None) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, handlers=[_log_handler(console)])


class SpinnerProgress(FileCounter):
    """File counter that also drives a live spinner on stderr."""

    def __init__(self, console: Console) -> None:
        super().__init__()
        self._progress = Progress(
            SpinnerColumn(style="green"),
            TimeElapsedColumn(),
            TextColumn("files scanned: {task.completed:.0f}"),
            transient=True,
            console=console,
        )
        self._task = self._progress.add_task("Scanning...", total=None)

    def __enter__(self) -> SpinnerProgress:
        self._progress.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self._progress.stop()

    def increment(self) -> None:
        super().increment()
        self._progress.advance(self._task)


def _resolve_sort(sort: str | None, settings: Settings) -> SortMode:
    if sort is not None:
        return SortMode.parse(sort)
    configured = settings.get("scan.sort")
    if configured is None:
        return SortMode.SIZE
    try:
        return SortMode.parse(str(configured))
    except ValueError as e:
        log.warning("Ignoring 'scan.sort' in %s: %s", settings.path, e)
        return SortMode.SIZE


@click.command()
@click.argument("path", default=".", type=click.Path(path_type=str))
@click.option(
    "--sort",
    type=click.Choice([m.value for m in SortMode], case_sensitive=False),
    default=None,
    help="Sort by size (default) or name",
)
@click.option("-n", "--limit", type=click.IntRange(min=0), default=None, help="Limit output to top N items")
@click.option("-j", "--workers", type=click.IntRange(min=1), default=None, help="Number of parallel scan workers")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--no-progress", is_flag=True, help="Do not show the progress spinner")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.version_option(package_name="dusk")
def main(
    path: str,
    sort: str | None,
    limit: int | None,
    workers: int | None,
    as_json: bool,
    no_progress: bool,
    verbose: int,
) -> None:
    """Fast disk usage analyzer for files and directories."""
    console = Console(stderr=True) if not no_progress and not as_json and sys.stderr.isatty() else None
    _setup_logging(verbose, console)
    settings = Settings.instance()

    mode = _resolve_sort(sort, settings)
    if limit is None:
        limit = settings.get_int("scan.limit")
    if workers is None:
        workers = settings.get_int("scan.workers", minimum=1)

    show_progress = console is not None and settings.get("scan.progress", True) is not False

    start = time.monotonic()
    try:
        if show_progress:
            with SpinnerProgress(console) as counter:
                items = DiskScanner(counter, max_workers=workers).scan(path)
        else:
            counter = FileCounter()
            items = DiskScanner(counter, max_workers=workers).scan(path)
    except ScanError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)

    log.info("Scanned %d files in %s", counter.count, format_elapsed(time.monotonic() - start))

    sort_items(items, mode)
    limit_items(items, limit)

    if as_json:
        click.echo(json.dumps([item.to_dict() for item in items], indent=2))
        return

    for line in render_table(items):
        click.echo(line)
