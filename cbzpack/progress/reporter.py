"""Console reporting with Rich, split across stdout and stderr."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from cbzpack.models.page import PageEntry, format_page_ranges


@final
class Reporter:
    """Routes results to stdout and diagnostics to stderr."""

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
        show_progress: bool = True,
        verbose: bool = False,
    ) -> None:
        """Initialize the reporter.

        Args:
            console: Console for primary output. If None, uses stdout.
            err_console: Console for diagnostics. If None, uses stderr.
            show_progress: Whether to draw progress bars
            verbose: Whether to print per-page details
        """
        self.console = console or Console(soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, soft_wrap=True)
        self.show_progress = show_progress
        self.verbose = verbose

    @contextmanager
    def track_archive_writing(self, archive_name: str, total_pages: int) -> Iterator[PageProgressContext]:
        """Context manager for tracking pages stored into an archive.

        Args:
            archive_name: Name of the archive being written
            total_pages: Total number of pages to store

        Yields:
            Progress context to advance after each page
        """
        if not self.show_progress:
            yield PageProgressContext(None, None, self)
            return

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.err_console,
            transient=True,
        ) as progress:
            task_id = progress.add_task(
                f"Writing {escape(archive_name)}...", total=total_pages
            )
            yield PageProgressContext(progress, task_id, self)

    def display_noise(self, names: list[str]) -> None:
        """List files that were ignored because they do not follow the naming rule.

        Args:
            names: Ignored filenames in discovery order
        """
        if not names:
            return
        self.err_console.print("[yellow]Warning: ignored files not matching pattern:[/yellow]")
        for name in names:
            self.err_console.print(f"  - {escape(name)}")

    def display_missing_pages(self, missing_ranges: list[tuple[int, int]]) -> None:
        """Report gaps in the page sequence, one entry per gap.

        Args:
            missing_ranges: Inclusive (first, last) gaps in ascending order
        """
        self.err_console.print(
            f"Missing page numbers: {format_page_ranges(missing_ranges)}",
            style="red",
            markup=False,
            highlight=False,
        )

    def display_page_plan(self, pages: list[PageEntry], output_path: Path) -> None:
        """Show the archive order without writing anything.

        Args:
            pages: Validated pages in archive order
            output_path: Where the archive would be written
        """
        table = Table(title=f"Planned archive: {escape(str(output_path))}")
        table.add_column("Page", style="cyan", justify="right")
        table.add_column("File", style="green")

        for page in pages:
            table.add_row(str(page.number), escape(page.name))

        self.console.print(table)

    def display_result(self, output_path: Path) -> None:
        """Confirm the finished archive on the primary output.

        Args:
            output_path: Path of the archive that was written
        """
        self.console.print(f"Successfully created {escape(str(output_path))}")

    def display_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: Error message to display
        """
        self.err_console.print(f"[red]Error: {escape(message)}[/red]")

    def display_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: Warning message to display
        """
        self.err_console.print(f"[yellow]Warning: {escape(message)}[/yellow]")

    def display_debug(self, message: str) -> None:
        """Display a message only in verbose mode."""
        if self.verbose:
            self.err_console.print(f"[dim]{escape(message)}[/dim]")


@final
class PageProgressContext:
    """Context for tracking pages written to an archive."""

    def __init__(
        self,
        progress: Progress | None,
        task_id: TaskID | None,
        reporter: Reporter,
    ) -> None:
        """Initialize the context.

        Args:
            progress: Rich Progress instance, or None when progress is hidden
            task_id: Task ID for the progress bar
            reporter: Reporter used for verbose per-page lines
        """
        self.progress = progress
        self.task_id = task_id
        self.reporter = reporter

    def page_stored(self, page: PageEntry) -> None:
        """Advance by one stored page.

        Args:
            page: The page that was just stored
        """
        self.reporter.display_debug(f"Stored page {page.number}: {page.name}")
        if self.progress is not None and self.task_id is not None:
            self.progress.update(self.task_id, advance=1)
