"""Main page packing orchestration."""

from __future__ import annotations

from pathlib import Path
from typing import final

from cbzpack.archivers.cbz import CbzWriter, default_output_path
from cbzpack.config import PackSettings
from cbzpack.models.page import PageEntry
from cbzpack.parsers.naming_rule import NamingRule, derive_title
from cbzpack.parsers.page_collector import classify_candidates, list_candidate_files
from cbzpack.progress.reporter import Reporter
from cbzpack.validators.sequence import validate_page_sequence


@final
class PagePacker:
    """Resolves the pages of a folder and packs them into one archive."""

    def __init__(
        self,
        settings: PackSettings | None = None,
        reporter: Reporter | None = None,
        writer: CbzWriter | None = None,
    ) -> None:
        """Initialize the packer.

        Args:
            settings: Run settings. If None, uses defaults.
            reporter: Reporter for console output
            writer: Archive writer to use
        """
        self.settings = settings or PackSettings()
        self.reporter = reporter or Reporter(show_progress=self.settings.show_progress)
        self.writer = writer or CbzWriter()

    def resolve_pages(self, folder: Path) -> list[PageEntry]:
        """Find, validate and order the pages in a folder.

        Ignored files are reported as warnings and never fail the run
        on their own.

        Args:
            folder: Path to the source folder

        Returns:
            list[PageEntry]: Pages sorted by ascending page number

        Raises:
            ConfigurationError: If no title can be derived from the folder
            ArchiveIOError: If the folder cannot be listed
            NoMatchingFilesError: If no file follows the naming rule
            DuplicatePageError: If two files share a page number
            IncompletePageSequenceError: If page numbers have gaps
        """
        title = derive_title(folder)
        rule = NamingRule.from_title(title)
        self.reporter.display_debug(f"Expecting pages named {rule.expected_shape}")

        candidates = list_candidate_files(folder)
        result = classify_candidates(candidates, rule)
        if result.has_noise:
            self.reporter.display_noise(result.noise)

        pages = validate_page_sequence(result.pages, rule)
        self.reporter.display_debug(f"Found {len(pages)} pages for '{title}'")
        return pages

    def pack(self, folder: Path, output: Path | None = None, dry_run: bool = False) -> Path:
        """Pack a folder's pages into an archive.

        Args:
            folder: Path to the source folder
            output: Archive path. If None, derived from the folder path.
            dry_run: Show the planned order without writing anything

        Returns:
            Path of the archive written, or that would be written

        Raises:
            PagePackError: On any validation or I/O failure
        """
        pages = self.resolve_pages(folder)
        output_path = output or default_output_path(folder, self.settings.archive_extension)

        if dry_run:
            self.reporter.display_page_plan(pages, output_path)
            return output_path

        with self.reporter.track_archive_writing(output_path.name, len(pages)) as progress:
            self.writer.write(pages, output_path, on_page=progress.page_stored)

        self.reporter.display_result(output_path)
        return output_path
