"""Error types raised while resolving and packing pages."""

from __future__ import annotations

from pathlib import Path

from cbzpack.models.page import format_page_ranges


class PagePackError(Exception):
    """Base class for every failure that ends a packing run."""
    pass


class ConfigurationError(PagePackError):
    """Raised when the title or settings cannot be derived."""
    pass


class NoMatchingFilesError(PagePackError):
    """Raised when no file in the folder follows the naming rule."""

    def __init__(self, title: str, expected_shape: str) -> None:
        self.title = title
        self.expected_shape = expected_shape
        super().__init__(
            f"No valid image files found matching pattern {expected_shape}"
        )


class DuplicatePageError(PagePackError):
    """Raised when more than one file claims the same page number."""

    def __init__(self, duplicates: dict[int, list[Path]]) -> None:
        self.duplicates = duplicates
        details = "; ".join(
            f"page {number}: {', '.join(p.name for p in paths)}"
            for number, paths in sorted(duplicates.items())
        )
        super().__init__(f"Duplicate page numbers found ({details})")


class IncompletePageSequenceError(PagePackError):
    """Raised when page numbers 1..max are not all present.

    The CLI reports this one separately, with its own exit status.
    """

    def __init__(self, missing_ranges: list[tuple[int, int]]) -> None:
        self.missing_ranges = missing_ranges
        super().__init__(f"Missing page numbers: {format_page_ranges(missing_ranges)}")

    @property
    def missing(self) -> list[int]:
        """Every missing page number. Can be very large for sparse sets."""
        return [n for first, last in self.missing_ranges for n in range(first, last + 1)]


class ArchiveIOError(PagePackError):
    """Raised when a filesystem operation fails while listing or packing."""

    def __init__(self, action: str, path: Path, cause: OSError | None = None) -> None:
        self.action = action
        self.path = path
        self.cause = cause
        message = f"Failed to {action} {path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
