"""Page data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class CandidateFile:
    """A regular file found directly inside the source folder."""

    name: str
    path: Path


@dataclass(frozen=True)
class PageEntry:
    """A file that matched the naming rule, with its parsed page number."""

    number: int
    path: Path

    @property
    def name(self) -> str:
        """Archive entry name, which is always the original filename."""
        return self.path.name


@dataclass
class ClassificationResult:
    """Outcome of matching a folder listing against a naming rule.

    Attributes:
        pages: Matched files, in discovery order
        noise: Names of files that were ignored, in discovery order
    """

    pages: list[PageEntry] = field(default_factory=list)
    noise: list[str] = field(default_factory=list)

    @property
    def has_noise(self) -> bool:
        """Check if any files were ignored."""
        return bool(self.noise)


def format_page_ranges(ranges: list[tuple[int, int]]) -> str:
    """
    Render page ranges compactly, e.g. ``[3, 5-9]``.

    Args:
        ranges: Inclusive (first, last) ranges in ascending order

    Returns:
        str: Bracketed, comma separated ranges
    """
    parts = [str(first) if first == last else f"{first}-{last}" for first, last in ranges]
    return f"[{', '.join(parts)}]"
