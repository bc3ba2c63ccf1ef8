"""Page file collection utilities."""

from __future__ import annotations

import stat
from pathlib import Path

from cbzpack.errors import ArchiveIOError
from cbzpack.models.page import CandidateFile, ClassificationResult, PageEntry
from cbzpack.parsers.naming_rule import NamingRule

# Page numbers must fit an unsigned 32-bit integer
MAX_PAGE_NUMBER = 2**32 - 1


def list_candidate_files(folder_path: Path) -> list[CandidateFile]:
    """
    List the regular files directly inside a folder.

    Subdirectories, symlinks and special files are skipped without notice.

    Args:
        folder_path: Path to the folder to scan

    Returns:
        list[CandidateFile]: Files sorted by name for consistent ordering

    Raises:
        ArchiveIOError: If the folder cannot be listed
    """
    candidates: list[CandidateFile] = []
    try:
        for file_path in folder_path.iterdir():
            # lstat so that symlinks to files are not followed
            mode = file_path.lstat().st_mode
            if stat.S_ISREG(mode):
                candidates.append(CandidateFile(name=file_path.name, path=file_path))
    except OSError as e:
        raise ArchiveIOError("list", folder_path, e) from e

    candidates.sort(key=lambda c: c.name)
    return candidates


def parse_page_number(digits: str) -> int | None:
    """
    Parse captured page digits.

    Args:
        digits: Digit string captured by the naming rule

    Returns:
        The page number, or None if it is not a valid unsigned 32-bit value
    """
    try:
        number = int(digits)
    except ValueError:
        return None
    if number < 0 or number > MAX_PAGE_NUMBER:
        return None
    return number


def classify_candidates(
    candidates: list[CandidateFile], rule: NamingRule
) -> ClassificationResult:
    """
    Split candidate files into pages and noise.

    Never raises: an empty page list is reported later by validation.

    Args:
        candidates: Files found in the source folder
        rule: Naming rule for the folder's title

    Returns:
        ClassificationResult: Pages and ignored names, in discovery order
    """
    result = ClassificationResult()
    for candidate in candidates:
        digits = rule.match(candidate.name)
        if digits is None:
            result.noise.append(candidate.name)
            continue

        number = parse_page_number(digits)
        if number is None:
            result.noise.append(candidate.name)
            continue

        result.pages.append(PageEntry(number=number, path=candidate.path))
    return result
