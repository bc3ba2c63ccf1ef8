"""Completeness checks for a set of matched pages."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from pathlib import Path

from cbzpack.errors import (
    DuplicatePageError,
    IncompletePageSequenceError,
    NoMatchingFilesError,
)
from cbzpack.models.page import PageEntry
from cbzpack.parsers.naming_rule import NamingRule


def find_missing_ranges(numbers: Iterable[int]) -> list[tuple[int, int]]:
    """
    Find the gaps in the range 1..max as inclusive ranges.

    Work is proportional to the number of pages, not to the largest page
    number, so one stray high number stays cheap.

    Args:
        numbers: Observed page numbers

    Returns:
        list[tuple[int, int]]: (first, last) gaps in ascending order, empty if none
    """
    gaps: list[tuple[int, int]] = []
    expected = 1
    for number in sorted(set(numbers)):
        if number < expected:
            continue
        if number > expected:
            gaps.append((expected, number - 1))
        expected = number + 1
    return gaps


def find_missing_pages(numbers: Iterable[int]) -> list[int]:
    """
    Find the page numbers absent from the range 1..max.

    Args:
        numbers: Observed page numbers

    Returns:
        list[int]: Missing numbers in ascending order, empty if none
    """
    return [n for first, last in find_missing_ranges(numbers) for n in range(first, last + 1)]


def find_duplicate_pages(pages: Iterable[PageEntry]) -> dict[int, list[Path]]:
    """
    Find page numbers claimed by more than one file.

    Args:
        pages: Matched pages

    Returns:
        Mapping of duplicated page number to the files claiming it
    """
    claims: defaultdict[int, list[Path]] = defaultdict(list)
    for page in pages:
        claims[page.number].append(page.path)
    return {number: paths for number, paths in claims.items() if len(paths) > 1}


def validate_page_sequence(pages: list[PageEntry], rule: NamingRule) -> list[PageEntry]:
    """
    Validate matched pages and put them in archive order.

    Args:
        pages: Pages from the classification pass
        rule: Naming rule the pages were matched with

    Returns:
        list[PageEntry]: Pages sorted by ascending page number

    Raises:
        NoMatchingFilesError: If there are no pages at all
        DuplicatePageError: If two files share a page number
        IncompletePageSequenceError: If any number in 1..max is missing
    """
    if not pages:
        raise NoMatchingFilesError(rule.title, rule.expected_shape)

    ordered = sorted(pages, key=lambda p: (p.number, p.name))

    duplicates = find_duplicate_pages(ordered)
    if duplicates:
        raise DuplicatePageError(duplicates)

    missing_ranges = find_missing_ranges(p.number for p in ordered)
    if missing_ranges:
        raise IncompletePageSequenceError(missing_ranges)

    return ordered
