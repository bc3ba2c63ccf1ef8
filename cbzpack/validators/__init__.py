"""Page sequence validation."""

from .sequence import (
    find_duplicate_pages,
    find_missing_pages,
    find_missing_ranges,
    validate_page_sequence,
)

__all__ = [
    "find_duplicate_pages",
    "find_missing_pages",
    "find_missing_ranges",
    "validate_page_sequence",
]
