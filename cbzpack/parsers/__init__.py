"""Folder listing and filename parsing utilities."""

from .naming_rule import NamingRule, derive_title
from .page_collector import classify_candidates, list_candidate_files, parse_page_number

__all__ = [
    "NamingRule",
    "classify_candidates",
    "derive_title",
    "list_candidate_files",
    "parse_page_number",
]
