"""Data models for page packing."""

from .page import CandidateFile, ClassificationResult, PageEntry, format_page_ranges

__all__ = ["CandidateFile", "ClassificationResult", "PageEntry", "format_page_ranges"]
