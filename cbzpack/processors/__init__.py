"""Packing orchestration."""

from .page_packer import PagePacker

__all__ = ["PagePacker"]
