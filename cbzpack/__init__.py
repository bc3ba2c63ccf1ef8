"""Pack numbered page images from a folder into a CBZ archive."""

__version__ = "0.1.0"
