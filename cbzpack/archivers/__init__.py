"""Archive writers."""

from .cbz import CbzWriter, default_output_path

__all__ = ["CbzWriter", "default_output_path"]
