"""Console reporting and progress display."""

from .reporter import PageProgressContext, Reporter

__all__ = ["PageProgressContext", "Reporter"]
