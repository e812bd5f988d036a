"""Exposes the reporters for use by other modules."""

from .summary_reporter import SummaryReporter

__all__ = ["SummaryReporter"]
