"""Exceptions raised across the dashboard reconciliation layer."""
from __future__ import annotations


class DashboardError(Exception):
    """Base class for dashboard failures."""


class ReportValidationError(DashboardError, ValueError):
    """Required report input is missing or malformed."""


class DatasetReadError(DashboardError):
    """A single dataset read failed at the transport or backend level."""

    def __init__(self, dataset: str, message: str) -> None:
        super().__init__(f"{dataset}: {message}")
        self.dataset = dataset


class FetchError(DashboardError):
    """One of the concurrent dataset reads of a report cycle failed."""

    def __init__(self, report_date: str, dataset: str | None = None) -> None:
        target = dataset or "unknown dataset"
        super().__init__(f"Fetch for {report_date} failed on {target}")
        self.report_date = report_date
        self.dataset = dataset
