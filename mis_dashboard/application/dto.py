"""Application-level DTOs for report cycles."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from mis_dashboard.domain.results import ReportResult

NO_DATE_MESSAGE = "Please select a date"
SUCCESS_MESSAGE = "Data Loaded Successfully"
FAILURE_MESSAGE = "Error loading data"


class OutcomeKind(str, Enum):
    VALIDATION = "validation"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(slots=True, frozen=True)
class ReportOutcome:
    kind: OutcomeKind
    message: str
    result: ReportResult | None = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS


class ReportListener(Protocol):
    """Receives the user-facing outcome and the end-of-cycle signal."""

    def notify(self, outcome: ReportOutcome) -> None:
        ...

    def finished(self) -> None:
        ...
