"""In-process holder for the published report destinations."""
from __future__ import annotations

from typing import Sequence

from mis_dashboard.domain.models import ItemRow, RawRecord
from mis_dashboard.domain.results import DESTINATION_NAMES, ReportResult


class ResultStore:
    """Keeps the last published ``ReportResult``.

    Every destination starts out empty. ``publish`` swaps the whole result in a
    single assignment, so readers see either the previous cycle or the new one.
    """

    def __init__(self) -> None:
        self._current = ReportResult()

    @property
    def names(self) -> tuple[str, ...]:
        return DESTINATION_NAMES

    def publish(self, result: ReportResult) -> None:
        self._current = result

    def snapshot(self) -> ReportResult:
        return self._current

    def get(self, name: str) -> Sequence[RawRecord] | Sequence[ItemRow]:
        return self._current.destination(name)
