"""Domain-level results of one report cycle."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .models import ItemRow, RawRecord

DATASET_NAMES = ("dtm", "combine", "dispatch", "stock")
DESTINATION_NAMES = DATASET_NAMES + ("item",)


@dataclass(frozen=True)
class FetchBundle:
    """The four raw datasets read for one report date."""

    dtm: Sequence[RawRecord] = field(default_factory=tuple)
    combine: Sequence[RawRecord] = field(default_factory=tuple)
    dispatch: Sequence[RawRecord] = field(default_factory=tuple)
    stock: Sequence[RawRecord] = field(default_factory=tuple)

    def counts(self) -> dict[str, int]:
        return {name: len(getattr(self, name)) for name in DATASET_NAMES}


@dataclass(frozen=True)
class ReportResult:
    report_date: str = ""
    dtm: Sequence[RawRecord] = field(default_factory=tuple)
    combine: Sequence[RawRecord] = field(default_factory=tuple)
    dispatch: Sequence[RawRecord] = field(default_factory=tuple)
    stock: Sequence[RawRecord] = field(default_factory=tuple)
    item: Sequence[ItemRow] = field(default_factory=tuple)

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in DESTINATION_NAMES)

    def destination(self, name: str) -> Sequence[RawRecord] | Sequence[ItemRow]:
        if name not in DESTINATION_NAMES:
            raise KeyError(name)
        return getattr(self, name)
