"""Reader interfaces anchoring the domain layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from .models import ABSENT, RawRecord


@dataclass(frozen=True)
class EqualityFilter:
    """Single ``field eq value`` predicate applied by the backend."""

    field: str
    value: str

    def matches(self, record: RawRecord) -> bool:
        value = record.field(self.field)
        return value is not ABSENT and str(value) == self.value

    def to_odata(self) -> str:
        escaped = self.value.replace("'", "''")
        return f"{self.field} eq '{escaped}'"


class DatasetReader(Protocol):
    """Reads one named dataset, filtered server-side."""

    async def read(self, dataset: str, filters: Sequence[EqualityFilter]) -> Sequence[RawRecord]:
        ...
