"""In-memory dataset reader used for fixtures, demos and tests."""
from __future__ import annotations

import asyncio
from typing import Any, Iterable, Mapping, Sequence

from mis_dashboard.domain.errors import DatasetReadError
from mis_dashboard.domain.models import RawRecord, as_record
from mis_dashboard.domain.repositories import DatasetReader, EqualityFilter


class InMemoryDatasetReader(DatasetReader):
    def __init__(
        self,
        datasets: Mapping[str, Iterable[Mapping[str, Any]]],
        failures: Mapping[str, Exception] | None = None,
        delays: Mapping[str, float] | None = None,
    ) -> None:
        self._datasets = {name: tuple(as_record(row) for row in rows) for name, rows in datasets.items()}
        self._failures = dict(failures or {})
        self._delays = dict(delays or {})
        self.calls: list[tuple[str, tuple[EqualityFilter, ...]]] = []
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "InMemoryDatasetReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def read(self, dataset: str, filters: Sequence[EqualityFilter]) -> Sequence[RawRecord]:
        self.calls.append((dataset, tuple(filters)))
        await asyncio.sleep(self._delays.get(dataset, 0))
        if dataset in self._failures:
            raise self._failures[dataset]
        if dataset not in self._datasets:
            raise DatasetReadError(dataset, "dataset is not available")
        return [row for row in self._datasets[dataset] if all(f.matches(row) for f in filters)]
