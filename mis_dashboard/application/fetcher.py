"""Concurrent retrieval of the four report datasets for one date."""
from __future__ import annotations

import asyncio
import logging
import re
from datetime import date
from typing import Sequence

from mis_dashboard.config import SETTINGS, Settings
from mis_dashboard.domain.errors import FetchError, ReportValidationError
from mis_dashboard.domain.models import RawRecord, as_record
from mis_dashboard.domain.repositories import DatasetReader, EqualityFilter
from mis_dashboard.domain.results import DATASET_NAMES, FetchBundle

logger = logging.getLogger(__name__)

_REPORT_DATE = re.compile(r"[0-9]{8}")


def format_report_date(value: date) -> str:
    # strftime("%Y") does not pad years below 1000 on every platform.
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


class SourceFetcher:
    def __init__(self, reader: DatasetReader, settings: Settings = SETTINGS) -> None:
        self._reader = reader
        self._settings = settings

    async def fetch_all(self, report_date: str) -> FetchBundle:
        """Read dtm, combine, dispatch and stock concurrently; fail as a whole if any read fails."""
        if not isinstance(report_date, str) or not _REPORT_DATE.fullmatch(report_date):
            raise ReportValidationError(f"Report date must be YYYYMMDD text, got {report_date!r}")

        date_filter = EqualityFilter(self._settings.date_field, report_date)
        tasks = [self._read(name, date_filter, report_date) for name in DATASET_NAMES]
        results = await asyncio.gather(*tasks)
        return FetchBundle(**dict(zip(DATASET_NAMES, results)))

    async def _read(self, dataset: str, date_filter: EqualityFilter, report_date: str) -> Sequence[RawRecord]:
        logger.debug("Reading %s with %s", dataset, date_filter.to_odata())
        try:
            rows = await self._reader.read(dataset, [date_filter])
            return tuple(as_record(row) for row in rows)
        except Exception as exc:
            raise FetchError(report_date, dataset) from exc
