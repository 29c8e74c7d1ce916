"""Application services orchestrating the report workflow."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from mis_dashboard.application.dto import (
    FAILURE_MESSAGE,
    NO_DATE_MESSAGE,
    SUCCESS_MESSAGE,
    OutcomeKind,
    ReportListener,
    ReportOutcome,
)
from mis_dashboard.application.fetcher import SourceFetcher, format_report_date
from mis_dashboard.domain.results import ReportResult
from mis_dashboard.domain.services import ItemReconciler, number_dtm_rows
from mis_dashboard.infrastructure.storage.result_store import ResultStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReportContext:
    fetcher: SourceFetcher
    reconciler: ItemReconciler
    store: ResultStore = field(default_factory=ResultStore)


class RunReportUseCase:
    def __init__(self, context: ReportContext, listener: ReportListener | None = None) -> None:
        self._context = context
        self._listener = listener

    @property
    def store(self) -> ResultStore:
        return self._context.store

    async def run_report(self, report_date: date | None) -> ReportOutcome:
        """Fetch, reconcile and publish one date.

        The listener always receives exactly one ``notify`` and one ``finished``
        call. Nothing is published unless all four reads succeed.
        """
        try:
            if report_date is None:
                outcome = ReportOutcome(OutcomeKind.VALIDATION, NO_DATE_MESSAGE)
            else:
                outcome = await self._execute(format_report_date(report_date))
            self._notify(outcome)
            return outcome
        finally:
            logger.info("--- Report execution finished ---")
            if self._listener is not None:
                self._listener.finished()

    async def _execute(self, formatted: str) -> ReportOutcome:
        logger.info("--- Report execution started for date %s ---", formatted)
        try:
            bundle = await self._context.fetcher.fetch_all(formatted)
        except Exception:
            logger.exception("Fetch failed for %s", formatted)
            return ReportOutcome(OutcomeKind.FAILURE, FAILURE_MESSAGE)

        logger.info("Fetched rows per dataset: %s", bundle.counts())
        duplicates = self._context.reconciler.duplicate_keys(bundle.combine)
        if duplicates:
            logger.warning("Duplicate combine keys, last row kept: %s", dict(duplicates))

        items = self._context.reconciler.build(bundle.combine, bundle.dispatch, bundle.stock)
        result = ReportResult(
            report_date=formatted,
            dtm=number_dtm_rows(bundle.dtm),
            combine=bundle.combine,
            dispatch=bundle.dispatch,
            stock=bundle.stock,
            item=items,
        )
        self._context.store.publish(result)
        logger.info("Published %d item rows", len(items))
        return ReportOutcome(OutcomeKind.SUCCESS, SUCCESS_MESSAGE, result)

    def _notify(self, outcome: ReportOutcome) -> None:
        if outcome.kind is OutcomeKind.VALIDATION:
            logger.warning(outcome.message)
        if self._listener is not None:
            self._listener.notify(outcome)
