"""Reconciliation layer for the production MIS dashboard."""
from mis_dashboard.application.fetcher import SourceFetcher
from mis_dashboard.application.use_cases import ReportContext, RunReportUseCase
from mis_dashboard.domain.normalization import normalize_key, to_float
from mis_dashboard.domain.services import ItemReconciler
from mis_dashboard.infrastructure.readers.memory import InMemoryDatasetReader
from mis_dashboard.infrastructure.readers.odata import ODataDatasetReader
from mis_dashboard.infrastructure.storage.result_store import ResultStore

__all__ = [
    "ReportContext",
    "RunReportUseCase",
    "SourceFetcher",
    "ItemReconciler",
    "normalize_key",
    "to_float",
    "InMemoryDatasetReader",
    "ODataDatasetReader",
    "ResultStore",
]
