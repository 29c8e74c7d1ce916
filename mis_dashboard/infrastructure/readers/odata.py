"""OData-backed dataset reader."""
from __future__ import annotations

import asyncio
from typing import Any, Mapping, Sequence

import requests

from mis_dashboard.config import SETTINGS, Settings
from mis_dashboard.domain.errors import DatasetReadError
from mis_dashboard.domain.models import RawRecord
from mis_dashboard.domain.repositories import DatasetReader, EqualityFilter


def build_query(filters: Sequence[EqualityFilter]) -> dict[str, str]:
    params = {"$format": "json"}
    if filters:
        params["$filter"] = " and ".join(f.to_odata() for f in filters)
    return params


def extract_results(payload: Any) -> list[Mapping[str, Any]]:
    """Pull the row list out of an OData v2 (``d.results``) or v4 (``value``) payload."""
    if not isinstance(payload, dict):
        raise ValueError("OData payload must be a JSON object")
    if "d" in payload:
        body = payload["d"]
        rows = body.get("results") if isinstance(body, dict) else body
    else:
        rows = payload.get("value")
    if not isinstance(rows, list):
        raise ValueError("OData payload has no result list")
    return rows


def _strip_metadata(row: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in row.items() if key != "__metadata"}


class ODataDatasetReader(DatasetReader):
    def __init__(self, settings: Settings = SETTINGS, session: requests.Session | None = None) -> None:
        self._settings = settings
        self._owns_session = session is None
        self._session = session or requests.Session()

    def close(self) -> None:
        # Injected sessions belong to the caller.
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "ODataDatasetReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def entity_url(self, dataset: str) -> str:
        try:
            entity_set = self._settings.entity_sets[dataset]
        except KeyError:
            raise DatasetReadError(dataset, "no entity set configured") from None
        return f"{self._settings.service_url}/{entity_set}"

    async def read(self, dataset: str, filters: Sequence[EqualityFilter]) -> Sequence[RawRecord]:
        return await asyncio.to_thread(self._read_sync, dataset, filters)

    def _read_sync(self, dataset: str, filters: Sequence[EqualityFilter]) -> Sequence[RawRecord]:
        url = self.entity_url(dataset)
        try:
            response = self._session.get(
                url,
                params=build_query(filters),
                headers={"Accept": "application/json"},
                timeout=self._settings.request_timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DatasetReadError(dataset, f"request failed: {exc}") from exc

        try:
            rows = extract_results(response.json())
        except ValueError as exc:
            raise DatasetReadError(dataset, f"malformed payload: {exc}") from exc
        return [RawRecord(_strip_metadata(row)) for row in rows if isinstance(row, Mapping)]
