"""Central configuration for the MIS dashboard package."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_SERVICE_URL = "http://localhost:8000/sap/opu/odata/sap/ZMIS_DASHBOARD_SRV"
DEFAULT_TIMEOUT = 30.0

# Backend entity sets per published dataset.
ENTITY_SETS = MappingProxyType(
    {
        "dtm": "es_dtmset",
        "combine": "es_combineset",
        "dispatch": "es_dm_dispset",
        "stock": "es_stockset",
    }
)


@dataclass(slots=True, frozen=True)
class Settings:
    service_url: str = DEFAULT_SERVICE_URL
    date_field: str = "budat"
    request_timeout: float = DEFAULT_TIMEOUT
    missing_value: str = "0.000"
    entity_sets: Mapping[str, str] = field(default_factory=lambda: ENTITY_SETS)


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if env is None else env
    timeout_raw = env.get("MIS_DASHBOARD_TIMEOUT", "").strip()
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
    except ValueError:
        timeout = DEFAULT_TIMEOUT
    return Settings(
        service_url=env.get("MIS_DASHBOARD_SERVICE_URL", "").strip().rstrip("/") or DEFAULT_SERVICE_URL,
        request_timeout=timeout,
    )


SETTINGS = load_settings()
