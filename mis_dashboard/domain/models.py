"""Domain models for the dashboard reconciliation pipeline.

Raw rows arrive as loosely-typed mappings from the backend; ``RawRecord``
wraps them so that absent fields are resolved in one place. ``ItemRow`` is the
canonical display row produced by the reconciliation engine.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping


class _Absent:
    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


class RawRecord(Mapping[str, Any]):
    """Immutable view over one backend row."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None, **fields: Any) -> None:
        merged = dict(data or {})
        merged.update(fields)
        self._data = MappingProxyType(merged)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"RawRecord({dict(self._data)!r})"

    def field(self, name: str) -> Any:
        """Return the raw value of ``name`` or ``ABSENT`` when the row lacks it."""
        return self._data.get(name, ABSENT)

    def text(self, name: str, default: str = "") -> str:
        # None, "" and 0 count as missing, like the backend's blank cells.
        value = self.field(name)
        if value is ABSENT or not value:
            return default
        return value if isinstance(value, str) else str(value)

    def with_fields(self, **fields: Any) -> "RawRecord":
        return RawRecord(self._data, **fields)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)


def as_record(row: Mapping[str, Any] | RawRecord) -> RawRecord:
    if isinstance(row, RawRecord):
        return row
    return RawRecord(row)


@dataclass(frozen=True)
class ItemRow:
    """One row of the unified item view: a dispatch-driven detail row or a stock summary row."""

    sl_no: str
    item_name: str
    target: str
    actual_on_date: str
    actual_till_date: str
    dm_item: str
    dm_actual_on_date: str
    dm_actual_till_date: str
    disp_actual_on_date: str
    disp_actual_till_date: str
    is_summary: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "sl_no": self.sl_no,
            "item_name": self.item_name,
            "target": self.target,
            "actual_on_date": self.actual_on_date,
            "actual_till_date": self.actual_till_date,
            "dm_item": self.dm_item,
            "dm_actual_on_date": self.dm_actual_on_date,
            "dm_actual_till_date": self.dm_actual_till_date,
            "disp_actual_on_date": self.disp_actual_on_date,
            "disp_actual_till_date": self.disp_actual_till_date,
            "isSummary": self.is_summary,
        }
