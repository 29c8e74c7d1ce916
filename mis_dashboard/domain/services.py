"""Domain services implementing the item reconciliation rules."""
from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Mapping, Sequence

from .models import ItemRow, RawRecord, as_record
from .normalization import normalize_key

MISSING_VALUE = "0.000"


def number_dtm_rows(dtm: Iterable[Mapping[str, object]]) -> tuple[RawRecord, ...]:
    """Attach a 1-based ``sl_no`` to each dtm row in source order."""
    return tuple(as_record(row).with_fields(sl_no=str(idx)) for idx, row in enumerate(dtm, start=1))


def _display_name(category: str) -> str:
    return category.replace("_", " ")


class ItemReconciler:
    """Left-joins combine figures onto dispatch rows and appends stock summary rows."""

    def __init__(self, missing_value: str = MISSING_VALUE) -> None:
        self._missing = missing_value

    def build(
        self,
        combine: Sequence[Mapping[str, object]],
        dispatch: Sequence[Mapping[str, object]],
        stock: Sequence[Mapping[str, object]],
    ) -> tuple[ItemRow, ...]:
        combine_map = self._to_map(combine)
        details = [self._detail_row(idx, as_record(row), combine_map) for idx, row in enumerate(dispatch, start=1)]
        summaries = [self._summary_row(as_record(row)) for row in stock]
        return tuple(details + summaries)

    @staticmethod
    def duplicate_keys(combine: Sequence[Mapping[str, object]]) -> Mapping[str, int]:
        counts: dict[str, int] = defaultdict(int)
        for row in combine:
            counts[normalize_key(as_record(row).text("category"))] += 1
        return {key: count for key, count in counts.items() if count > 1}

    @staticmethod
    def _to_map(records: Sequence[Mapping[str, object]]) -> Mapping[str, RawRecord]:
        # Last row wins when two combine rows normalize to the same key.
        index: dict[str, RawRecord] = {}
        for row in records:
            record = as_record(row)
            index[normalize_key(record.text("category"))] = record
        return index

    def _detail_row(self, position: int, dispatch: RawRecord, combine_map: Mapping[str, RawRecord]) -> ItemRow:
        key = normalize_key(dispatch.text("category"))
        combine = combine_map.get(key, RawRecord())
        name = _display_name(dispatch.text("category"))
        missing = self._missing
        return ItemRow(
            sl_no=str(position),
            item_name=name,
            target=combine.text("t_menge", missing),
            actual_on_date=combine.text("d_act", missing),
            actual_till_date=combine.text("m_act", missing),
            dm_item=name,
            dm_actual_on_date=dispatch.text("dm_daily", missing),
            dm_actual_till_date=dispatch.text("dm_month", missing),
            disp_actual_on_date=dispatch.text("dis_daily", missing),
            disp_actual_till_date=dispatch.text("dis_month", missing),
            is_summary=False,
        )

    def _summary_row(self, stock: RawRecord) -> ItemRow:
        return ItemRow(
            sl_no="",
            item_name=stock.text("parameter"),
            target=stock.text("menge", self._missing),
            actual_on_date="",
            actual_till_date="",
            dm_item="",
            dm_actual_on_date="",
            dm_actual_till_date="",
            disp_actual_on_date="",
            disp_actual_till_date="",
            is_summary=True,
        )
