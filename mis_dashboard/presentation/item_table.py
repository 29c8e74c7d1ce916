"""Table, chart and download renderers for published report rows."""
from __future__ import annotations

import csv
import io
from typing import Mapping, Sequence

import pandas as pd

from mis_dashboard.domain.models import ItemRow
from mis_dashboard.domain.normalization import to_float

ITEM_COLUMNS = [
    "sl_no",
    "item_name",
    "target",
    "actual_on_date",
    "actual_till_date",
    "dm_item",
    "dm_actual_on_date",
    "dm_actual_till_date",
    "disp_actual_on_date",
    "disp_actual_till_date",
    "isSummary",
]

CHART_COLUMNS = {
    "target": "Target",
    "actual_on_date": "Actual (day)",
    "actual_till_date": "Actual (month)",
    "dm_actual_on_date": "DM (day)",
    "disp_actual_on_date": "Dispatch (day)",
}


def items_to_rows(items: Sequence[ItemRow]) -> list[dict[str, object]]:
    return [item.to_dict() for item in items]


def items_to_dataframe(items: Sequence[ItemRow]) -> pd.DataFrame:
    return pd.DataFrame(items_to_rows(items), columns=ITEM_COLUMNS)


def records_to_dataframe(records: Sequence[Mapping[str, object]]) -> pd.DataFrame:
    return pd.DataFrame([dict(record) for record in records])


def chart_frame(items: Sequence[ItemRow]) -> pd.DataFrame:
    """Numeric view of the detail rows, indexed by item name."""
    details = [item for item in items if not item.is_summary]
    frame = pd.DataFrame(
        [
            {label: to_float(getattr(item, attr)) for attr, label in CHART_COLUMNS.items()}
            for item in details
        ],
        columns=list(CHART_COLUMNS.values()),
    )
    frame.index = pd.Index([item.item_name for item in details], name="item")
    return frame


def render_csv(items: Sequence[ItemRow]) -> bytes:
    rows = items_to_rows(items)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=ITEM_COLUMNS)
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(items: Sequence[ItemRow]) -> str:
    rows = items_to_rows(items)
    if not rows:
        return "<p>No data</p>"
    header = "".join(f"<th>{col}</th>" for col in ITEM_COLUMNS if col != "isSummary")
    body_parts = []
    for row in rows:
        css = ' class="summary"' if row["isSummary"] else ""
        cells = "".join(f"<td>{row[col]}</td>" for col in ITEM_COLUMNS if col != "isSummary")
        body_parts.append(f"<tr{css}>{cells}</tr>")
    body_html = "".join(body_parts)
    return f"<table><thead><tr>{header}</tr></thead><tbody>{body_html}</tbody></table>"


def render_xlsx(items: Sequence[ItemRow], dtm: Sequence[Mapping[str, object]] = ()) -> bytes:
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="xlsxwriter") as writer:
        items_to_dataframe(items).to_excel(writer, sheet_name="items", index=False)
        if dtm:
            records_to_dataframe(dtm).to_excel(writer, sheet_name="dtm", index=False)
    return buf.getvalue()
