"""Streamlit front-end for the MIS production dashboard."""
from __future__ import annotations

import asyncio
import logging
from datetime import date

import streamlit as st

from mis_dashboard import (
    ItemReconciler,
    ODataDatasetReader,
    ReportContext,
    ResultStore,
    RunReportUseCase,
    SourceFetcher,
)
from mis_dashboard.application.dto import OutcomeKind, ReportOutcome
from mis_dashboard.config import SETTINGS
from mis_dashboard.presentation.item_table import (
    chart_frame,
    items_to_dataframe,
    records_to_dataframe,
    render_csv,
    render_html,
    render_xlsx,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")

st.set_page_config(page_title="MIS Dashboard", layout="wide")
st.title("Production MIS Dashboard")


class ToastListener:
    def notify(self, outcome: ReportOutcome) -> None:
        if outcome.kind is OutcomeKind.SUCCESS:
            st.toast(outcome.message)
        elif outcome.kind is OutcomeKind.VALIDATION:
            st.warning(outcome.message)
        else:
            st.error(outcome.message)

    def finished(self) -> None:
        st.session_state["busy"] = False


if "store" not in st.session_state:
    st.session_state["store"] = ResultStore()
if "busy" not in st.session_state:
    st.session_state["busy"] = False

store: ResultStore = st.session_state["store"]


def run_report(report_date: date | None) -> None:
    with ODataDatasetReader(SETTINGS) as reader:
        context = ReportContext(
            fetcher=SourceFetcher(reader, SETTINGS),
            reconciler=ItemReconciler(SETTINGS.missing_value),
            store=store,
        )
        use_case = RunReportUseCase(context, listener=ToastListener())
        st.session_state["busy"] = True
        with st.spinner("Loading report..."):
            asyncio.run(use_case.run_report(report_date))


col_date, col_run = st.columns([3, 1])
with col_date:
    picked = st.date_input("Report date", value=None, format="DD.MM.YYYY")
with col_run:
    st.write("")
    if st.button("Execute Report", disabled=st.session_state["busy"]):
        run_report(picked)

result = store.snapshot()
if result.report_date:
    st.caption(f"Showing data for {result.report_date}")

view = st.radio("View", ["Table", "Chart"], horizontal=True, key="view_toggle")

tabs = st.tabs(["Items", "DTM", "Combine", "Dispatch", "Stock"])
with tabs[0]:
    if view == "Table":
        st.dataframe(items_to_dataframe(result.item), hide_index=True, use_container_width=True)
    else:
        st.bar_chart(chart_frame(result.item))
    if result.item:
        col_csv, col_html, col_xlsx = st.columns(3)
        with col_csv:
            st.download_button("Download CSV", data=render_csv(result.item), file_name="items.csv", mime="text/csv")
        with col_html:
            st.download_button(
                "Download HTML",
                data=render_html(result.item).encode("utf-8"),
                file_name="items.html",
                mime="text/html",
            )
        with col_xlsx:
            st.download_button(
                "Download Excel",
                data=render_xlsx(result.item, result.dtm),
                file_name="items.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            )

for tab, name in zip(tabs[1:], ("dtm", "combine", "dispatch", "stock")):
    with tab:
        rows = store.get(name)
        if not rows:
            st.info("No data")
        else:
            st.dataframe(records_to_dataframe(rows), hide_index=True, use_container_width=True)
