"""Command-line entrypoint for running a dashboard report."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from datetime import date
from pathlib import Path

from mis_dashboard.application.dto import ReportOutcome
from mis_dashboard.application.fetcher import SourceFetcher
from mis_dashboard.application.use_cases import ReportContext, RunReportUseCase
from mis_dashboard.config import SETTINGS
from mis_dashboard.domain.services import ItemReconciler
from mis_dashboard.infrastructure.readers.odata import ODataDatasetReader
from mis_dashboard.presentation.item_table import items_to_dataframe, render_csv, render_xlsx


def _report_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from None


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile production datasets for one report date")
    parser.add_argument("--date", type=_report_date, required=True, help="Report date (YYYY-MM-DD)")
    parser.add_argument("--service-url", type=str, help="Override the OData service root URL")
    parser.add_argument("--output", type=str, help="Write item rows to a .csv or .xlsx file")
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


class ConsoleListener:
    def notify(self, outcome: ReportOutcome) -> None:
        print(outcome.message)

    def finished(self) -> None:
        pass


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    settings = SETTINGS
    if args.service_url:
        settings = replace(settings, service_url=args.service_url.rstrip("/"))

    with ODataDatasetReader(settings) as reader:
        context = ReportContext(
            fetcher=SourceFetcher(reader, settings),
            reconciler=ItemReconciler(settings.missing_value),
        )
        use_case = RunReportUseCase(context, listener=ConsoleListener())
        outcome = asyncio.run(use_case.run_report(args.date))
    if not outcome.ok or outcome.result is None:
        return 1

    items = outcome.result.item
    print()
    print(items_to_dataframe(items).to_string(index=False))

    if args.output:
        target = Path(args.output)
        if target.suffix.lower() == ".xlsx":
            target.write_bytes(render_xlsx(items, outcome.result.dtm))
        else:
            target.write_bytes(render_csv(items))
        print(f"\nWrote {len(items)} rows to {target}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
