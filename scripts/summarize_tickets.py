from __future__ import annotations

import argparse

from analytics.aggregator import compute_summary
from analytics.report import render_summary, write_summary
from analytics.schema import validate_summary
from analytics.summary import Summary
from dashboard_runtime.config import settings
from dashboard_runtime.logging_config import configure_logging
from tickets.store import LoadError, load_dataset


def build_summary(csv_path: str) -> Summary:
    dataset = load_dataset(csv_path)
    summary = compute_summary(dataset)
    validate_summary(summary)
    if dataset.skipped_rows:
        print(f"Skipped {dataset.skipped_rows} row(s) with an invalid created_at")
    return summary


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Summarize a ticket CSV without starting the server")
    ap.add_argument("--csv", default=settings.tickets_csv_path)
    ap.add_argument("--out", help="Also write the summary JSON to this file")
    args = ap.parse_args(argv)
    configure_logging(settings.log_level)

    try:
        summary = build_summary(args.csv)
    except LoadError as exc:
        print(f"Failed to load CSV: {exc}")
        return 1

    if args.out:
        write_summary(args.out, summary)
        print(f"Wrote {args.out}")
    print(render_summary(summary))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
