"""Run the four travel analytics end-to-end. (端到端运行四项出行分析)"""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import Sequence

from flight_analytics.analytics.flyers import frequent_flyers
from flight_analytics.analytics.hub_runs import longest_runs
from flight_analytics.analytics.monthly import monthly_flight_counts
from flight_analytics.analytics.pairs import co_travel_pairs
from flight_analytics.config import get_paths, load_settings
from flight_analytics.io import load_flights, load_passengers
from flight_analytics.logging_config import setup_logging
from flight_analytics.models import build_directory
from flight_analytics.report import (
    co_travel_table,
    frequent_flyer_table,
    longest_run_table,
    monthly_table,
    print_summary,
    top_n,
    warnings_table,
    write_tables,
)
from flight_analytics.viz.charts import monthly_bar, span_hist

logger = logging.getLogger("run_analytics")


def _iso_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {text!r}") from None


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run flight travel analytics")
    parser.add_argument("--flights", default=None, help="Flight CSV (default: env FLIGHT_DATA_PATH or data/raw/flightData.csv)")
    parser.add_argument("--passengers", default=None, help="Passenger CSV (default: env PASSENGER_DATA_PATH or data/raw/passengers.csv)")
    parser.add_argument("--outputs", default=None, help="Output directory (default: outputs/analytics)")
    parser.add_argument("--hub", default=None, help="Hub location code for the longest-run metric (default: env FLIGHT_HUB or uk)")
    parser.add_argument("--min-shared", type=int, default=None, help="Minimum flights shared by a pair (default: env FLIGHT_MIN_SHARED or 3)")
    parser.add_argument("--from-date", type=_iso_date, default=None, help="Only pair flights on or after this date")
    parser.add_argument("--to-date", type=_iso_date, default=None, help="Only pair flights on or before this date")
    parser.add_argument("--top", type=int, default=None, help="Rows kept per table, <= 0 keeps all (default: env FLIGHT_TOP_N or 100)")
    parser.add_argument("--no-figures", action="store_true", help="Skip figure output")
    parser.add_argument("--log-level", default=None)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Execute all analytics and save outputs. (执行全部分析并保存输出)"""
    args = _parse_args(argv)
    # CLI values win; env vars fill the rest / 命令行参数优先，环境变量补全其余
    settings = load_settings(hub=args.hub, min_shared=args.min_shared, top_n=args.top, log_level=args.log_level)
    setup_logging(settings.log_level)

    # Fail fast on configuration before touching data / 在读取数据前校验配置
    if settings.min_shared < 1:
        raise ValueError(f"min_shared must be >= 1, got {settings.min_shared}")
    if args.from_date and args.to_date and args.from_date > args.to_date:
        raise ValueError("--from-date is after --to-date")

    paths = get_paths(outputs=args.outputs)
    flights_ds = load_flights(args.flights or paths.flights_csv)
    passengers_ds = load_passengers(args.passengers or paths.passengers_csv)
    if flights_ds is None or passengers_ds is None:
        logger.error("Input data unavailable; nothing to analyse")
        return 1
    if not flights_ds.records:
        raise ValueError("No valid flight records after validation")
    if not passengers_ds.records:
        raise ValueError("No valid passenger records after validation")

    flights = flights_ds.records
    directory = build_directory(passengers_ds.records)

    monthly = monthly_flight_counts(flights)
    flyers = frequent_flyers(flights, directory)
    runs = longest_runs(flights, settings.hub)
    windowed = args.from_date is not None or args.to_date is not None
    pairs = co_travel_pairs(flights, settings.min_shared, start=args.from_date, end=args.to_date)
    logger.info(
        "Computed %d months, %d flyers, %d runs, %d pairs",
        len(monthly), len(flyers.ranking), len(runs), len(pairs),
    )

    tables = {
        "monthly_flights": monthly_table(monthly),
        "frequent_flyers": top_n(frequent_flyer_table(flyers), settings.top_n),
        "longest_run": top_n(longest_run_table(runs), settings.top_n),
        "co_travel_pairs": top_n(co_travel_table(pairs, with_dates=windowed), settings.top_n),
    }
    warnings = warnings_table(flights_ds.failures + passengers_ds.failures, flyers.errors)
    write_tables({**tables, "warnings": warnings}, paths.tables)

    if not args.no_figures:
        monthly_bar(monthly, "Flights per Month", paths.figures / "monthly_flights.png")
        span_hist([s for _, s in runs], f"Longest Run without {settings.hub}", paths.figures / "longest_run.png")

    print_summary(tables, warnings)
    print("[OK] analytics finished")
    print("Outputs:", paths.outputs_root)
    return 0


if __name__ == "__main__":
    sys.exit(main())
