"""Tabular presentation of analytics results. (分析结果的表格化呈现)"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

import pandas as pd

from .models import CoTravelPair, FrequentFlyerReport, ParseFailure, UnknownPassenger

WARNING_COLUMNS = ["kind", "source", "line", "detail"]


def monthly_table(counts: Mapping[int, int]) -> pd.DataFrame:
    """Month / Number of Flights, ascending by month. (月份与航班数，按月份升序)"""
    rows = sorted(counts.items())
    return pd.DataFrame(rows, columns=["Month", "Number of Flights"])


def frequent_flyer_table(report: FrequentFlyerReport) -> pd.DataFrame:
    """One row per ranked passenger, in ranking order. (每名上榜乘客一行，保持排名顺序)"""
    rows = [(p.passenger_id, n, p.first_name, p.last_name) for p, n in report.ranking]
    return pd.DataFrame(rows, columns=["Passenger ID", "Number of Flights", "First name", "Last name"])


def longest_run_table(runs: Sequence[Tuple[int, int]]) -> pd.DataFrame:
    return pd.DataFrame(list(runs), columns=["Passenger ID", "Longest Run"])


def co_travel_table(pairs: Iterable[CoTravelPair], with_dates: bool = False) -> pd.DataFrame:
    """Pair table; ``with_dates`` adds the first/last shared flight date. (乘客对表；with_dates 时附加首末共同航班日期)"""
    cols = ["Passenger 1 ID", "Passenger 2 ID", "Number of flights together"]
    if with_dates:
        cols += ["From", "To"]
    rows = []
    for p in pairs:
        row = [p.passenger_ids[0], p.passenger_ids[1], p.count]
        if with_dates:
            row += [p.first_date.isoformat(), p.last_date.isoformat()]
        rows.append(row)
    return pd.DataFrame(rows, columns=cols)


def warnings_table(
    failures: Iterable[ParseFailure] = (),
    unknown: Iterable[UnknownPassenger] = (),
) -> pd.DataFrame:
    """Rejected rows and unresolved passenger ids as one table. (将被拒绝的行与无法解析的乘客 ID 合并为一张表)"""
    rows: List[tuple] = [("parse", f.source, f.line_no, f.reason) for f in failures]
    rows += [
        ("unknown_passenger", "", None, f"passengerId {u.passenger_id} ({u.flight_count} flights)")
        for u in unknown
    ]
    out = pd.DataFrame(rows, columns=WARNING_COLUMNS)
    out["line"] = out["line"].astype("Int64")
    return out


def top_n(df: pd.DataFrame, n: int) -> pd.DataFrame:
    """First n rows; n <= 0 keeps everything. (取前 n 行；n <= 0 时保留全部)"""
    if n <= 0:
        return df
    return df.head(n)


def write_tables(tables: Mapping[str, pd.DataFrame], outdir: Path | str) -> List[Path]:
    """Write each table to ``<outdir>/<name>.csv``. (将每张表写入 <outdir>/<name>.csv)"""
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    written = []
    for name, df in tables.items():
        path = outdir / f"{name}.csv"
        df.to_csv(path, index=False)
        written.append(path)
    return written


def format_warnings(warnings: pd.DataFrame) -> List[str]:
    """Render warning rows as console lines. (将告警行渲染为控制台文本)"""
    lines = []
    for r in warnings.itertuples(index=False):
        where = f"{r.source}:{r.line}" if not pd.isna(r.line) else r.source
        where = f" {where}" if where else ""
        lines.append(f"[WARN] {r.kind}{where} - {r.detail}")
    return lines


def print_summary(tables: Dict[str, pd.DataFrame], warnings: pd.DataFrame, head: int = 10) -> None:
    """Print each table's head followed by all warnings. (打印每张表的前几行及全部告警)"""
    for name, df in tables.items():
        print(f"== {name} ({len(df)} rows)")
        if df.empty:
            print("(no rows)")
        else:
            print(df.head(head).to_string(index=False))
        print()
    for line in format_warnings(warnings):
        print(line)
