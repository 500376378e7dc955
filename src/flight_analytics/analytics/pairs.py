"""Passengers who share flights. (共同乘机的乘客对)"""
from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

import pandas as pd

from ..models import CoTravelPair, Flight
from .frame import flights_frame


def _check_threshold(min_shared) -> None:
    if isinstance(min_shared, bool) or not isinstance(min_shared, int):
        raise ValueError(f"min_shared must be an integer, got {min_shared!r}")
    if min_shared < 1:
        raise ValueError(f"min_shared must be >= 1, got {min_shared}")


def co_travel_pairs(
    flights: Iterable[Flight],
    min_shared: int,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[CoTravelPair]:
    """Pairs of passengers aboard at least ``min_shared`` common flights. (至少共同乘坐 min_shared 次航班的乘客对)

    Flights are grouped by ``flight_id``; each group yields every unordered
    pair of distinct passengers with the smaller id first. ``start`` and
    ``end`` (inclusive) restrict which flights are considered.
    Sorted by count descending, then by both ids ascending.
    """
    _check_threshold(min_shared)
    if start is not None and end is not None and start > end:
        raise ValueError(f"start {start} is after end {end}")

    d = flights_frame(flights)
    if start is not None:
        d = d[d["date"] >= pd.Timestamp(start)]
    if end is not None:
        d = d[d["date"] <= pd.Timestamp(end)]
    if d.empty:
        return []

    # One row per passenger per flight; a flight's date is its earliest record / 每个航班每名乘客仅一行
    aboard = (
        d.groupby(["flight_id", "passenger_id"], as_index=False)["date"].min()
    )
    m = aboard.merge(aboard, on="flight_id", suffixes=("_1", "_2"))
    m = m[m["passenger_id_1"] < m["passenger_id_2"]].copy()
    if m.empty:
        return []
    m["date"] = m[["date_1", "date_2"]].min(axis=1)

    g = (
        m.groupby(["passenger_id_1", "passenger_id_2"])
        .agg(n_flights=("flight_id", "size"), first_date=("date", "min"), last_date=("date", "max"))
        .reset_index()
    )
    g = g[g["n_flights"] >= min_shared]
    g = g.sort_values(
        ["n_flights", "passenger_id_1", "passenger_id_2"],
        ascending=[False, True, True], kind="mergesort",
    )
    return [
        CoTravelPair(
            passenger_ids=(int(r.passenger_id_1), int(r.passenger_id_2)),
            count=int(r.n_flights),
            first_date=r.first_date.date(),
            last_date=r.last_date.date(),
        )
        for r in g.itertuples(index=False)
    ]
