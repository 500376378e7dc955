"""Frequent-flyer ranking with per-passenger referential-integrity errors. (常旅客排名，并逐个报告引用完整性错误)"""
from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Tuple

from ..models import Flight, FrequentFlyerReport, Passenger, UnknownPassenger
from .frame import flights_frame

logger = logging.getLogger(__name__)


def flight_counts_by_passenger(flights: Iterable[Flight]) -> List[Tuple[int, int]]:
    """(passenger_id, count) sorted by count desc, then id asc. (按次数降序、ID 升序排列)"""
    d = flights_frame(flights)
    if d.empty:
        return []
    counts = d.groupby("passenger_id").size().rename("n").reset_index()
    counts = counts.sort_values(["n", "passenger_id"], ascending=[False, True], kind="mergesort")
    return [(int(pid), int(n)) for pid, n in counts.itertuples(index=False)]


def frequent_flyers(flights: Iterable[Flight], directory: Mapping[int, Passenger]) -> FrequentFlyerReport:
    """Rank passengers by number of flights taken. (按乘机次数对乘客排名)

    Ids missing from ``directory`` are reported in ``errors`` and left out of
    the ranking; every other passenger is ranked normally.
    """
    ranking: List[Tuple[Passenger, int]] = []
    errors: List[UnknownPassenger] = []
    for pid, n in flight_counts_by_passenger(flights):
        passenger = directory.get(pid)
        if passenger is None:
            errors.append(UnknownPassenger(pid, n))
            continue
        ranking.append((passenger, n))

    errors.sort(key=lambda e: e.passenger_id)
    for e in errors:
        logger.warning("passengerId %d has %d flight(s) but no passenger record", e.passenger_id, e.flight_count)
    return FrequentFlyerReport(ranking=ranking, errors=errors)
