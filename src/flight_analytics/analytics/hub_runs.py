"""Longest run of travel that never touches a hub location. (不经过枢纽地点的最长连续行程)

A passenger's flights are put in chronological order and cut at every flight
that departs from or arrives at the hub. The hub-touching flight itself belongs
to no run. A run's span is the number of distinct locations among the
endpoints of its flights; the passenger's result is the largest span.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from ..models import Flight
from .frame import flights_frame


def _check_hub(hub: str) -> None:
    if not isinstance(hub, str) or not hub.strip():
        raise ValueError("hub must be a non-empty location code")


def touches_hub(flight: Flight, hub: str) -> bool:
    """True if the flight departs from or arrives at the hub. (航班是否从枢纽出发或到达枢纽)"""
    return flight.origin == hub or flight.destination == hub


def chronological(flights: Iterable[Flight]) -> List[Flight]:
    """Order by date, then flight_id; equal keys keep input order. (按日期、再按航班号排序，键相同时保持输入顺序)"""
    return sorted(flights, key=lambda f: (f.date, f.flight_id))


def split_runs(flights: Sequence[Flight], hub: str) -> List[List[Flight]]:
    """Cut an ordered flight sequence into maximal hub-free runs. (将有序航班序列切分为不含枢纽的最大连续段)

    Hub-touching flights close the open run and are dropped; no empty run is
    ever emitted, whether hub flights lead, trail or repeat.
    """
    runs: List[List[Flight]] = []
    current: List[Flight] = []
    for f in flights:
        if touches_hub(f, hub):
            if current:
                runs.append(current)
            current = []
        else:
            current.append(f)
    if current:
        runs.append(current)
    return runs


def run_span(run: Iterable[Flight]) -> int:
    """Distinct location codes across all endpoints of a run. (一段行程中所有端点的不同地点数)"""
    places = set()
    for f in run:
        places.add(f.origin)
        places.add(f.destination)
    return len(places)


def _max_span(ordered: Sequence[Flight], hub: str) -> int:
    return max((run_span(r) for r in split_runs(ordered, hub)), default=0)


def longest_hub_free_span(flights: Iterable[Flight], hub: str) -> int:
    """Largest run span for one passenger's flights; 0 if there is no run. (单个乘客的最大行程跨度，无行程段时为 0)"""
    _check_hub(hub)
    return _max_span(chronological(flights), hub)


def longest_runs(flights: Iterable[Flight], hub: str) -> List[Tuple[int, int]]:
    """(passenger_id, max_span) for every passenger with a non-zero span. (每名跨度非零乘客的最大跨度)

    Sorted by span descending, then passenger_id ascending.
    """
    _check_hub(hub)
    flights = list(flights)
    d = flights_frame(flights)
    if d.empty:
        return []
    # Chronological per passenger; seq keeps input order for full ties / 按乘客排序，seq 保证完全相同键时的输入顺序
    d = d.sort_values(["passenger_id", "date", "flight_id", "seq"], kind="mergesort")

    out: List[Tuple[int, int]] = []
    for pid, seq in d.groupby("passenger_id", sort=True)["seq"]:
        span = _max_span([flights[i] for i in seq], hub)
        if span > 0:
            out.append((int(pid), span))
    out.sort(key=lambda t: (-t[1], t[0]))
    return out
