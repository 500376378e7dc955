"""Monthly flight volume. (按月航班量统计)"""
from __future__ import annotations

from typing import Dict, Iterable

from ..models import Flight
from .frame import flights_frame


def monthly_flight_counts(flights: Iterable[Flight]) -> Dict[int, int]:
    """Count flight records per calendar month number, ignoring the year. (按月份编号统计航班记录数，忽略年份)

    Months from different years are merged; only months with at least one
    record appear, in ascending order.
    """
    d = flights_frame(flights)
    if d.empty:
        return {}
    counts = d["date"].dt.month.value_counts().sort_index()
    return {int(m): int(n) for m, n in counts.items()}
