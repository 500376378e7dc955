"""Record-to-DataFrame conversion shared by the analytics. (各分析模块共用的记录到 DataFrame 转换)"""
from __future__ import annotations

from dataclasses import astuple
from typing import Iterable

import pandas as pd

from ..models import Flight

FLIGHT_COLUMNS = ["passenger_id", "flight_id", "origin", "destination", "date"]


def flights_frame(flights: Iterable[Flight]) -> pd.DataFrame:
    """Build a fresh frame of flight records; input order is kept in ``seq``. (构建航班记录的新 DataFrame，seq 列保留输入顺序)"""
    d = pd.DataFrame([astuple(f) for f in flights], columns=FLIGHT_COLUMNS)
    d["passenger_id"] = d["passenger_id"].astype("int64")
    d["flight_id"] = d["flight_id"].astype("int64")
    d["date"] = pd.to_datetime(d["date"])
    d["seq"] = range(len(d))
    return d
