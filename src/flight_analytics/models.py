"""Immutable record types shared by the loader, engine and reporter. (加载器、分析引擎与报表共用的不可变记录类型)"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class Passenger:
    """One row of the passenger directory. (乘客目录中的一行)"""
    passenger_id: int
    first_name: str
    last_name: str


@dataclass(frozen=True)
class Flight:
    """One passenger's leg on one flight instance. (一名乘客在某一航班上的一段行程)

    Several records share a ``flight_id``, one per passenger aboard.
    ``origin == destination`` is tolerated.
    """
    passenger_id: int
    flight_id: int
    origin: str
    destination: str
    date: date


@dataclass(frozen=True)
class ParseFailure:
    """A source row rejected by the validator. (被校验器拒绝的源数据行)"""
    source: str
    line_no: int
    reason: str
    fields: Tuple[str, ...] = ()


@dataclass(frozen=True)
class UnknownPassenger:
    """Flights referencing a passenger id missing from the directory. (引用了目录中不存在的乘客 ID 的航班)"""
    passenger_id: int
    flight_count: int


@dataclass(frozen=True)
class FrequentFlyerReport:
    """Ranking plus the referential-integrity errors found while building it. (排名结果及构建过程中发现的引用完整性错误)"""
    ranking: List[Tuple[Passenger, int]] = field(default_factory=list)
    errors: List[UnknownPassenger] = field(default_factory=list)


@dataclass(frozen=True)
class CoTravelPair:
    """Two passengers seen together on ``count`` flights. (共同乘坐 count 次航班的两名乘客)"""
    passenger_ids: Tuple[int, int]
    count: int
    first_date: date
    last_date: date


def build_directory(passengers: Iterable[Passenger]) -> Dict[int, Passenger]:
    """Key passengers by id; the first record for an id wins. (按 ID 建立乘客目录，同一 ID 保留首条记录)"""
    directory: Dict[int, Passenger] = {}
    for p in passengers:
        directory.setdefault(p.passenger_id, p)
    return directory
