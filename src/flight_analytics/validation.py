"""Row validation: raw CSV fields to typed records. (行级校验：将原始 CSV 字段转换为类型化记录)

Every parser either returns a record or raises :class:`RecordError` with a
human-readable reason. :func:`validate_rows` turns those errors into
:class:`ParseFailure` entries so one bad row never aborts a batch.
"""
from __future__ import annotations

import logging
import re
from datetime import date
from typing import Callable, Hashable, Iterable, List, Sequence, Set, Tuple, TypeVar

from .models import Flight, ParseFailure, Passenger

logger = logging.getLogger(__name__)

T = TypeVar("T")

PASSENGER_FIELDS = ("passengerId", "firstName", "lastName")
FLIGHT_FIELDS = ("passengerId", "flightId", "from", "to", "date")

# dd-MM-yy, two-digit year always in the 2000s / 两位年份一律视为 2000 年代
_DATE_RE = re.compile(r"^([0-9]{2})-([0-9]{2})-([0-9]{2})$")
_INT_RE = re.compile(r"^[+-]?[0-9]+$")

# Ids are held in int64 columns downstream / 下游以 int64 列存储 ID
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class RecordError(ValueError):
    """Raised when a raw row cannot be turned into a record."""


def _require_fields(fields: Sequence[str], names: Sequence[str]) -> List[str]:
    """Check field count and non-emptiness; return stripped values. (检查字段数量与非空，返回去除空白后的值)"""
    if len(fields) != len(names):
        raise RecordError(f"expected {len(names)} fields, got {len(fields)}")
    values = [("" if f is None else str(f)).strip() for f in fields]
    empty = [n for n, v in zip(names, values) if not v]
    if empty:
        raise RecordError(f"empty field(s): {', '.join(empty)}")
    return values


def parse_int(text: str, name: str) -> int:
    """Parse an ASCII integer field within the int64 range. (解析 int64 范围内的 ASCII 整数字段)"""
    if not _INT_RE.match(text):
        raise RecordError(f"{name} is not an integer: {text!r}")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise RecordError(f"{name} out of 64-bit range: {text!r}")
    return value


def parse_date(text: str) -> date:
    """Parse ``dd-MM-yy`` as a date in 2000-2099. (将 dd-MM-yy 解析为 2000-2099 年间的日期)"""
    m = _DATE_RE.match(text.strip())
    if not m:
        raise RecordError(f"date does not match dd-MM-yy: {text!r}")
    day, month, yy = (int(g) for g in m.groups())
    try:
        return date(2000 + yy, month, day)
    except ValueError as e:
        raise RecordError(f"invalid calendar date {text!r}: {e}") from None


def parse_passenger(fields: Sequence[str]) -> Passenger:
    """Build a Passenger from ``id, firstName, lastName``. (由 id, firstName, lastName 构建乘客记录)"""
    pid, first, last = _require_fields(fields, PASSENGER_FIELDS)
    return Passenger(parse_int(pid, "passengerId"), first, last)


def parse_flight(fields: Sequence[str]) -> Flight:
    """Build a Flight from ``passengerId, flightId, from, to, date``. (由五个字段构建航班记录)"""
    pid, fid, origin, dest, day = _require_fields(fields, FLIGHT_FIELDS)
    return Flight(
        passenger_id=parse_int(pid, "passengerId"),
        flight_id=parse_int(fid, "flightId"),
        origin=origin,
        destination=dest,
        date=parse_date(day),
    )


def validate_rows(
    rows: Iterable[Tuple[int, Sequence[str]]],
    parser: Callable[[Sequence[str]], T],
    source: str,
    unique_key: Callable[[T], Hashable] | None = None,
) -> Tuple[List[T], List[ParseFailure]]:
    """Apply a row parser, collecting failures instead of raising. (逐行解析，收集失败而非中断)

    With ``unique_key`` set, a record whose key was already seen is rejected
    as a duplicate; the first occurrence is kept.
    """
    records: List[T] = []
    failures: List[ParseFailure] = []
    seen: Set[Hashable] = set()
    for line_no, fields in rows:
        try:
            rec = parser(fields)
            if unique_key is not None:
                key = unique_key(rec)
                if key in seen:
                    raise RecordError(f"duplicate key {key!r}")
                seen.add(key)
        except RecordError as e:
            failures.append(ParseFailure(source, line_no, str(e), tuple(fields)))
            logger.warning("%s line %d rejected: %s", source, line_no, e)
            continue
        records.append(rec)
    return records, failures


def validate_passengers(rows: Iterable[Tuple[int, Sequence[str]]], source: str = "passengers"):
    """Validate passenger rows; repeated ids are rejected. (校验乘客行，重复 ID 视为失败)"""
    return validate_rows(rows, parse_passenger, source, unique_key=lambda p: p.passenger_id)


def validate_flights(rows: Iterable[Tuple[int, Sequence[str]]], source: str = "flights"):
    """Validate flight rows. (校验航班行)"""
    return validate_rows(rows, parse_flight, source)
