"""CSV loading for the flight and passenger sources. (航班与乘客 CSV 数据源的读取)"""
from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple

from .models import ParseFailure
from .validation import validate_flights, validate_passengers

logger = logging.getLogger(__name__)

Row = Tuple[int, List[str]]


@dataclass(frozen=True)
class Dataset:
    """Validated records from one source plus the rows it rejected. (单个数据源的有效记录及被拒绝的行)"""
    records: Tuple = ()
    failures: Tuple[ParseFailure, ...] = ()


def iter_rows(lines: Sequence[str] | Iterator[str]) -> Iterator[Row]:
    """Tokenize CSV lines, dropping the header and blank lines. (切分 CSV 行，丢弃表头与空行)

    Yields ``(line_no, fields)`` where ``line_no`` is 1-based and the header is line 1.
    """
    reader = csv.reader(lines)
    for fields in reader:
        line_no = reader.line_num
        if line_no == 1:
            continue
        if not fields or all(not f.strip() for f in fields):
            continue
        yield line_no, fields


def read_rows(path: Path | str) -> List[Row] | None:
    """Read raw rows from a CSV file; ``None`` if the source is unavailable. (读取 CSV 原始行；数据源不可用时返回 None)"""
    path = Path(path).expanduser()
    if not path.is_file():
        logger.error("Source not found: %s", path)
        return None
    try:
        with path.open(newline="", encoding="utf-8") as fh:
            rows = list(iter_rows(fh))
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", path, e)
        return None
    logger.info("Read %d rows from %s", len(rows), path)
    return rows


def load_passengers(path: Path | str) -> Dataset | None:
    """Load and validate the passenger directory source. (读取并校验乘客目录)"""
    rows = read_rows(path)
    if rows is None:
        return None
    records, failures = validate_passengers(rows, source=Path(path).name)
    logger.info("Loaded %d passengers (%d rejected)", len(records), len(failures))
    return Dataset(tuple(records), tuple(failures))


def load_flights(path: Path | str) -> Dataset | None:
    """Load and validate the flight source. (读取并校验航班数据)"""
    rows = read_rows(path)
    if rows is None:
        return None
    records, failures = validate_flights(rows, source=Path(path).name)
    logger.info("Loaded %d flight records (%d rejected)", len(records), len(failures))
    return Dataset(tuple(records), tuple(failures))

