"""Central config: repo paths, data sources and analytics settings. (中央配置：仓库路径、数据源与分析参数)"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os


@dataclass(frozen=True)
class Paths:
    """Resolved path bundle for a run. (一次运行的路径集合)"""
    repo_root: Path
    data_raw: Path
    flights_csv: Path
    passengers_csv: Path
    outputs_root: Path
    figures: Path
    tables: Path


@dataclass(frozen=True)
class Settings:
    """Analytics parameters; the engine receives them as arguments. (分析参数，以参数形式传入分析引擎)"""
    hub: str = "uk"
    min_shared: int = 3
    top_n: int = 100
    log_level: str = "INFO"


def repo_root() -> Path:
    """Return repository root by searching for pyproject.toml. (通过查找 pyproject.toml 来定位仓库根目录)"""
    here = Path(__file__).resolve()
    for p in [here] + list(here.parents):
        if (p / "pyproject.toml").exists():
            return p
    return Path.cwd()


def _env_path(var: str, default: Path) -> Path:
    """Path from an env var, falling back to a default. (从环境变量读取路径，缺省时使用默认值)"""
    env = os.getenv(var)
    if env:
        return Path(env).expanduser()
    return default


def _env_int(var: str, default: int) -> int:
    raw = os.getenv(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_data_paths() -> tuple[Path, Path]:
    """Resolve (flights_csv, passengers_csv) from env or data/raw defaults. (从环境变量或 data/raw 默认位置解析两个数据源路径)"""
    data_raw = repo_root() / "data" / "raw"
    flights = _env_path("FLIGHT_DATA_PATH", data_raw / "flightData.csv")
    passengers = _env_path("PASSENGER_DATA_PATH", data_raw / "passengers.csv")
    return flights, passengers


def get_paths(create: bool = True, outputs: Path | str | None = None) -> Paths:
    """Return standardized paths for an analytics run. (返回分析运行的标准路径集合)"""
    root = repo_root()
    data_raw = root / "data" / "raw"
    outputs_root = Path(outputs).expanduser() if outputs else root / "outputs" / "analytics"
    figures = outputs_root / "figures"
    tables = outputs_root / "tables"

    if create:
        # Ensure standard folders exist for outputs / 确保输出目录存在
        for d in (outputs_root, figures, tables):
            d.mkdir(parents=True, exist_ok=True)

    flights_csv, passengers_csv = get_data_paths()
    return Paths(
        repo_root=root,
        data_raw=data_raw,
        flights_csv=flights_csv,
        passengers_csv=passengers_csv,
        outputs_root=outputs_root,
        figures=figures,
        tables=tables,
    )


def load_settings(
    hub: str | None = None,
    min_shared: int | None = None,
    top_n: int | None = None,
    log_level: str | None = None,
) -> Settings:
    """Settings from explicit values, falling back to env vars. (优先使用显式参数，其次读取环境变量)

    An env var is only read when its value is not given, so a malformed
    variable does not matter once it is overridden.
    """
    if hub is None:
        hub = os.getenv("FLIGHT_HUB", Settings.hub)
    hub = hub.strip()
    if not hub:
        raise ValueError("FLIGHT_HUB must not be empty")
    if min_shared is None:
        min_shared = _env_int("FLIGHT_MIN_SHARED", Settings.min_shared)
    if top_n is None:
        top_n = _env_int("FLIGHT_TOP_N", Settings.top_n)
    if log_level is None:
        log_level = os.getenv("FLIGHT_LOG_LEVEL", Settings.log_level)
    return Settings(
        hub=hub,
        min_shared=min_shared,
        top_n=top_n,
        log_level=log_level.strip().upper() or "INFO",
    )
