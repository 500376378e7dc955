"""Matplotlib-only helpers to produce consistent figures. (仅使用 Matplotlib 的图表工具，保证风格一致)"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence
from cycler import cycler
import matplotlib as mpl
import matplotlib.pyplot as plt


@dataclass(frozen=True)
class PlotColors:
    primary: str = "#2C7FB8"
    accent: str = "#D95F0E"
    muted: str = "#8C8C8C"
    grid: str = "#E6E6E6"


PLOT_COLORS = PlotColors()
PLOT_PALETTE = (
    PLOT_COLORS.primary,
    PLOT_COLORS.accent,
    "#2CA25F",
    "#9ECAE1",
)


def apply_style() -> None:
    """Apply a consistent Matplotlib style across figures."""
    mpl.rcParams.update(
        {
            "figure.figsize": (6.4, 4.0),
            "axes.grid": True,
            "grid.color": PLOT_COLORS.grid,
            "grid.alpha": 0.6,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "axes.titlesize": 12,
            "axes.labelsize": 10,
            "xtick.labelsize": 9,
            "ytick.labelsize": 9,
            "legend.fontsize": 9,
            "font.family": "DejaVu Sans",
            "axes.prop_cycle": cycler("color", PLOT_PALETTE),
        }
    )


def _ensure_dir(p: str | Path):
    """Create parent directories for an output path. (为输出路径创建父目录)"""
    Path(p).parent.mkdir(parents=True, exist_ok=True)


def _save(fig, outfile: str | Path, show: bool) -> None:
    _ensure_dir(outfile)
    plt.tight_layout()
    plt.savefig(outfile, dpi=150)
    if show:
        plt.show()
    # Close to prevent figure accumulation / 关闭图像以避免内存堆积
    plt.close(fig)


def monthly_bar(
    counts: Mapping[int, int],
    title: str,
    outfile: str | Path,
    show: bool = False,
):
    """Render and save flights per month as a bar chart. (绘制并保存按月航班量柱状图)"""
    apply_style()
    fig = plt.figure()
    months = sorted(counts)
    plt.bar(
        [calendar.month_abbr[m] for m in months],
        [counts[m] for m in months],
        color=PLOT_COLORS.primary,
    )
    plt.title(title)
    plt.xlabel("Month")
    plt.ylabel("Number of Flights")
    _save(fig, outfile, show)


def span_hist(
    spans: Sequence[int],
    title: str,
    outfile: str | Path,
    xlabel: str = "Longest run",
    show: bool = False,
):
    """Render and save a histogram of integer spans, one bin per value. (绘制并保存整数跨度直方图，每个取值一个区间)"""
    apply_style()
    fig = plt.figure()
    if spans:
        lo, hi = min(spans), max(spans)
        bins = [b - 0.5 for b in range(lo, hi + 2)]
        plt.hist(spans, bins=bins, color=PLOT_COLORS.primary, edgecolor="white")
    plt.title(title)
    plt.xlabel(xlabel)
    plt.ylabel("Passengers")
    _save(fig, outfile, show)
