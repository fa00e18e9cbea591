"""Tabular exports for rollup summaries and chart series."""

from __future__ import annotations

from typing import Mapping, Optional

import pandas as pd

from src.metrics.rollup import GroupSummary
from src.series import GroupedBars, TimeSeries
from .save_config import ExportDestinations

SUMMARY_COLUMNS = ["group", "min", "q1", "median", "q3", "max"]


def _emit(df: pd.DataFrame, save_to: Optional[ExportDestinations]) -> None:
    if save_to:
        written = save_to.write(df)
        names = ", ".join(path.name for path in written)
        print(f"[exports] Wrote {names} ({len(df)} rows) → {save_to.directory}")
    else:
        print(df.to_string(index=False))


def group_summaries_frame(summaries: Mapping[str, GroupSummary]) -> pd.DataFrame:
    rows = [{"group": group, **summary.as_dict()} for group, summary in summaries.items()]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def grouped_bars_frame(bars: GroupedBars) -> pd.DataFrame:
    """Flatten the platform x post type matrix into long rows, skipping empty cells."""
    matrix = bars.matrix()
    rows = [
        {"platform": platform, "post_type": post_type, "avg_likes": float(matrix.at[platform, post_type])}
        for platform in matrix.index
        for post_type in matrix.columns
        if pd.notna(matrix.at[platform, post_type])
    ]
    return pd.DataFrame(rows, columns=["platform", "post_type", "avg_likes"])


def time_series_frame(series: TimeSeries) -> pd.DataFrame:
    rows = [
        {"date": point.day.isoformat(), "raw_date": point.raw_date, "avg_likes": point.avg_likes}
        for point in series.points
    ]
    return pd.DataFrame(rows, columns=["date", "raw_date", "avg_likes"])


def export_group_summaries(
    summaries: Mapping[str, GroupSummary],
    save_to: Optional[ExportDestinations] = None,
) -> None:
    """Write per-group five-number summaries, or print them when no destination is set.

    An empty mapping still produces a header-only table.
    """
    _emit(group_summaries_frame(summaries), save_to)


def export_grouped_bars(bars: GroupedBars, save_to: Optional[ExportDestinations] = None) -> None:
    _emit(grouped_bars_frame(bars), save_to)


def export_time_series(series: TimeSeries, save_to: Optional[ExportDestinations] = None) -> None:
    _emit(time_series_frame(series), save_to)
