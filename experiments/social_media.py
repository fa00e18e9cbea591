from __future__ import annotations

from pathlib import Path
from typing import Dict

from src.datahub import load_dated_averages, load_observations, load_platform_averages
from src.datahub.config import SOCIAL_MEDIA, SOCIAL_MEDIA_TIME
from src.metrics.rollup import GroupSummary, summarize
from src.series import GroupedBars, TimeSeries, build_grouped_bars, build_time_series


def run_boxplot_stats(
    csv_path: Path,
    group_column: str = SOCIAL_MEDIA["group_column"],
    value_column: str = SOCIAL_MEDIA["value_column"],
) -> Dict[str, GroupSummary]:
    """Load grouped like counts and compute the per-group five-number summaries."""
    print(f"[rollup] Summarizing {value_column} by {group_column} from {csv_path}")
    observations = list(load_observations(csv_path, group_column=group_column, value_column=value_column))
    summaries = summarize(observations)
    for group, summary in summaries.items():
        print(
            f"[rollup] {group}: min={summary.minimum:g} q1={summary.q1:g} "
            f"median={summary.median:g} q3={summary.q3:g} max={summary.maximum:g}"
        )
    print(f"[rollup] Finished ({len(summaries)} groups from {len(observations)} observations).")
    return summaries


def run_grouped_bars(csv_path: Path) -> GroupedBars:
    """Load platform averages and arrange them for a side-by-side bar chart."""
    print(f"[series] Building grouped bars from {csv_path}")
    bars = build_grouped_bars(load_platform_averages(csv_path))
    print(
        f"[series] {len(bars.platforms)} platforms x {len(bars.post_types)} post types; "
        f"max average={bars.value_max:g}"
    )
    return bars


def run_time_series(csv_path: Path, date_format: str = SOCIAL_MEDIA_TIME["date_format"]) -> TimeSeries:
    """Load daily averages and order them into a time series."""
    print(f"[series] Building time series from {csv_path}")
    series = build_time_series(load_dated_averages(csv_path, date_format=date_format))
    start, end = series.date_extent
    print(
        f"[series] {len(series.points)} points from {start.isoformat()} to {end.isoformat()}; "
        f"max average={series.value_max:g}"
    )
    return series
