"""Chart-ready series derived from the loaded datasets."""

from .grouped_bars import BarKey, GroupedBars, build_grouped_bars
from .timeline import TimeSeries, build_time_series

__all__ = [
    "BarKey",
    "GroupedBars",
    "TimeSeries",
    "build_grouped_bars",
    "build_time_series",
]
