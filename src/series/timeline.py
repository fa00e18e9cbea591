from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Tuple

from src.datahub.records import DatedAverage
from src.metrics.extent import extent, maximum


@dataclass(frozen=True)
class TimeSeries:
    """Daily averages ordered by date, plus the domains of both axes."""

    points: Tuple[DatedAverage, ...]
    date_extent: Tuple[date, date]
    value_max: float

    @property
    def days(self) -> Tuple[date, ...]:
        return tuple(point.day for point in self.points)

    @property
    def values(self) -> Tuple[float, ...]:
        return tuple(point.avg_likes for point in self.points)


def build_time_series(rows: Iterable[DatedAverage]) -> TimeSeries:
    """Sort rows by day (stable for equal days) and derive the axis domains."""
    points = tuple(sorted(rows, key=lambda point: point.day))
    if not points:
        raise ValueError("No dated averages supplied for the time series.")

    return TimeSeries(
        points=points,
        date_extent=extent(point.day for point in points),
        value_max=maximum(point.avg_likes for point in points),
    )
