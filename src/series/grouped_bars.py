from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple

import pandas as pd

from src.datahub.records import PlatformAverage
from src.metrics.extent import maximum

BarKey = Tuple[str, str]


@dataclass(frozen=True)
class GroupedBars:
    """Platform x post-type averages with the category orders used for display."""

    platforms: Tuple[str, ...]
    post_types: Tuple[str, ...]
    values: Mapping[BarKey, float]
    value_max: float

    def matrix(self) -> pd.DataFrame:
        """One row per platform and one column per post type; missing pairs are NaN."""
        frame = pd.DataFrame(
            index=pd.Index(self.platforms, name="platform"),
            columns=pd.Index(self.post_types, name="post_type"),
            dtype=float,
        )
        for (platform, post_type), value in self.values.items():
            frame.loc[platform, post_type] = value
        return frame


def build_grouped_bars(rows: Iterable[PlatformAverage]) -> GroupedBars:
    """Collect averages keyed by (platform, post type); a repeated pair keeps its last value."""
    values: Dict[BarKey, float] = {}
    platforms: Dict[str, None] = {}
    post_types: Dict[str, None] = {}
    for row in rows:
        platforms.setdefault(row.platform, None)
        post_types.setdefault(row.post_type, None)
        values[(row.platform, row.post_type)] = row.avg_likes

    if not values:
        raise ValueError("No platform averages supplied for the grouped bar series.")

    return GroupedBars(
        platforms=tuple(platforms),
        post_types=tuple(post_types),
        values=values,
        value_max=maximum(values.values()),
    )
