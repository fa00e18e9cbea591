from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Observation:
    """Single numeric measurement tagged with its categorical group."""

    group: str
    value: float


@dataclass(frozen=True)
class PlatformAverage:
    """Average like count for one platform and post type."""

    platform: str
    post_type: str
    avg_likes: float


@dataclass(frozen=True)
class DatedAverage:
    """Average like count observed on a single day."""

    day: date
    avg_likes: float
    raw_date: str
